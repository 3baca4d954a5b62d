"""
Blueprint du budget (charges mensuelles et annuelles)
"""
from flask import Blueprint, render_template, request, redirect, url_for, flash, g
from finatrak.services.budget.budget_service import BudgetService, resume_budget, mensualise, annualise
from finatrak.services.categories.categories_service import CategoriesService
from finatrak.services.objectifs.objectifs_service import ObjectifsService
from finatrak.utils import donnees_formulaire, case_cochee, resultat_json, lire_ids_json

budget_bp = Blueprint('budget', __name__)

CHAMPS = ['nom', 'montant', 'frequence', 'categorie_id', 'objectif_id']


@budget_bp.route('')
def index():
    items = BudgetService(g.user_id).fetch_budget_items(g.compte_id)
    return render_template(
        'budget.html',
        items=items,
        resume=resume_budget(items),
        mensualise=mensualise,
        annualise=annualise,
        categories=CategoriesService(g.user_id).fetch_categories(),
        objectifs=ObjectifsService(g.user_id).fetch_objectifs(g.compte_id),
    )


@budget_bp.route('/ajouter', methods=['POST'])
def ajouter():
    donnees = donnees_formulaire(
        request.form, CHAMPS + ['objectif_nom', 'objectif_cible', 'objectif_periode']
    )
    donnees['compte_id'] = g.compte_id
    donnees['creer_objectif'] = case_cochee(request.form, 'creer_objectif')

    success, message = BudgetService(g.user_id).insert_budget_item(donnees)
    flash(message, 'success' if success else 'error')
    return redirect(url_for('budget.index'))


@budget_bp.route('/<item_id>/modifier', methods=['POST'])
def modifier(item_id):
    donnees = donnees_formulaire(request.form, CHAMPS)
    donnees['id'] = item_id

    success, message = BudgetService(g.user_id).update_budget_item(donnees)
    flash(message, 'success' if success else 'error')
    return redirect(url_for('budget.index'))


@budget_bp.route('/<item_id>/supprimer', methods=['POST'])
def supprimer(item_id):
    success, message = BudgetService(g.user_id).delete_budget_item(item_id)
    flash(message, 'success' if success else 'error')
    return redirect(url_for('budget.index'))


@budget_bp.route('/<item_id>/toggle', methods=['POST'])
def toggle(item_id):
    """Active / désactive une ligne : ``{"actif": true}``"""
    corps = request.get_json(silent=True)
    if not isinstance(corps, dict) or not isinstance(corps.get('actif'), bool):
        return resultat_json(False, 'Corps de requête invalide')
    return resultat_json(*BudgetService(g.user_id).toggle_budget_item(item_id, corps['actif']))


@budget_bp.route('/reorder', methods=['POST'])
def reorder():
    ids = lire_ids_json(request)
    if ids is None:
        return resultat_json(False, 'Corps de requête invalide')
    return resultat_json(*BudgetService(g.user_id).reorder_budget_items(ids))
