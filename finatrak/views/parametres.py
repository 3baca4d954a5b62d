"""
Blueprint des paramètres : solde initial, comptes, catégories, navigation
"""
from flask import Blueprint, render_template, request, redirect, url_for, flash, g
from finatrak.services.comptes.comptes_service import ComptesService
from finatrak.services.categories.categories_service import CategoriesService
from finatrak.services.parametres.parametres_service import ParametresService, ordonner_navigation
from finatrak.utils import donnees_formulaire, resultat_json, lire_ids_json

parametres_bp = Blueprint('parametres', __name__)

CHAMPS_COMPTE = ['nom', 'couleur', 'icone', 'solde_initial']
CHAMPS_CATEGORIE = ['nom', 'couleur', 'icone']


@parametres_bp.route('')
def index():
    parametres = ParametresService(g.user_id)
    return render_template(
        'parametres.html',
        liste_comptes=ComptesService(g.user_id).fetch_comptes(),
        categories=CategoriesService(g.user_id).fetch_categories(),
        nav_items=ordonner_navigation(parametres.fetch_nav_order()),
    )


@parametres_bp.route('/solde-initial', methods=['POST'])
def solde_initial():
    success, message = ParametresService(g.user_id).update_solde_initial(
        g.compte_id, request.form.get('montant')
    )
    flash(message, 'success' if success else 'error')
    return redirect(url_for('parametres.index'))


@parametres_bp.route('/nav-order', methods=['POST'])
def nav_order():
    """Ordre de la navigation : ``{"ids": ["dashboard", ...]}``"""
    ids = lire_ids_json(request)
    if ids is None:
        return resultat_json(False, 'Corps de requête invalide')
    return resultat_json(*ParametresService(g.user_id).update_nav_order(ids))


# --- Comptes ---

@parametres_bp.route('/comptes/ajouter', methods=['POST'])
def ajouter_compte():
    success, message = ComptesService(g.user_id).insert_compte(
        donnees_formulaire(request.form, CHAMPS_COMPTE)
    )
    flash(message, 'success' if success else 'error')
    return redirect(url_for('parametres.index'))


@parametres_bp.route('/comptes/<compte_id>/modifier', methods=['POST'])
def modifier_compte(compte_id):
    donnees = donnees_formulaire(request.form, CHAMPS_COMPTE)
    donnees['id'] = compte_id

    success, message = ComptesService(g.user_id).update_compte(donnees)
    flash(message, 'success' if success else 'error')
    return redirect(url_for('parametres.index'))


@parametres_bp.route('/comptes/<compte_id>/supprimer', methods=['POST'])
def supprimer_compte(compte_id):
    success, message = ComptesService(g.user_id).delete_compte(compte_id)
    flash(message, 'success' if success else 'error')
    return redirect(url_for('parametres.index'))


@parametres_bp.route('/comptes/reorder', methods=['POST'])
def reorder_comptes():
    ids = lire_ids_json(request)
    if ids is None:
        return resultat_json(False, 'Corps de requête invalide')
    return resultat_json(*ComptesService(g.user_id).reorder_comptes(ids))


# --- Catégories ---

@parametres_bp.route('/categories/ajouter', methods=['POST'])
def ajouter_categorie():
    success, message = CategoriesService(g.user_id).insert_categorie(
        donnees_formulaire(request.form, CHAMPS_CATEGORIE)
    )
    flash(message, 'success' if success else 'error')
    return redirect(url_for('parametres.index'))


@parametres_bp.route('/categories/<categorie_id>/modifier', methods=['POST'])
def modifier_categorie(categorie_id):
    success, message = CategoriesService(g.user_id).update_categorie(
        categorie_id, donnees_formulaire(request.form, CHAMPS_CATEGORIE)
    )
    flash(message, 'success' if success else 'error')
    return redirect(url_for('parametres.index'))


@parametres_bp.route('/categories/<categorie_id>/supprimer', methods=['POST'])
def supprimer_categorie(categorie_id):
    success, message = CategoriesService(g.user_id).delete_categorie(categorie_id)
    flash(message, 'success' if success else 'error')
    return redirect(url_for('parametres.index'))


@parametres_bp.route('/categories/reorder', methods=['POST'])
def reorder_categories():
    ids = lire_ids_json(request)
    if ids is None:
        return resultat_json(False, 'Corps de requête invalide')
    return resultat_json(*CategoriesService(g.user_id).reorder_categories(ids))
