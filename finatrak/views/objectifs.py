"""
Blueprint des objectifs d'épargne
"""
from flask import Blueprint, render_template, request, redirect, url_for, flash, g
from finatrak.services.objectifs.objectifs_service import ObjectifsService
from finatrak.utils import donnees_formulaire, resultat_json, lire_ids_json

objectifs_bp = Blueprint('objectifs', __name__)

CHAMPS = ['nom', 'montant_cible', 'montant_actuel', 'periode', 'date_fin']


@objectifs_bp.route('')
def index():
    """Objectifs du compte actif avec leur progression et leurs lignes de budget"""
    objectifs = ObjectifsService(g.user_id).fetch_objectifs_with_budget_lines(g.compte_id)
    return render_template(
        'objectifs.html',
        objectifs=objectifs,
        nb_atteints=sum(1 for o in objectifs if o['progression']['atteint']),
    )


@objectifs_bp.route('/ajouter', methods=['POST'])
def ajouter():
    donnees = donnees_formulaire(request.form, CHAMPS)
    donnees['compte_id'] = g.compte_id

    success, message = ObjectifsService(g.user_id).insert_objectif(donnees)
    flash(message, 'success' if success else 'error')
    return redirect(url_for('objectifs.index'))


@objectifs_bp.route('/<objectif_id>/modifier', methods=['POST'])
def modifier(objectif_id):
    donnees = donnees_formulaire(request.form, CHAMPS)
    donnees['id'] = objectif_id

    success, message = ObjectifsService(g.user_id).update_objectif(donnees)
    flash(message, 'success' if success else 'error')
    return redirect(url_for('objectifs.index'))


@objectifs_bp.route('/<objectif_id>/montant', methods=['POST'])
def montant(objectif_id):
    """Mise à jour rapide du montant atteint"""
    success, message = ObjectifsService(g.user_id).update_objectif_montant(
        objectif_id, request.form.get('montant_actuel')
    )
    flash(message, 'success' if success else 'error')
    return redirect(url_for('objectifs.index'))


@objectifs_bp.route('/<objectif_id>/supprimer', methods=['POST'])
def supprimer(objectif_id):
    success, message = ObjectifsService(g.user_id).delete_objectif(objectif_id)
    flash(message, 'success' if success else 'error')
    return redirect(url_for('objectifs.index'))


@objectifs_bp.route('/reorder', methods=['POST'])
def reorder():
    ids = lire_ids_json(request)
    if ids is None:
        return resultat_json(False, 'Corps de requête invalide')
    return resultat_json(*ObjectifsService(g.user_id).reorder_objectifs(ids))
