"""
Utilitaires communs aux vues
"""
from flask import jsonify


def donnees_formulaire(form, champs):
    """Extrait les champs d'un formulaire en dict (chaînes vides → None)"""
    donnees = {}
    for champ in champs:
        valeur = form.get(champ)
        if isinstance(valeur, str):
            valeur = valeur.strip()
        donnees[champ] = valeur if valeur != '' else None
    return donnees


def case_cochee(form, champ):
    """Valeur booléenne d'une case à cocher HTML"""
    return form.get(champ) in ('1', 'on', 'true', 'oui')


def resultat_json(ok, message, **extra):
    """Réponse JSON d'une action : ``{"success": true}`` ou ``{"error": ...}`` (400)"""
    if ok:
        return jsonify({'success': True, 'message': message, **extra})
    return jsonify({'error': message}), 400


def lire_ids_json(request):
    """Liste ``ids`` d'un corps JSON ``{"ids": [...]}``, ou None si invalide"""
    corps = request.get_json(silent=True)
    if not isinstance(corps, dict):
        return None
    ids = corps.get('ids')
    if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
        return None
    return ids
