"""
Endpoints JSON transverses
"""
from flask import Blueprint, request, jsonify, g
from finatrak.services.comptes.comptes_service import ComptesService
from finatrak.utils.active_compte import set_active_compte_id

api_bp = Blueprint('api', __name__)


@api_bp.route('/switch-compte', methods=['POST'])
def switch_compte():
    """Change le compte actif : ``{"compteId": "<uuid>"}``"""
    corps = request.get_json(silent=True)
    if not isinstance(corps, dict):
        return jsonify({'error': 'Corps de requête invalide'}), 400

    compte_id = corps.get('compteId')
    success, message = ComptesService(g.user_id).switch_compte(compte_id)
    if not success:
        return jsonify({'error': message}), 400

    response = jsonify({'success': True})
    return set_active_compte_id(response, compte_id)
