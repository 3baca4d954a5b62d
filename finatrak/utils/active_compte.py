"""
Compte actif : identifiant persisté dans un cookie et relu à chaque requête.
"""
from flask import current_app, request


def get_active_compte_id():
    """Lit le compte actif depuis le cookie.

    Retourne l'UUID par défaut si aucun cookie n'est défini.
    """
    cle = current_app.config['ACTIVE_COMPTE_COOKIE']
    return request.cookies.get(cle) or current_app.config['DEFAULT_COMPTE_ID']


def set_active_compte_id(response, compte_id):
    """Définit le compte actif via un cookie persistant (un an)"""
    response.set_cookie(
        current_app.config['ACTIVE_COMPTE_COOKIE'],
        compte_id,
        path='/',
        max_age=current_app.config['ACTIVE_COMPTE_MAX_AGE'],
        httponly=True,
        samesite='Lax',
    )
    return response
