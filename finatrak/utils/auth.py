"""
Session utilisateur : l'identifiant est stocké dans la session signée Flask.
"""
from flask import session, redirect, url_for, abort


def login_user(utilisateur):
    session.clear()
    session.permanent = True
    session['user_id'] = utilisateur.id


def logout_user():
    session.clear()


def current_user_id():
    return session.get('user_id')


def require_user_id():
    """Identifiant de l'utilisateur connecté.

    Interrompt la requête par une redirection vers ``/auth`` sinon.
    """
    user_id = current_user_id()
    if not user_id:
        abort(redirect(url_for('auth.index')))
    return user_id
