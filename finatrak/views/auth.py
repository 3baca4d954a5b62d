"""
Blueprint d'authentification (connexion, inscription, déconnexion)
"""
from flask import Blueprint, render_template, request, redirect, url_for, flash
from finatrak.services.auth.auth_service import AuthService
from finatrak.utils.auth import login_user, logout_user, current_user_id
import logging

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('', methods=['GET', 'POST'])
def index():
    """Page de connexion / inscription"""
    if request.method == 'GET':
        if current_user_id():
            return redirect(url_for('dashboard.index'))
        return render_template('auth.html', mode=request.args.get('mode', 'signin'))

    action = request.form.get('action', 'signin')
    email = request.form.get('email', '')
    password = request.form.get('password', '')
    service = AuthService()

    if action == 'signup':
        success, message = service.sign_up(email, password)
        flash(message, 'success' if success else 'error')
        return redirect(url_for('auth.index', mode='signin' if success else 'signup'))

    success, result = service.sign_in(email, password)
    if not success:
        flash(result, 'error')
        return redirect(url_for('auth.index'))

    login_user(result)
    logger.info("Connexion de %s", result.email)
    return redirect(url_for('dashboard.index'))


@auth_bp.route('/logout', methods=['GET', 'POST'])
def logout():
    logout_user()
    return redirect(url_for('auth.index'))
