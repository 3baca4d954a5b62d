"""Application Flask FinaTrak : gestion de finances personnelles"""

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
import os
from finatrak.config import config

# Instances globales
db = SQLAlchemy()

# Chemins accessibles sans connexion
PUBLIC_PATHS = ('/auth', '/health')
PUBLIC_PREFIXES = ('/auth/', '/static/')


def create_app(config_name='default'):
    """Factory de l'application Flask"""
    template_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), 'templates'))
    static_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), 'static'))

    app = Flask(__name__,
                template_folder=template_dir,
                static_folder=static_dir)

    app.config.from_object(config[config_name])
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(app)

    @app.context_processor
    def inject_comptes():
        """Comptes de l'utilisateur et compte actif pour le sélecteur de l'en-tête"""
        from flask import g
        user_id = g.get('user_id')
        if not user_id:
            return {'comptes': [], 'compte_actif': None}
        from finatrak.services.comptes.comptes_service import ComptesService
        return {
            'comptes': ComptesService(user_id).fetch_comptes(),
            'compte_actif': g.get('compte'),
        }

    @app.context_processor
    def inject_navigation():
        """Entrées de navigation dans l'ordre choisi par l'utilisateur"""
        from flask import g
        if not g.get('user_id'):
            return {'navigation': []}
        from finatrak.services.parametres.parametres_service import ParametresService, ordonner_navigation
        saved = ParametresService(g.user_id).fetch_nav_order()
        return {'navigation': ordonner_navigation(saved)}

    from finatrak.utils.formatting import format_currency, format_date, format_decimal, format_percent
    app.jinja_env.filters['format_currency'] = format_currency
    app.jinja_env.filters['format_date'] = format_date
    app.jinja_env.filters['format_decimal'] = format_decimal
    app.jinja_env.filters['format_percent'] = format_percent

    from finatrak.views.auth import auth_bp
    from finatrak.views.api import api_bp
    from finatrak.views.dashboard import dashboard_bp
    from finatrak.views.transactions import transactions_bp
    from finatrak.views.budget import budget_bp
    from finatrak.views.objectifs import objectifs_bp
    from finatrak.views.bilan import bilan_bp
    from finatrak.views.parametres import parametres_bp

    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(api_bp, url_prefix='/api')
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(transactions_bp, url_prefix='/transactions')
    app.register_blueprint(budget_bp, url_prefix='/budget')
    app.register_blueprint(objectifs_bp, url_prefix='/objectifs')
    app.register_blueprint(bilan_bp, url_prefix='/bilan')
    app.register_blueprint(parametres_bp, url_prefix='/parametres')

    # Protection globale : toute page hors /auth, /static et /health exige
    # un utilisateur connecté et un compte actif résolu.
    from flask import request, redirect, url_for, jsonify, g
    from finatrak.utils.auth import current_user_id, require_user_id, logout_user
    from finatrak.utils.active_compte import get_active_compte_id, set_active_compte_id

    @app.before_request
    def require_auth():
        g.user_id = None
        g.compte = None
        g.compte_corrige = False

        path = request.path or ''
        if path in PUBLIC_PATHS or path.startswith(PUBLIC_PREFIXES):
            return

        if path.startswith('/api/') and not current_user_id():
            return jsonify({'error': 'Non authentifié'}), 401
        user_id = require_user_id()

        from finatrak.services.comptes.comptes_service import ComptesService
        cookie_id = get_active_compte_id()
        compte = ComptesService(user_id).resolve_active_compte(cookie_id)
        if compte is None:
            # session orpheline (utilisateur supprimé ou base réinitialisée)
            app.logger.warning("Aucun compte pour l'utilisateur %s, déconnexion", user_id)
            logout_user()
            if path.startswith('/api/'):
                return jsonify({'error': 'Non authentifié'}), 401
            return redirect(url_for('auth.index'))

        g.user_id = user_id
        g.compte = compte
        g.compte_id = compte.id
        g.compte_corrige = compte.id != cookie_id

    @app.after_request
    def rewrite_active_compte_cookie(response):
        """Réécrit le cookie quand le compte actif a été corrigé"""
        if not g.get('compte_corrige'):
            return response
        cookie = app.config['ACTIVE_COMPTE_COOKIE']
        if any(h.startswith(f'{cookie}=') for h in response.headers.getlist('Set-Cookie')):
            return response
        return set_active_compte_id(response, g.compte_id)

    db_uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
    if db_uri.startswith('sqlite:'):
        if db_uri.startswith('sqlite:///'):
            os.makedirs(os.path.dirname(db_uri[len('sqlite:///'):]) or '.', exist_ok=True)
        with app.app_context():
            import finatrak.models  # noqa: F401 - enregistre les tables
            db.create_all()
            from finatrak.services.categories.categories_service import CategoriesService
            CategoriesService().seed_default_categories()

    return app
