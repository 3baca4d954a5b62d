"""Configuration de l'application FinaTrak"""
import os
from datetime import timedelta


class Config:
    """Configuration principale de l'application"""

    # Database
    # Par défaut un fichier SQLite dans le dossier `db/` à la racine du dépôt ;
    # DATABASE_URL permet de viser n'importe quelle base supportée par SQLAlchemy.
    BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL',
        f'sqlite:///{os.path.join(BASE_DIR, "db", "finatrak.db")}'
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Flask
    SECRET_KEY = os.environ.get('SECRET_KEY', 'finatrak-dev-secret-key')

    # Session
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Compte actif (cookie persistant un an)
    ACTIVE_COMPTE_COOKIE = 'active_compte_id'
    ACTIVE_COMPTE_MAX_AGE = 60 * 60 * 24 * 365
    DEFAULT_COMPTE_ID = '00000000-0000-0000-0000-000000000001'

    # Server
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 5001))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    FORMAT_DEVISE = "{} €"


class TestingConfig(Config):
    """Configuration utilisée par la suite de tests"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SECRET_KEY = 'finatrak-test'
    LOG_LEVEL = 'DEBUG'


config = {
    'default': Config,
    'testing': TestingConfig,
}
