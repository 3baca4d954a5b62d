import pytest

from finatrak import create_app, db
from finatrak.models.utilisateur import Utilisateur
from finatrak.models.compte import Compte


EMAIL = 'alice@example.com'
PASSWORD = 'secret123'


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def inscrire(client, email=EMAIL, password=PASSWORD):
    return client.post('/auth', data={'action': 'signup', 'email': email, 'password': password})


def connecter(client, email=EMAIL, password=PASSWORD):
    return client.post('/auth', data={'action': 'signin', 'email': email, 'password': password})


@pytest.fixture
def user(client):
    """Utilisateur inscrit et connecté ; retourne (user_id, compte_id)"""
    inscrire(client)
    connecter(client)
    utilisateur = Utilisateur.query.filter_by(email=EMAIL).one()
    compte = Compte.query.filter_by(user_id=utilisateur.id).one()
    return utilisateur.id, compte.id


@pytest.fixture
def user_id(user):
    return user[0]


@pytest.fixture
def compte_id(user):
    return user[1]
