import pytest
from werkzeug.exceptions import HTTPException

from finatrak.models.utilisateur import Utilisateur
from finatrak.models.compte import Compte
from finatrak.services.auth.auth_service import AuthService
from finatrak.utils.auth import require_user_id

from tests.conftest import inscrire, connecter, EMAIL


def test_sign_up_creates_user_and_first_account(app):
    ok, message = AuthService().sign_up('Bob@Example.com', 'motdepasse')
    assert ok, message

    utilisateur = Utilisateur.query.filter_by(email='bob@example.com').one()
    comptes = Compte.query.filter_by(user_id=utilisateur.id).all()
    assert len(comptes) == 1
    assert comptes[0].nom == 'Compte courant'
    assert comptes[0].sort_order == 0
    assert utilisateur.password_hash != 'motdepasse'


def test_sign_up_validation_messages(app):
    assert AuthService().sign_up('pas-un-email', 'secret123') == (False, "Email invalide")
    assert AuthService().sign_up('a@b.fr', '123') == (
        False, "Le mot de passe doit contenir au moins 6 caractères"
    )


def test_sign_up_rejects_duplicate_email(app):
    assert AuthService().sign_up('a@b.fr', 'secret123')[0]
    ok, message = AuthService().sign_up('A@B.fr', 'secret123')
    assert not ok
    assert message == "Un compte existe déjà avec cet email"


def test_sign_in_bad_credentials(app):
    AuthService().sign_up('a@b.fr', 'secret123')
    assert AuthService().sign_in('a@b.fr', 'mauvais1') == (False, "Email ou mot de passe incorrect")
    assert AuthService().sign_in('x@b.fr', 'secret123') == (False, "Email ou mot de passe incorrect")

    ok, utilisateur = AuthService().sign_in('a@b.fr', 'secret123')
    assert ok
    assert utilisateur.email == 'a@b.fr'


def test_pages_require_login(client):
    response = client.get('/dashboard')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/auth')


def test_api_requires_login(client):
    response = client.post('/api/switch-compte', json={'compteId': 'x'})
    assert response.status_code == 401


def test_health_is_public(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok'}


def test_login_flow(client):
    inscrire(client)
    response = connecter(client)
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/dashboard')

    with client.session_transaction() as session:
        assert session['user_id'] == Utilisateur.query.filter_by(email=EMAIL).one().id

    assert client.get('/dashboard').status_code == 200


def test_login_failure_flashes_error(client):
    inscrire(client)
    response = connecter(client, password='mauvais1')
    assert response.headers['Location'].endswith('/auth')
    with client.session_transaction() as session:
        assert 'user_id' not in session
        assert ('error', "Email ou mot de passe incorrect") in session['_flashes']


def test_logout(client, user):
    client.post('/auth/logout')
    assert client.get('/dashboard').status_code == 302


def test_require_user_id_redirects_anonymous_requests(app):
    with app.test_request_context('/dashboard'):
        with pytest.raises(HTTPException) as exc:
            require_user_id()
        assert exc.value.response.status_code == 302
        assert exc.value.response.headers['Location'].endswith('/auth')


def test_paths_starting_like_auth_are_protected(client):
    response = client.get('/authxyz')
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/auth')
