from finatrak.services.comptes.comptes_service import ComptesService

COOKIE = 'active_compte_id'


def _set_cookies(response):
    return response.headers.getlist('Set-Cookie')


def test_switch_compte_rejects_invalid_json(client, user):
    response = client.post('/api/switch-compte', data='pas du json', content_type='application/json')
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Corps de requête invalide'}


def test_switch_compte_rejects_non_uuid(client, user):
    response = client.post('/api/switch-compte', json={'compteId': 'abc'})
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Identifiant invalide'}


def test_switch_compte_rejects_unknown_account(client, user):
    response = client.post('/api/switch-compte', json={'compteId': '11111111-2222-3333-4444-555555555555'})
    assert response.status_code == 400
    assert response.get_json() == {'error': 'Compte inconnu'}


def test_switch_compte_sets_cookie(client, user_id, compte_id):
    ComptesService(user_id).insert_compte(
        {'nom': 'Livret A', 'couleur': '#22c55e', 'icone': 'piggy-bank', 'solde_initial': 100}
    )
    livret = [c for c in ComptesService(user_id).fetch_comptes() if c.nom == 'Livret A'][0]

    response = client.post('/api/switch-compte', json={'compteId': livret.id})
    assert response.status_code == 200
    assert response.get_json() == {'success': True}

    cookies = [c for c in _set_cookies(response) if c.startswith(f'{COOKIE}=')]
    assert len(cookies) == 1
    cookie = cookies[0]
    assert cookie.startswith(f'{COOKIE}={livret.id}')
    assert 'Max-Age=31536000' in cookie
    assert 'HttpOnly' in cookie
    assert 'SameSite=Lax' in cookie
    assert 'Path=/' in cookie


def test_unknown_cookie_falls_back_to_first_account(client, compte_id):
    client.set_cookie(COOKIE, '00000000-0000-0000-0000-000000000001')
    response = client.get('/dashboard')
    assert response.status_code == 200

    cookies = [c for c in _set_cookies(response) if c.startswith(f'{COOKIE}=')]
    assert cookies and cookies[0].startswith(f'{COOKIE}={compte_id}')


def test_valid_cookie_is_kept(client, compte_id):
    client.set_cookie(COOKIE, compte_id)
    response = client.get('/dashboard')
    assert not [c for c in _set_cookies(response) if c.startswith(f'{COOKIE}=')]


def test_resolve_active_compte(app, user_id, compte_id):
    service = ComptesService(user_id)
    assert service.resolve_active_compte(compte_id).id == compte_id
    assert service.resolve_active_compte('inconnu').id == compte_id
    assert ComptesService('personne').resolve_active_compte(compte_id) is None
