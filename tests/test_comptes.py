from finatrak import db
from finatrak.models.compte import Compte
from finatrak.models.transaction import Transaction
from finatrak.services.comptes.comptes_service import ComptesService
from finatrak.services.transactions.transactions_service import TransactionsService


def _ajouter(service, nom):
    ok, message = service.insert_compte({'nom': nom, 'couleur': '#000000', 'icone': 'wallet', 'solde_initial': '0'})
    assert ok, message
    return Compte.query.filter_by(user_id=service.user_id, nom=nom).one()


def test_insert_compte_validation(app, user_id):
    service = ComptesService(user_id)
    assert service.insert_compte({'nom': '', 'couleur': '#000', 'icone': 'x', 'solde_initial': 0}) == (
        False, "Le nom est requis"
    )
    ok, message = service.insert_compte({'nom': 'Épargne', 'couleur': '#000', 'icone': 'x', 'solde_initial': 'abc'})
    assert not ok
    assert message == "Le solde initial doit être un nombre"


def test_insert_compte_appends_sort_order(app, user_id):
    service = ComptesService(user_id)
    livret = _ajouter(service, 'Livret')
    joint = _ajouter(service, 'Joint')
    assert (livret.sort_order, joint.sort_order) == (1, 2)
    assert [c.nom for c in service.fetch_comptes()] == ['Compte courant', 'Livret', 'Joint']


def test_delete_last_account_is_rejected(app, user_id, compte_id):
    ok, message = ComptesService(user_id).delete_compte(compte_id)
    assert not ok
    assert message == "Impossible de supprimer le dernier compte"
    assert Compte.query.filter_by(user_id=user_id).count() == 1


def test_delete_account_cascades(app, user_id, compte_id):
    service = ComptesService(user_id)
    livret = _ajouter(service, 'Livret')
    TransactionsService(user_id).insert_transaction({
        'compte_id': livret.id, 'montant': 10, 'type': 'revenu', 'date': '2025-01-05',
    })
    assert Transaction.query.filter_by(compte_id=livret.id).count() == 1

    ok, _ = service.delete_compte(livret.id)
    assert ok
    assert Transaction.query.filter_by(compte_id=livret.id).count() == 0


def test_delete_compte_of_other_user(app, user_id):
    autre = ComptesService('autre-utilisateur')
    _ajouter(autre, 'A')
    b = _ajouter(autre, 'B')
    _ajouter(ComptesService(user_id), 'Livret')

    ok, message = ComptesService(user_id).delete_compte(b.id)
    assert not ok
    assert message == "Compte introuvable"


def test_reorder_comptes_writes_positions(app, user_id, compte_id):
    service = ComptesService(user_id)
    livret = _ajouter(service, 'Livret')
    joint = _ajouter(service, 'Joint')

    ok, _ = service.reorder_comptes([joint.id, compte_id, livret.id])
    assert ok
    assert [c.nom for c in service.fetch_comptes()] == ['Joint', 'Compte courant', 'Livret']


def test_reorder_endpoint(client, user_id, compte_id):
    livret = _ajouter(ComptesService(user_id), 'Livret')
    response = client.post('/parametres/comptes/reorder', json={'ids': [livret.id, compte_id]})
    assert response.status_code == 200
    assert response.get_json()['success'] is True
    assert db.session.get(Compte, livret.id).sort_order == 0

    response = client.post('/parametres/comptes/reorder', json={'ids': 'pas une liste'})
    assert response.status_code == 400
