from types import SimpleNamespace

from finatrak import db
from finatrak.models.budget_item import BudgetItem
from finatrak.models.objectif import Objectif
from finatrak.services.budget.budget_service import BudgetService, mensualise, annualise, resume_budget


def _item(compte_id, **kwargs):
    donnees = {'compte_id': compte_id, 'nom': 'Loyer', 'montant': 800, 'frequence': 'mensuel'}
    donnees.update(kwargs)
    return donnees


def test_non_positive_amount_is_rejected(app, user_id, compte_id):
    service = BudgetService(user_id)
    for montant in (0, -10, '0', 'abc', None):
        ok, message = service.insert_budget_item(_item(compte_id, montant=montant))
        assert not ok
        assert message == "Le montant doit être positif"
    assert BudgetItem.query.count() == 0


def test_insert_validation(app, user_id, compte_id):
    service = BudgetService(user_id)
    assert service.insert_budget_item(_item(compte_id, nom='  ')) == (False, "Le nom est requis")
    assert service.insert_budget_item(_item(compte_id, frequence='hebdo')) == (False, "Fréquence invalide")
    assert service.insert_budget_item(_item('x')) == (False, "Compte invalide")


def test_insert_with_new_goal(app, user_id, compte_id):
    ok, message = BudgetService(user_id).insert_budget_item(_item(
        compte_id, nom='Assurance', montant=600, frequence='annuel',
        creer_objectif='on', objectif_nom='Fonds assurance', objectif_cible='600',
    ))
    assert ok, message

    objectif = Objectif.query.one()
    assert (objectif.nom, objectif.montant_cible, objectif.montant_actuel, objectif.periode) == (
        'Fonds assurance', 600, 0, 'ponctuel'
    )
    assert BudgetItem.query.one().objectif_id == objectif.id


def test_goal_not_created_without_name(app, user_id, compte_id):
    ok, _ = BudgetService(user_id).insert_budget_item(_item(compte_id, creer_objectif=True, objectif_cible=100))
    assert ok
    assert Objectif.query.count() == 0
    assert BudgetItem.query.one().objectif_id is None


def test_toggle_and_reorder_endpoints(client, user_id, compte_id):
    service = BudgetService(user_id)
    service.insert_budget_item(_item(compte_id, nom='Loyer'))
    service.insert_budget_item(_item(compte_id, nom='Internet', montant=30))
    loyer, internet = service.fetch_budget_items(compte_id)

    response = client.post(f'/budget/{loyer.id}/toggle', json={'actif': False})
    assert response.status_code == 200
    assert db.session.get(BudgetItem, loyer.id).actif is False

    assert client.post(f'/budget/{loyer.id}/toggle', json={'actif': 'non'}).status_code == 400

    response = client.post('/budget/reorder', json={'ids': [internet.id, loyer.id]})
    assert response.get_json()['success'] is True
    assert [i.nom for i in service.fetch_budget_items(compte_id)] == ['Internet', 'Loyer']


def test_mensualise_annualise():
    assert mensualise(1200, 'annuel') == 100
    assert mensualise(50, 'mensuel') == 50
    assert annualise(50, 'mensuel') == 600
    assert annualise(1200, 'annuel') == 1200


def test_resume_budget_counts_active_items_only():
    items = [
        SimpleNamespace(montant=100, frequence='mensuel', actif=True, objectif_id='o1'),
        SimpleNamespace(montant=1200, frequence='annuel', actif=True, objectif_id='o1'),
        SimpleNamespace(montant=999, frequence='mensuel', actif=False, objectif_id='o2'),
    ]
    resume = resume_budget(items)
    assert resume['nb_items'] == 3
    assert resume['nb_actifs'] == 2
    assert resume['budget_mensuel'] == 200
    assert resume['budget_annuel'] == 2400
    assert resume['total_mensuels'] == 100
    assert resume['total_annuels'] == 1200
    assert resume['objectifs_lies'] == 2


def test_budget_page(client, user_id, compte_id):
    BudgetService(user_id).insert_budget_item(_item(compte_id))
    response = client.get('/budget')
    assert response.status_code == 200
    assert 'Loyer' in response.get_data(as_text=True)


def test_update_cannot_link_goal_of_other_user(app, user_id, compte_id):
    autre_compte = '11111111-2222-3333-4444-555555555555'
    db.session.add(Objectif(
        user_id='autre-utilisateur', compte_id=autre_compte, nom='Secret', montant_cible=100, periode='ponctuel',
    ))
    db.session.commit()
    secret = Objectif.query.filter_by(nom='Secret').one()

    service = BudgetService(user_id)
    service.insert_budget_item(_item(compte_id))
    loyer = service.fetch_budget_items(compte_id)[0]

    ok, message = service.update_budget_item({
        'id': loyer.id, 'nom': 'Loyer', 'montant': 800, 'frequence': 'mensuel', 'objectif_id': secret.id,
    })
    assert (ok, message) == (False, "Objectif introuvable")
    assert service.fetch_budget_items(compte_id)[0].objectif is None

    ok, message = service.insert_budget_item(_item(compte_id, nom='Autre', objectif_id=secret.id))
    assert (ok, message) == (False, "Objectif introuvable")


def test_categorie_must_exist(app, user_id, compte_id):
    service = BudgetService(user_id)
    assert service.insert_budget_item(_item(compte_id, categorie_id='loisirs')) == (False, "Catégorie invalide")
    assert service.insert_budget_item(_item(compte_id, categorie_id='11111111-2222-3333-4444-555555555555')) == (
        False, "Catégorie introuvable"
    )
    assert BudgetItem.query.count() == 0
