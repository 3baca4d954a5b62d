from finatrak.defaults import CATEGORIES_DEFAULT
from finatrak.models.categorie import Categorie
from finatrak.services.categories.categories_service import CategoriesService
from finatrak.services.transactions.transactions_service import TransactionsService


def test_default_categories_are_seeded(app):
    noms = [c.nom for c in CategoriesService().fetch_categories()]
    assert noms == [nom for nom, _, _ in CATEGORIES_DEFAULT]
    assert CategoriesService().seed_default_categories() == 0


def test_insert_update_categorie(app):
    service = CategoriesService()
    ok, _ = service.insert_categorie({'nom': 'Cadeaux', 'couleur': '#ff0000'})
    assert ok
    cadeaux = Categorie.query.filter_by(nom='Cadeaux').one()
    assert cadeaux.icone == 'tag'
    assert cadeaux.sort_order == len(CATEGORIES_DEFAULT)

    assert service.insert_categorie({'nom': 'Cadeaux', 'couleur': '#ff0000'}) == (
        False, "La catégorie « Cadeaux » existe déjà"
    )
    assert service.update_categorie(cadeaux.id, {'nom': 'Logement', 'couleur': '#000'})[0] is False
    assert service.update_categorie(cadeaux.id, {'nom': 'Dons', 'couleur': '#000', 'icone': 'gift'})[0]


def test_delete_categorie_in_use_is_refused(app, user_id, compte_id):
    service = CategoriesService()
    logement = Categorie.query.filter_by(nom='Logement').one()
    TransactionsService(user_id).insert_transaction({
        'compte_id': compte_id, 'montant': 700, 'type': 'depense', 'date': '2025-01-01', 'categorie_id': logement.id,
    })

    ok, message = service.delete_categorie(logement.id)
    assert not ok
    assert '1 transaction(s)' in message

    loisirs = Categorie.query.filter_by(nom='Loisirs').one()
    assert service.delete_categorie(loisirs.id)[0]
    assert Categorie.query.filter_by(nom='Loisirs').count() == 0


def test_reorder_categories_endpoint(client, user):
    ids = [c.id for c in CategoriesService().fetch_categories()]
    response = client.post('/parametres/categories/reorder', json={'ids': list(reversed(ids))})
    assert response.status_code == 200
    assert [c.id for c in CategoriesService().fetch_categories()] == list(reversed(ids))
