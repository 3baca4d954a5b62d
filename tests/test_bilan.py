from datetime import date
from types import SimpleNamespace

import pytest

from finatrak.services.bilan.bilan_service import calcul_bilan, BilanService
from finatrak.services.transactions.transactions_service import TransactionsService


def _t(jour, montant, type_, categorie=None):
    return SimpleNamespace(date=jour, montant=montant, type=type_, categorie=categorie)


LOGEMENT = SimpleNamespace(nom='Logement', couleur='#6366f1')
LOISIRS = SimpleNamespace(nom='Loisirs', couleur='#ec4899')


def test_month_bucketing():
    bilan = calcul_bilan([
        _t(date(2025, 1, 3), 2000, 'revenu'),
        _t(date(2025, 1, 20), 500, 'depense', LOGEMENT),
        _t(date(2025, 2, 1), 300, 'depense', LOISIRS),
    ])
    assert [m['mois_key'] for m in bilan['par_mois']] == ['2025-01', '2025-02']
    janvier, fevrier = bilan['par_mois']
    assert (janvier['revenus'], janvier['depenses'], janvier['epargne']) == (2000, 500, 1500)
    assert janvier['mois'] == 'janv. 25'
    assert fevrier['epargne'] == -300


def test_keeps_last_twelve_months():
    rows = [_t(date(2024 + (m // 12), m % 12 + 1, 1), 10, 'revenu') for m in range(15)]
    par_mois = calcul_bilan(rows)['par_mois']
    assert len(par_mois) == 12
    assert par_mois[0]['mois_key'] == '2024-04'
    assert par_mois[-1]['mois_key'] == '2025-03'


def test_category_percentages_sorted():
    bilan = calcul_bilan([
        _t(date(2025, 1, 1), 100, 'depense', LOISIRS),
        _t(date(2025, 1, 2), 300, 'depense', LOGEMENT),
        _t(date(2025, 1, 3), 100, 'depense'),
    ])
    categories = bilan['par_categorie']
    assert [c['nom'] for c in categories][0] == 'Logement'
    assert categories[0]['pourcentage'] == pytest.approx(60)
    autres = [c for c in categories if c['nom'] == 'Autres'][0]
    assert autres['couleur'] == '#94a3b8'
    assert autres['pourcentage'] == pytest.approx(20)


def test_savings_rate():
    totaux = calcul_bilan([
        _t(date(2025, 1, 1), 4000, 'revenu'),
        _t(date(2025, 1, 2), 3000, 'depense'),
    ])['totaux']
    assert totaux == {'revenus': 4000, 'depenses': 3000, 'epargne': 1000, 'taux_epargne': 25}


def test_savings_rate_without_income():
    totaux = calcul_bilan([_t(date(2025, 1, 2), 50, 'depense')])['totaux']
    assert totaux['taux_epargne'] == 0
    assert calcul_bilan([])['par_categorie'] == []


def test_fetch_bilan_data_is_scoped_to_account(client, user_id, compte_id):
    TransactionsService(user_id).insert_transaction(
        {'compte_id': compte_id, 'montant': 1000, 'type': 'revenu', 'date': '2025-03-01'}
    )
    bilan = BilanService(user_id).fetch_bilan_data(compte_id)
    assert bilan['totaux']['revenus'] == 1000
    assert BilanService('autre').fetch_bilan_data(compte_id)['totaux']['revenus'] == 0

    assert client.get('/bilan').status_code == 200
