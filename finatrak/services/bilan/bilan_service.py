"""Service du bilan : agrégation des transactions par mois et par catégorie"""
from finatrak.services import BaseService, label_mois
from finatrak.models.transaction import Transaction
from finatrak.defaults import CATEGORIE_AUTRES, COULEUR_AUTRES
from sqlalchemy.orm import joinedload

# Nombre de mois affichés dans le graphique revenus / dépenses
NB_MOIS_BILAN = 12


def calcul_bilan(rows):
    """Calcule le bilan à partir d'une liste de transactions triées par date.

    Retourne un dict avec :
      - ``par_mois`` : les douze derniers mois ayant des transactions
        (clé ``AAAA-MM``, revenus, dépenses, épargne) ;
      - ``par_categorie`` : dépenses par catégorie avec leur part en pourcentage,
        triées par total décroissant ;
      - ``totaux`` : revenus, dépenses, épargne et taux d'épargne.
    """
    mois_map = {}
    for t in rows:
        mois_key = t.date.isoformat()[:7]
        entry = mois_map.get(mois_key)
        if entry is None:
            entry = {
                'mois': label_mois(mois_key),
                'mois_key': mois_key,
                'revenus': 0.0,
                'depenses': 0.0,
                'epargne': 0.0,
            }
            mois_map[mois_key] = entry
        if t.type == 'revenu':
            entry['revenus'] += t.montant
        else:
            entry['depenses'] += t.montant
        entry['epargne'] = entry['revenus'] - entry['depenses']

    depenses = [t for t in rows if t.type == 'depense']
    total_depenses = sum(t.montant for t in depenses)

    cat_map = {}
    for t in depenses:
        nom = t.categorie.nom if t.categorie else CATEGORIE_AUTRES
        couleur = t.categorie.couleur if t.categorie else COULEUR_AUTRES
        entry = cat_map.setdefault(nom, {'nom': nom, 'couleur': couleur, 'total': 0.0, 'pourcentage': 0.0})
        entry['total'] += t.montant
    for entry in cat_map.values():
        entry['pourcentage'] = entry['total'] / total_depenses * 100 if total_depenses > 0 else 0.0

    revenus = sum(t.montant for t in rows if t.type == 'revenu')
    epargne = revenus - total_depenses
    taux_epargne = epargne / revenus * 100 if revenus > 0 else 0.0

    return {
        'par_mois': [mois_map[k] for k in sorted(mois_map)][-NB_MOIS_BILAN:],
        'par_categorie': sorted(cat_map.values(), key=lambda c: c['total'], reverse=True),
        'totaux': {
            'revenus': revenus,
            'depenses': total_depenses,
            'epargne': epargne,
            'taux_epargne': taux_epargne,
        },
    }


class BilanService(BaseService):
    """Bilan d'un compte"""

    def fetch_bilan_data(self, compte_id):
        rows = Transaction.query.options(joinedload(Transaction.categorie)).filter(
            Transaction.compte_id == compte_id,
            Transaction.user_id == self.user_id
        ).order_by(Transaction.date.asc()).all()
        return calcul_bilan(rows)
