"""
Service du tableau de bord : indicateurs du mois courant, historique du solde
et répartition des dépenses.
"""
from finatrak.services import BaseService, get_periode_bounds, label_mois
from finatrak.models.transaction import Transaction
from finatrak.models.compte import Compte
from finatrak.defaults import CATEGORIE_AUTRES, COULEUR_AUTRES
from sqlalchemy.orm import joinedload
import logging

logger = logging.getLogger(__name__)


def _somme(rows, type_transaction):
    return sum(float(t.montant) for t in rows if t.type == type_transaction)


class DashboardService(BaseService):
    """Agrégats du tableau de bord pour un compte"""

    def _transactions(self, compte_id, debut=None, fin=None):
        query = Transaction.query.filter(
            Transaction.compte_id == compte_id,
            Transaction.user_id == self.user_id
        )
        if debut is not None:
            query = query.filter(Transaction.date >= debut)
        if fin is not None:
            query = query.filter(Transaction.date <= fin)
        return query

    def fetch_solde_initial(self, compte_id):
        compte = Compte.query.filter_by(id=compte_id, user_id=self.user_id).first()
        return float(compte.solde_initial) if compte else 0.0

    def fetch_dashboard_stats(self, compte_id, aujourd_hui=None):
        """KPI : solde initial, solde total cumulé, revenus / dépenses / épargne du mois"""
        debut, fin = get_periode_bounds(aujourd_hui)

        mois = self._transactions(compte_id, debut, fin).all()
        toutes = self._transactions(compte_id).all()
        solde_initial = self.fetch_solde_initial(compte_id)

        revenus = _somme(mois, 'revenu')
        depenses = _somme(mois, 'depense')

        # Solde total = initial + tous les revenus - toutes les dépenses
        solde_total = solde_initial + _somme(toutes, 'revenu') - _somme(toutes, 'depense')

        return {
            'solde_initial': solde_initial,
            'solde_total': solde_total,
            'revenus': revenus,
            'depenses': depenses,
            'epargne': revenus - depenses,
        }

    def fetch_recent_transactions(self, compte_id, limit=5):
        return self._transactions(compte_id).options(joinedload(Transaction.categorie)).order_by(
            Transaction.date.desc(), Transaction.created_at.desc()
        ).limit(limit).all()

    def fetch_depenses_par_categorie(self, compte_id, aujourd_hui=None):
        """Dépenses du mois courant regroupées par nom de catégorie"""
        debut, fin = get_periode_bounds(aujourd_hui)
        rows = self._transactions(compte_id, debut, fin).options(joinedload(Transaction.categorie)).filter(
            Transaction.type == 'depense'
        ).all()

        grouped = {}
        for t in rows:
            nom = t.categorie.nom if t.categorie else CATEGORIE_AUTRES
            couleur = t.categorie.couleur if t.categorie else COULEUR_AUTRES
            entry = grouped.setdefault(nom, {'nom': nom, 'valeur': 0.0, 'couleur': couleur})
            entry['valeur'] += float(t.montant)
        return list(grouped.values())

    def fetch_balance_history(self, compte_id):
        """Par mois : variation nette du solde et total des dépenses"""
        rows = self._transactions(compte_id).order_by(Transaction.date.asc()).all()

        monthly = {}
        for t in rows:
            entry = monthly.setdefault(label_mois(t.date), {'solde': 0.0, 'depenses': 0.0})
            if t.type == 'revenu':
                entry['solde'] += float(t.montant)
            else:
                entry['solde'] -= float(t.montant)
                entry['depenses'] += float(t.montant)

        return [{'mois': mois, **valeurs} for mois, valeurs in monthly.items()]
