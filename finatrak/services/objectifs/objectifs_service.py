"""Service de gestion des objectifs d'épargne"""
from finatrak.services import BaseService
from finatrak.schemas import ObjectifSchema, UpdateObjectifSchema, est_uuid, valider
from finatrak.models.objectif import Objectif
from finatrak.models.budget_item import BudgetItem
from finatrak.models.compte import Compte
from finatrak.models.transaction import Transaction
from datetime import date
import math
import logging

logger = logging.getLogger(__name__)


def jours_restants(date_fin, aujourd_hui=None):
    """Nombre de jours avant l'échéance (négatif si dépassée)"""
    if date_fin is None:
        return None
    if aujourd_hui is None:
        aujourd_hui = date.today()
    return (date_fin - aujourd_hui).days


def progression(objectif, aujourd_hui=None):
    """Données d'affichage de la progression d'un objectif.

    Le pourcentage est plafonné à 100 ; la couleur de la barre dépend des
    seuils 33 / 66 / atteint.
    """
    cible = float(objectif.montant_cible or 0.0)
    actuel = float(objectif.montant_actuel or 0.0)
    pct = min(actuel / cible * 100, 100.0) if cible > 0 else 0.0
    atteint = actuel >= cible

    if atteint:
        couleur = '#22c55e'
    elif pct >= 66:
        couleur = '#14b8a6'
    elif pct >= 33:
        couleur = '#f97316'
    else:
        couleur = '#ef4444'

    return {
        'pourcentage': pct,
        'atteint': atteint,
        'restant': cible - actuel,
        'couleur': couleur,
        'jours_restants': jours_restants(objectif.date_fin, aujourd_hui),
    }


class ObjectifsService(BaseService):
    """Objectifs d'un compte"""

    def fetch_objectifs(self, compte_id):
        return Objectif.query.filter_by(compte_id=compte_id, user_id=self.user_id).order_by(
            Objectif.sort_order.asc(), Objectif.created_at.asc()
        ).all()

    def fetch_objectifs_with_budget_lines(self, compte_id):
        """Objectifs accompagnés de leurs lignes de budget.

        Pour chaque ligne : `consomme` est la somme des transactions liées,
        `restant` vaut ``max(0, montant - consomme)``.
        """
        objectifs = self.fetch_objectifs(compte_id)
        if not objectifs:
            return []

        objectif_ids = [o.id for o in objectifs]
        budget_items = BudgetItem.query.filter(
            BudgetItem.user_id == self.user_id,
            BudgetItem.objectif_id.in_(objectif_ids)
        ).order_by(BudgetItem.sort_order.asc()).all()

        sommes = {}
        item_ids = [bi.id for bi in budget_items]
        if item_ids:
            transactions = Transaction.query.filter(
                Transaction.user_id == self.user_id,
                Transaction.budget_item_id.in_(item_ids)
            ).all()
            for t in transactions:
                sommes[t.budget_item_id] = sommes.get(t.budget_item_id, 0.0) + t.montant

        resultat = []
        for objectif in objectifs:
            lignes = []
            for bi in budget_items:
                if bi.objectif_id != objectif.id:
                    continue
                consomme = sommes.get(bi.id, 0.0)
                lignes.append({
                    'id': bi.id,
                    'nom': bi.nom,
                    'montant': bi.montant,
                    'frequence': bi.frequence,
                    'consomme': consomme,
                    'restant': max(0.0, bi.montant - consomme),
                })
            resultat.append({
                'objectif': objectif,
                'progression': progression(objectif),
                'budget_lines': lignes,
            })
        return resultat

    def get_objectif(self, objectif_id):
        if not est_uuid(objectif_id):
            return None
        return Objectif.query.filter_by(id=objectif_id, user_id=self.user_id).first()

    def insert_objectif(self, donnees):
        ok, parsed = valider(ObjectifSchema, donnees)
        if not ok:
            return False, parsed

        if Compte.query.filter_by(id=parsed.compte_id, user_id=self.user_id).first() is None:
            return False, "Compte invalide"

        objectif = Objectif(
            user_id=self.user_id,
            sort_order=self.next_sort_order(Objectif, compte_id=parsed.compte_id, user_id=self.user_id),
            **parsed.model_dump()
        )
        return self.save(objectif, f"Objectif « {parsed.nom} » créé")

    def update_objectif(self, donnees):
        ok, parsed = valider(UpdateObjectifSchema, donnees)
        if not ok:
            return False, parsed

        objectif = self.get_objectif(parsed.id)
        if objectif is None:
            return False, "Objectif introuvable"
        return self.update(objectif, "Objectif mis à jour", **parsed.model_dump(exclude={'id'}))

    def update_objectif_montant(self, objectif_id, montant_actuel):
        """Mise à jour manuelle de la progression"""
        try:
            montant = float(str(montant_actuel).replace(',', '.'))
        except (TypeError, ValueError):
            return False, "Montant invalide"
        if not math.isfinite(montant) or montant < 0:
            return False, "Montant invalide"

        objectif = self.get_objectif(objectif_id)
        if objectif is None:
            return False, "Objectif introuvable"
        return self.update(objectif, "Progression mise à jour !", montant_actuel=montant)

    def delete_objectif(self, objectif_id):
        objectif = self.get_objectif(objectif_id)
        if objectif is None:
            return False, "Objectif introuvable"
        return self.delete(objectif, "Objectif supprimé")

    def reorder_objectifs(self, ordered_ids):
        return self.reorder(Objectif, ordered_ids, user_id=self.user_id)
