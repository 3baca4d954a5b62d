"""Service de gestion du budget (charges planifiées)"""
from finatrak.services import BaseService
from finatrak.schemas import BudgetItemSchema, UpdateBudgetItemSchema, est_uuid, valider
from finatrak.models import nouvel_id
from finatrak.models.budget_item import BudgetItem
from finatrak.models.compte import Compte
from finatrak.models.objectif import Objectif
from sqlalchemy.orm import joinedload
import logging

logger = logging.getLogger(__name__)


def mensualise(montant, frequence):
    """Montant ramené au mois"""
    return montant / 12 if frequence == 'annuel' else montant


def annualise(montant, frequence):
    """Montant projeté sur douze mois"""
    return montant * 12 if frequence == 'mensuel' else montant


def resume_budget(items):
    """Indicateurs de la page budget.

    Seules les lignes actives comptent dans les totaux ; le nombre
    d'objectifs liés porte sur toutes les lignes.
    """
    actifs = [i for i in items if i.actif]
    return {
        'nb_items': len(items),
        'nb_actifs': len(actifs),
        'budget_mensuel': sum(mensualise(i.montant, i.frequence) for i in actifs),
        'budget_annuel': sum(annualise(i.montant, i.frequence) for i in actifs),
        'total_mensuels': sum(i.montant for i in actifs if i.frequence == 'mensuel'),
        'total_annuels': sum(i.montant for i in actifs if i.frequence == 'annuel'),
        'objectifs_lies': len({i.objectif_id for i in items if i.objectif_id}),
    }


class BudgetService(BaseService):
    """Lignes de budget d'un compte"""

    def fetch_budget_items(self, compte_id):
        return BudgetItem.query.options(
            joinedload(BudgetItem.categorie), joinedload(BudgetItem.objectif)
        ).filter(
            BudgetItem.compte_id == compte_id,
            BudgetItem.user_id == self.user_id
        ).order_by(BudgetItem.sort_order.asc(), BudgetItem.created_at.asc()).all()

    def get_budget_item(self, item_id):
        if not est_uuid(item_id):
            return None
        return BudgetItem.query.filter_by(id=item_id, user_id=self.user_id).first()

    def insert_budget_item(self, donnees):
        """Crée une ligne de budget.

        Avec `creer_objectif`, un objectif (progression à 0, période
        `ponctuel` par défaut) est créé à la volée puis lié à la ligne.
        """
        ok, parsed = valider(BudgetItemSchema, donnees)
        if not ok:
            return False, parsed

        if Compte.query.filter_by(id=parsed.compte_id, user_id=self.user_id).first() is None:
            return False, "Compte invalide"
        if not self.categorie_existe(parsed.categorie_id):
            return False, "Catégorie introuvable"

        objectif_id = parsed.objectif_id
        try:
            if parsed.creer_objectif and parsed.objectif_nom and parsed.objectif_cible:
                objectif = Objectif(
                    id=nouvel_id(),
                    user_id=self.user_id,
                    compte_id=parsed.compte_id,
                    nom=parsed.objectif_nom,
                    montant_cible=parsed.objectif_cible,
                    montant_actuel=0.0,
                    periode=parsed.objectif_periode or 'ponctuel',
                    sort_order=self.next_sort_order(Objectif, compte_id=parsed.compte_id, user_id=self.user_id),
                )
                self.db.session.add(objectif)
                objectif_id = objectif.id
            elif objectif_id and Objectif.query.filter_by(id=objectif_id, user_id=self.user_id).first() is None:
                return False, "Objectif introuvable"

            item = BudgetItem(
                user_id=self.user_id,
                compte_id=parsed.compte_id,
                nom=parsed.nom,
                montant=parsed.montant,
                frequence=parsed.frequence,
                categorie_id=parsed.categorie_id,
                objectif_id=objectif_id,
                actif=True,
                sort_order=self.next_sort_order(BudgetItem, compte_id=parsed.compte_id, user_id=self.user_id),
            )
            self.db.session.add(item)
            self.db.session.commit()
        except Exception as e:
            self.db.session.rollback()
            logger.exception("Erreur lors de la création de la ligne de budget")
            return False, str(e)

        return True, f"Charge « {parsed.nom} » ajoutée"

    def update_budget_item(self, donnees):
        ok, parsed = valider(UpdateBudgetItemSchema, donnees)
        if not ok:
            return False, parsed

        item = self.get_budget_item(parsed.id)
        if item is None:
            return False, "Ligne de budget introuvable"
        if not self.categorie_existe(parsed.categorie_id):
            return False, "Catégorie introuvable"
        if parsed.objectif_id and Objectif.query.filter_by(
                id=parsed.objectif_id, user_id=self.user_id).first() is None:
            return False, "Objectif introuvable"
        return self.update(item, "Charge mise à jour", **parsed.model_dump(exclude={'id'}))

    def toggle_budget_item(self, item_id, actif):
        item = self.get_budget_item(item_id)
        if item is None:
            return False, "Ligne de budget introuvable"
        return self.update(item, "Charge activée" if actif else "Charge désactivée", actif=bool(actif))

    def delete_budget_item(self, item_id):
        item = self.get_budget_item(item_id)
        if item is None:
            return False, "Ligne de budget introuvable"
        return self.delete(item, f"Charge « {item.nom} » supprimée")

    def reorder_budget_items(self, ordered_ids):
        return self.reorder(BudgetItem, ordered_ids, user_id=self.user_id)
