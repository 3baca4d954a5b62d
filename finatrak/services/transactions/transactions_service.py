"""Service de gestion des transactions"""
from finatrak.services import BaseService
from finatrak.schemas import (
    TransactionSchema, UpdateTransactionSchema, TransactionFiltersSchema, est_uuid, valider
)
from finatrak.models.transaction import Transaction
from finatrak.models.compte import Compte
from finatrak.models.objectif import Objectif
from finatrak.models.budget_item import BudgetItem
from sqlalchemy.orm import joinedload
import logging

logger = logging.getLogger(__name__)


class TransactionsService(BaseService):
    """Service de gestion des transactions"""

    def _query_compte(self, compte_id):
        return Transaction.query.options(joinedload(Transaction.categorie)).filter(
            Transaction.compte_id == compte_id,
            Transaction.user_id == self.user_id
        )

    def parse_filters(self, args):
        """Construit les filtres à partir des paramètres d'URL.

        Un filtre invalide est ignoré plutôt que de faire échouer la page.
        """
        donnees = {
            'date_debut': args.get('dateDebut'),
            'date_fin': args.get('dateFin'),
            'type': args.get('type'),
            'categorie_ids': args.get('categories'),
            'montant_min': args.get('montantMin'),
            'montant_max': args.get('montantMax'),
        }
        ok, parsed = valider(TransactionFiltersSchema, donnees)
        if ok:
            return parsed
        logger.debug("Filtres ignorés (%s): %s", parsed, donnees)
        return TransactionFiltersSchema()

    def fetch_all_transactions(self, compte_id, filters=None):
        """Transactions du compte, filtrées, de la plus récente à la plus ancienne"""
        query = self._query_compte(compte_id)

        if filters is not None:
            if filters.date_debut:
                query = query.filter(Transaction.date >= filters.date_debut)
            if filters.date_fin:
                query = query.filter(Transaction.date <= filters.date_fin)
            if filters.type:
                query = query.filter(Transaction.type == filters.type)
            if filters.categorie_ids:
                query = query.filter(Transaction.categorie_id.in_(filters.categorie_ids))
            if filters.montant_min is not None:
                query = query.filter(Transaction.montant >= filters.montant_min)
            if filters.montant_max is not None:
                query = query.filter(Transaction.montant <= filters.montant_max)

        return query.order_by(Transaction.date.desc(), Transaction.created_at.desc()).all()

    def get_transaction(self, transaction_id):
        if not est_uuid(transaction_id):
            return None
        return Transaction.query.filter_by(id=transaction_id, user_id=self.user_id).first()

    def insert_transaction(self, donnees):
        """Enregistre une transaction.

        Si un objectif est fourni, sa progression est ajustée du montant
        (retranché pour une dépense) sans jamais descendre sous zéro.
        Retourne ``(True, message, objectif_updated)`` ou ``(False, erreur, False)``.
        """
        ok, parsed = valider(TransactionSchema, donnees)
        if not ok:
            return False, parsed, False

        if Compte.query.filter_by(id=parsed.compte_id, user_id=self.user_id).first() is None:
            return False, "Compte invalide", False

        if not self.categorie_existe(parsed.categorie_id):
            return False, "Catégorie introuvable", False

        if parsed.budget_item_id and BudgetItem.query.filter_by(
                id=parsed.budget_item_id, user_id=self.user_id).first() is None:
            return False, "Ligne de budget introuvable", False

        transaction = Transaction(
            user_id=self.user_id,
            compte_id=parsed.compte_id,
            date=parsed.date,
            montant=parsed.montant,
            type=parsed.type,
            categorie_id=parsed.categorie_id,
            description=parsed.description,
            budget_item_id=parsed.budget_item_id,
        )

        try:
            self.db.session.add(transaction)
            self.db.session.commit()
        except Exception as e:
            self.db.session.rollback()
            logger.exception("Erreur lors de l'insertion d'une transaction")
            return False, str(e), False

        objectif_updated = False
        if parsed.objectif_id:
            objectif_updated = self._appliquer_objectif(parsed.objectif_id, parsed.type, parsed.montant)

        return True, "Transaction ajoutée", objectif_updated

    def _appliquer_objectif(self, objectif_id, type_transaction, montant):
        objectif = Objectif.query.filter_by(id=objectif_id, user_id=self.user_id).first()
        if objectif is None:
            return False

        delta = -montant if type_transaction == 'depense' else montant
        try:
            objectif.montant_actuel = max(0.0, float(objectif.montant_actuel or 0.0) + delta)
            self.db.session.commit()
        except Exception:
            self.db.session.rollback()
            logger.exception("Impossible de mettre à jour la progression de l'objectif %s", objectif_id)
            return False
        return True

    def update_transaction(self, donnees):
        ok, parsed = valider(UpdateTransactionSchema, donnees)
        if not ok:
            return False, parsed

        transaction = self.get_transaction(parsed.id)
        if transaction is None:
            return False, "Transaction introuvable"
        if not self.categorie_existe(parsed.categorie_id):
            return False, "Catégorie introuvable"
        return self.update(transaction, "Transaction modifiée", **parsed.model_dump(exclude={'id'}))

    def delete_transaction(self, transaction_id):
        if not est_uuid(transaction_id):
            return False, "Identifiant invalide"

        transaction = self.get_transaction(transaction_id)
        if transaction is None:
            return False, "Transaction introuvable"
        return self.delete(transaction, "Transaction supprimée")
