"""Service de gestion des comptes bancaires"""
from finatrak.services import BaseService
from finatrak.schemas import CompteSchema, UpdateCompteSchema, est_uuid, valider
from finatrak.models.compte import Compte
import logging

logger = logging.getLogger(__name__)


class ComptesService(BaseService):
    """Comptes de l'utilisateur courant"""

    def fetch_comptes(self):
        """Comptes de l'utilisateur, triés par `sort_order`"""
        return Compte.query.filter_by(user_id=self.user_id).order_by(
            Compte.sort_order.asc(), Compte.created_at.asc()
        ).all()

    def get_compte(self, compte_id):
        if not est_uuid(compte_id):
            return None
        return Compte.query.filter_by(id=compte_id, user_id=self.user_id).first()

    def resolve_active_compte(self, compte_id):
        """Compte actif effectif.

        Si l'identifiant du cookie ne correspond à aucun compte de
        l'utilisateur, le premier compte devient actif. Retourne None si
        l'utilisateur n'a aucun compte.
        """
        comptes = self.fetch_comptes()
        for compte in comptes:
            if compte.id == compte_id:
                return compte
        return comptes[0] if comptes else None

    def insert_compte(self, donnees):
        ok, parsed = valider(CompteSchema, donnees)
        if not ok:
            return False, parsed

        compte = Compte(
            user_id=self.user_id,
            sort_order=self.next_sort_order(Compte, user_id=self.user_id),
            **parsed.model_dump()
        )
        return self.save(compte, f"Compte « {parsed.nom} » créé")

    def update_compte(self, donnees):
        ok, parsed = valider(UpdateCompteSchema, donnees)
        if not ok:
            return False, parsed

        compte = self.get_compte(parsed.id)
        if compte is None:
            return False, "Compte introuvable"
        valeurs = parsed.model_dump(exclude={'id'})
        return self.update(compte, "Compte mis à jour", **valeurs)

    def delete_compte(self, compte_id):
        if not est_uuid(compte_id):
            return False, "Identifiant invalide"

        # Il doit rester au moins un compte pour l'utilisateur
        if Compte.query.filter_by(user_id=self.user_id).count() <= 1:
            return False, "Impossible de supprimer le dernier compte"

        compte = self.get_compte(compte_id)
        if compte is None:
            return False, "Compte introuvable"
        return self.delete(compte, f"Compte « {compte.nom} » supprimé")

    def reorder_comptes(self, ordered_ids):
        return self.reorder(Compte, ordered_ids, user_id=self.user_id)

    def switch_compte(self, compte_id):
        """Valide le changement de compte actif.

        L'écriture du cookie est faite par la vue sur la réponse.
        """
        if not est_uuid(compte_id):
            return False, "Identifiant invalide"
        if self.get_compte(compte_id) is None:
            return False, "Compte inconnu"
        return True, "Compte actif modifié"
