"""
Service de gestion des catégories
"""
from finatrak.services import BaseService
from finatrak.schemas import CategorieSchema, est_uuid, valider
from finatrak.models.categorie import Categorie
from finatrak.models.transaction import Transaction
from finatrak.defaults import CATEGORIES_DEFAULT


class CategoriesService(BaseService):
    """Catégories partagées par les transactions et les lignes de budget"""

    def fetch_categories(self):
        return Categorie.query.order_by(Categorie.sort_order.asc(), Categorie.nom.asc()).all()

    def insert_categorie(self, donnees):
        ok, parsed = valider(CategorieSchema, donnees)
        if not ok:
            return False, parsed

        # Vérifie qu'elle n'existe pas déjà
        if Categorie.query.filter_by(nom=parsed.nom).first():
            return False, f"La catégorie « {parsed.nom} » existe déjà"

        categorie = Categorie(sort_order=self.next_sort_order(Categorie), **parsed.model_dump())
        return self.save(categorie, f"Catégorie « {parsed.nom} » créée")

    def update_categorie(self, categorie_id, donnees):
        categorie = self.db.session.get(Categorie, categorie_id) if est_uuid(categorie_id) else None
        if not categorie:
            return False, "Catégorie introuvable"

        ok, parsed = valider(CategorieSchema, donnees)
        if not ok:
            return False, parsed

        if parsed.nom != categorie.nom:
            existing = Categorie.query.filter_by(nom=parsed.nom).first()
            if existing and existing.id != categorie.id:
                return False, f"La catégorie « {parsed.nom} » existe déjà"

        return self.update(categorie, "Catégorie mise à jour", **parsed.model_dump())

    def delete_categorie(self, categorie_id):
        categorie = self.db.session.get(Categorie, categorie_id) if est_uuid(categorie_id) else None
        if not categorie:
            return False, "Catégorie introuvable"

        # Refus si des transactions y sont rattachées
        utilisations = Transaction.query.filter_by(categorie_id=categorie.id).count()
        if utilisations:
            return False, f"Impossible de supprimer « {categorie.nom} » : {utilisations} transaction(s) associée(s)"

        return self.delete(categorie, f"Catégorie « {categorie.nom} » supprimée")

    def reorder_categories(self, ordered_ids):
        return self.reorder(Categorie, ordered_ids)

    def seed_default_categories(self):
        """Crée les catégories prédéfinies si la table est vide"""
        if Categorie.query.count() > 0:
            return 0
        for position, (nom, couleur, icone) in enumerate(CATEGORIES_DEFAULT):
            self.db.session.add(Categorie(nom=nom, couleur=couleur, icone=icone, sort_order=position))
        self.db.session.commit()
        return len(CATEGORIES_DEFAULT)
