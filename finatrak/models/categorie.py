"""Modèle des catégories (données de référence partagées)"""
from finatrak import db
from finatrak.models import nouvel_id
from datetime import datetime


class Categorie(db.Model):
    """Catégorie de transactions et de lignes de budget"""
    __tablename__ = 'categories'

    id = db.Column(db.String(36), primary_key=True, default=nouvel_id)
    nom = db.Column(db.String(100), nullable=False)
    couleur = db.Column(db.String(20), nullable=False)
    icone = db.Column(db.String(50), nullable=False)
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self):
        return f'<Categorie {self.nom}>'
