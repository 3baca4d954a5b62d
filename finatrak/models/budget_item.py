"""
Modèle des lignes de budget (charges planifiées récurrentes)
"""
from finatrak import db
from finatrak.models import nouvel_id
from datetime import datetime


class BudgetItem(db.Model):
    """Ligne de budget mensuelle ou annuelle, éventuellement liée à un objectif"""
    __tablename__ = 'budget_items'

    id = db.Column(db.String(36), primary_key=True, default=nouvel_id)
    user_id = db.Column(db.String(36), db.ForeignKey('utilisateurs.id', ondelete='CASCADE'), nullable=False, index=True)
    compte_id = db.Column(db.String(36), db.ForeignKey('comptes.id', ondelete='CASCADE'), nullable=False, index=True)
    nom = db.Column(db.String(200), nullable=False)
    montant = db.Column(db.Float, nullable=False)
    frequence = db.Column(db.String(20), nullable=False, default='mensuel')  # 'mensuel' ou 'annuel'
    categorie_id = db.Column(db.String(36), db.ForeignKey('categories.id', ondelete='SET NULL'), nullable=True)
    objectif_id = db.Column(db.String(36), db.ForeignKey('objectifs.id', ondelete='SET NULL'), nullable=True)
    actif = db.Column(db.Boolean, nullable=False, default=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    categorie = db.relationship('Categorie', backref=db.backref('budget_items', lazy=True))
    objectif = db.relationship('Objectif', backref=db.backref('budget_items', lazy=True))

    def __repr__(self):
        return f'<BudgetItem {self.nom}: {self.montant} ({self.frequence})>'
