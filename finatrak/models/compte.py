"""
Modèle des comptes bancaires
"""
from finatrak import db
from finatrak.models import nouvel_id
from datetime import datetime


class Compte(db.Model):
    """Compte : registre financier indépendant (courant, épargne, ...)"""
    __tablename__ = 'comptes'

    id = db.Column(db.String(36), primary_key=True, default=nouvel_id)
    user_id = db.Column(db.String(36), db.ForeignKey('utilisateurs.id', ondelete='CASCADE'), nullable=False, index=True)
    nom = db.Column(db.String(100), nullable=False)
    couleur = db.Column(db.String(20), nullable=False)
    icone = db.Column(db.String(50), nullable=False)
    solde_initial = db.Column(db.Float, nullable=False, default=0.0)
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    # La suppression d'un compte emporte ses lignes
    transactions = db.relationship('Transaction', backref='compte', lazy=True, cascade='all, delete-orphan')
    budget_items = db.relationship('BudgetItem', backref='compte', lazy=True, cascade='all, delete-orphan')
    objectifs = db.relationship('Objectif', backref='compte', lazy=True, cascade='all, delete-orphan')

    def __repr__(self):
        return f'<Compte {self.nom} ({self.sort_order})>'
