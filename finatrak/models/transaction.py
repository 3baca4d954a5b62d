"""
Modèle des transactions
"""
from finatrak import db
from finatrak.models import nouvel_id
from datetime import datetime


class Transaction(db.Model):
    """Mouvement financier (revenu ou dépense) sur un compte"""
    __tablename__ = 'transactions'

    id = db.Column(db.String(36), primary_key=True, default=nouvel_id)
    user_id = db.Column(db.String(36), db.ForeignKey('utilisateurs.id', ondelete='CASCADE'), nullable=False, index=True)
    compte_id = db.Column(db.String(36), db.ForeignKey('comptes.id', ondelete='CASCADE'), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False, index=True)
    montant = db.Column(db.Float, nullable=False)  # toujours positif, le signe vient de `type`
    type = db.Column(db.String(20), nullable=False)  # 'revenu' ou 'depense'
    categorie_id = db.Column(db.String(36), db.ForeignKey('categories.id'), nullable=True)
    description = db.Column(db.String(500), nullable=True)
    budget_item_id = db.Column(db.String(36), db.ForeignKey('budget_items.id', ondelete='SET NULL'), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    categorie = db.relationship('Categorie', backref=db.backref('transactions', lazy=True))
    budget_item = db.relationship('BudgetItem', backref=db.backref('transactions', lazy=True))

    @property
    def montant_signe(self):
        """Montant avec signe : négatif pour une dépense"""
        return -self.montant if self.type == 'depense' else self.montant

    def __repr__(self):
        return f'<Transaction {self.date}: {self.montant} ({self.type})>'
