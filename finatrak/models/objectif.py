"""
Modèle des objectifs d'épargne
"""
from finatrak import db
from finatrak.models import nouvel_id
from datetime import datetime


class Objectif(db.Model):
    """Objectif d'épargne avec montant cible et progression courante"""
    __tablename__ = 'objectifs'

    id = db.Column(db.String(36), primary_key=True, default=nouvel_id)
    user_id = db.Column(db.String(36), db.ForeignKey('utilisateurs.id', ondelete='CASCADE'), nullable=False, index=True)
    compte_id = db.Column(db.String(36), db.ForeignKey('comptes.id', ondelete='CASCADE'), nullable=False, index=True)
    nom = db.Column(db.String(200), nullable=False)
    montant_cible = db.Column(db.Float, nullable=False)
    montant_actuel = db.Column(db.Float, nullable=False, default=0.0)
    periode = db.Column(db.String(20), nullable=False, default='ponctuel')  # 'mensuel', 'annuel' ou 'ponctuel'
    date_fin = db.Column(db.Date, nullable=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self):
        return f'<Objectif {self.nom}: {self.montant_actuel}/{self.montant_cible}>'
