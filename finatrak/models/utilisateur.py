"""
Modèle des utilisateurs
"""
from finatrak import db
from finatrak.models import nouvel_id
from datetime import datetime
from werkzeug.security import generate_password_hash, check_password_hash


class Utilisateur(db.Model):
    """Utilisateur authentifié par email et mot de passe"""
    __tablename__ = 'utilisateurs'

    id = db.Column(db.String(36), primary_key=True, default=nouvel_id)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<Utilisateur {self.email}>'
