from finatrak import db


class Setting(db.Model):
    """Paramètre clé/valeur (ex. ordre de la navigation)"""
    __tablename__ = 'settings'

    id = db.Column(db.Integer, primary_key=True)
    cle = db.Column(db.String(100), unique=True, nullable=False)
    valeur = db.Column(db.Text, nullable=True)

    def __repr__(self):
        return f'<Setting {self.cle}={self.valeur}>'
