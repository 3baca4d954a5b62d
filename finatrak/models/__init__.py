"""
Modèles de la base de données
"""
import uuid


def nouvel_id():
    """Génère un identifiant UUID sous forme de chaîne"""
    return str(uuid.uuid4())


# Import explicite des modèles pour qu'ils soient enregistrés dans les
# métadonnées SQLAlchemy avant `db.create_all()`.
from finatrak.models.utilisateur import Utilisateur  # noqa: E402,F401
from finatrak.models.compte import Compte  # noqa: E402,F401
from finatrak.models.categorie import Categorie  # noqa: E402,F401
from finatrak.models.objectif import Objectif  # noqa: E402,F401
from finatrak.models.budget_item import BudgetItem  # noqa: E402,F401
from finatrak.models.transaction import Transaction  # noqa: E402,F401
from finatrak.models.setting import Setting  # noqa: E402,F401
