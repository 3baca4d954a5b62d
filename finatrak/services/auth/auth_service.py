"""
Service d'authentification (inscription, connexion)
"""
from finatrak.services import BaseService
from finatrak.schemas import AuthSchema, valider
from finatrak.models import nouvel_id
from finatrak.models.utilisateur import Utilisateur
from finatrak.models.compte import Compte
from finatrak.defaults import COMPTE_DEFAULT
import logging

logger = logging.getLogger(__name__)


class AuthService(BaseService):
    """Inscription et connexion par email / mot de passe"""

    def sign_up(self, email, password):
        """Crée un utilisateur et son premier compte.

        Retourne ``(True, message)`` ou ``(False, erreur)``.
        """
        ok, parsed = valider(AuthSchema, {'email': email, 'password': password})
        if not ok:
            return False, parsed

        if Utilisateur.query.filter_by(email=parsed.email).first():
            return False, "Un compte existe déjà avec cet email"

        try:
            utilisateur = Utilisateur(id=nouvel_id(), email=parsed.email)
            utilisateur.set_password(parsed.password)
            self.db.session.add(utilisateur)
            # Un utilisateur a toujours au moins un compte
            self.db.session.add(Compte(user_id=utilisateur.id, sort_order=0, **COMPTE_DEFAULT))
            self.db.session.commit()
        except Exception as e:
            self.db.session.rollback()
            logger.exception("Erreur lors de l'inscription de %s", parsed.email)
            return False, str(e)

        logger.info("Nouvel utilisateur inscrit: %s", parsed.email)
        return True, "Compte créé ! Vous pouvez maintenant vous connecter."

    def sign_in(self, email, password):
        """Vérifie les identifiants.

        Retourne ``(True, utilisateur)`` ou ``(False, erreur)``.
        """
        ok, parsed = valider(AuthSchema, {'email': email, 'password': password})
        if not ok:
            return False, parsed

        utilisateur = Utilisateur.query.filter_by(email=parsed.email).first()
        if utilisateur is None or not utilisateur.check_password(parsed.password):
            logger.info("Échec de connexion pour %s", parsed.email)
            return False, "Email ou mot de passe incorrect"
        return True, utilisateur
