"""
Service de base pour la logique métier
"""
from finatrak import db
from finatrak.defaults import MOIS_COURTS, MOIS_LONGS
from datetime import date
from dateutil.relativedelta import relativedelta
import logging

logger = logging.getLogger(__name__)

__all__ = ['BaseService', 'get_periode_bounds', 'label_mois', 'label_mois_long']


class BaseService:
    """Classe de base des services.

    Toutes les actions retournent un tuple ``(succès, message)`` : c'est le
    résultat discriminé affiché ensuite en notification par les vues.
    """

    def __init__(self, user_id=None):
        self.db = db
        self.user_id = user_id

    def save(self, obj, message="Opération effectuée"):
        """Enregistre un objet en base"""
        try:
            self.db.session.add(obj)
            self.db.session.commit()
            return True, message
        except Exception as e:
            self.db.session.rollback()
            logger.exception("Erreur lors de l'enregistrement de %r", obj)
            return False, str(e)

    def delete(self, obj, message="Suppression effectuée"):
        """Supprime un objet de la base"""
        try:
            self.db.session.delete(obj)
            self.db.session.commit()
            return True, message
        except Exception as e:
            self.db.session.rollback()
            logger.exception("Erreur lors de la suppression de %r", obj)
            return False, str(e)

    def update(self, obj, message="Mise à jour effectuée", **kwargs):
        """Met à jour les attributs fournis d'un objet"""
        try:
            for key, value in kwargs.items():
                if hasattr(obj, key):
                    setattr(obj, key, value)
            self.db.session.commit()
            return True, message
        except Exception as e:
            self.db.session.rollback()
            logger.exception("Erreur lors de la mise à jour de %r", obj)
            return False, str(e)

    def reorder(self, model, ordered_ids, message="Ordre mis à jour", **scope):
        """Écrit ``sort_order = position`` pour chaque identifiant de la liste.

        Les mises à jour sont appliquées dans l'ordre de la liste puis validées
        en une seule fois ; `scope` restreint les lignes modifiables (ex.
        ``user_id=...``).
        """
        if not isinstance(ordered_ids, (list, tuple)):
            return False, "Liste d'identifiants invalide"
        try:
            for position, obj_id in enumerate(ordered_ids):
                query = model.query.filter_by(id=obj_id, **scope)
                query.update({'sort_order': position}, synchronize_session='fetch')
            self.db.session.commit()
            return True, message
        except Exception as e:
            self.db.session.rollback()
            logger.exception("Erreur lors de la réorganisation de %s", model.__tablename__)
            return False, str(e)

    def categorie_existe(self, categorie_id):
        """True si `categorie_id` est vide ou désigne une catégorie existante"""
        from finatrak.models.categorie import Categorie
        return categorie_id is None or self.db.session.get(Categorie, categorie_id) is not None

    def next_sort_order(self, model, **scope):
        """Prochaine valeur de `sort_order` (0 si aucune ligne)"""
        last = model.query.filter_by(**scope).order_by(model.sort_order.desc()).first()
        return (last.sort_order if last is not None else -1) + 1


def get_periode_bounds(date_obj=None):
    """Bornes (premier jour, dernier jour) du mois calendaire de `date_obj`"""
    if date_obj is None:
        date_obj = date.today()
    debut = date_obj.replace(day=1)
    fin = debut + relativedelta(months=1) - relativedelta(days=1)
    return debut, fin


def label_mois(valeur):
    """Libellé court d'un mois, ex. ``'janv. 25'``.

    Accepte une date ou une clé ``'AAAA-MM'``.
    """
    if isinstance(valeur, str):
        annee, mois = valeur[:7].split('-')
        annee, mois = int(annee), int(mois)
    else:
        annee, mois = valeur.year, valeur.month
    return f"{MOIS_COURTS[mois - 1]} {annee % 100:02d}"


def label_mois_long(date_obj):
    """Libellé long, ex. ``'Février 2026'``"""
    return f"{MOIS_LONGS[date_obj.month - 1]} {date_obj.year}"
