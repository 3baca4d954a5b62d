"""Service des paramètres (solde initial, ordre de la navigation)"""
from finatrak.services import BaseService
from finatrak.models.setting import Setting
from finatrak.models.compte import Compte
from finatrak.schemas import SoldeInitialSchema, valider
from finatrak.defaults import NAV_ITEMS, NAV_KEYS
import json
import logging

logger = logging.getLogger(__name__)

NAV_ORDER_KEY = 'nav_order'


def ordonner_navigation(saved_order):
    """Entrées de navigation dans l'ordre enregistré.

    Les clés inconnues sont ignorées et les entrées absentes ajoutées à la
    fin dans l'ordre par défaut.
    """
    par_cle = {item[0]: item for item in NAV_ITEMS}
    ordered = []
    for cle in list(saved_order) + [item[0] for item in NAV_ITEMS]:
        if isinstance(cle, str) and cle in par_cle and par_cle[cle] not in ordered:
            ordered.append(par_cle[cle])
    return ordered


class ParametresService(BaseService):
    """Paramètres clé/valeur"""

    def get_setting(self, cle):
        return Setting.query.filter_by(cle=cle).first()

    def fetch_nav_order(self):
        """Ordre de navigation enregistré ; liste vide si absent ou illisible"""
        try:
            setting = self.get_setting(NAV_ORDER_KEY)
        except Exception:
            logger.exception("[parametres] fetch_nav_order")
            return []
        if setting is None or not setting.valeur:
            return []
        try:
            parsed = json.loads(setting.valeur)
        except ValueError:
            return []
        if not isinstance(parsed, list):
            return []
        return [cle for cle in parsed if isinstance(cle, str)]

    def update_nav_order(self, keys):
        if not isinstance(keys, list) or not all(isinstance(k, str) for k in keys):
            return False, "Ordre de navigation invalide"

        cles = [k for k in keys if k in NAV_KEYS]
        # dédoublonnage en conservant l'ordre
        cles = list(dict.fromkeys(cles))

        setting = self.get_setting(NAV_ORDER_KEY)
        if setting is None:
            setting = Setting(cle=NAV_ORDER_KEY)
        setting.valeur = json.dumps(cles)
        return self.save(setting, "Navigation réorganisée")

    def update_solde_initial(self, compte_id, montant):
        """Met à jour le solde initial du compte"""
        ok, parsed = valider(SoldeInitialSchema, {'montant': montant})
        if not ok:
            return False, parsed

        compte = Compte.query.filter_by(id=compte_id, user_id=self.user_id).first()
        if compte is None:
            return False, "Compte introuvable"
        return self.update(compte, "Solde initial mis à jour", solde_initial=parsed.montant)
