"""
Schémas de validation des entrées des actions.

Chaque action valide ses données avant tout accès à la base ; en cas d'échec
seul le premier message est remonté à l'utilisateur.
"""
import math
import re
import uuid
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from finatrak.defaults import TYPES_TRANSACTION, FREQUENCES_BUDGET, PERIODES_OBJECTIF

# Alias : le champ `date` des transactions masquerait le type dans son annotation
DateType = date

MESSAGE_DEFAUT = "Données invalides"

_EMAIL_RE = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


def est_uuid(valeur):
    """True si `valeur` est un UUID valide"""
    if not isinstance(valeur, str) or not valeur:
        return False
    try:
        uuid.UUID(valeur)
        return True
    except ValueError:
        return False


def _nombre(valeur, message):
    if isinstance(valeur, bool) or valeur is None:
        raise ValueError(message)
    if isinstance(valeur, str):
        valeur = valeur.strip().replace(',', '.')
        if not valeur:
            raise ValueError(message)
    try:
        nombre = float(valeur)
    except (TypeError, ValueError):
        raise ValueError(message)
    if not math.isfinite(nombre):
        raise ValueError(message)
    return nombre


def _texte_requis(valeur, message):
    if not isinstance(valeur, str) or not valeur.strip():
        raise ValueError(message)
    return valeur.strip()


def _texte_optionnel(valeur):
    if valeur is None:
        return None
    valeur = str(valeur).strip()
    return valeur or None


def _uuid_requis(valeur, message):
    if not est_uuid(valeur):
        raise ValueError(message)
    return valeur


def _uuid_optionnel(valeur, message="Identifiant invalide"):
    valeur = _texte_optionnel(valeur)
    if valeur is None:
        return None
    return _uuid_requis(valeur, message)


def _date(valeur, message):
    if isinstance(valeur, datetime):
        return valeur.date()
    if isinstance(valeur, date):
        return valeur
    if not isinstance(valeur, str) or not valeur.strip():
        raise ValueError(message)
    try:
        return datetime.strptime(valeur.strip()[:10], '%Y-%m-%d').date()
    except ValueError:
        raise ValueError("Date invalide (AAAA-MM-JJ)")


def _choix(valeur, choix, message):
    if valeur not in choix:
        raise ValueError(message)
    return valeur


def premier_message(exc):
    """Retourne le premier message d'une ValidationError, sans préfixe pydantic"""
    erreurs = exc.errors()
    if not erreurs:
        return MESSAGE_DEFAUT
    erreur = erreurs[0]
    if erreur.get('type') == 'value_error':
        cause = (erreur.get('ctx') or {}).get('error')
        if cause is not None:
            return str(cause)
        return erreur.get('msg', MESSAGE_DEFAUT).replace('Value error, ', '', 1)
    return MESSAGE_DEFAUT


def valider(schema, donnees):
    """Équivalent de `safeParse` : retourne (True, instance) ou (False, message)"""
    try:
        return True, schema.model_validate(donnees or {})
    except ValidationError as e:
        return False, premier_message(e)


class _Schema(BaseModel):
    # validate_default : les champs absents passent par les validateurs
    # et produisent le message métier plutôt qu'un « Field required ».
    model_config = ConfigDict(validate_default=True, extra='ignore')


# ── Authentification ─────────────────────────────────────────────────────────

class AuthSchema(_Schema):
    email: str = None
    password: str = None

    @field_validator('email', mode='before')
    @classmethod
    def _email(cls, v):
        if not isinstance(v, str) or not _EMAIL_RE.match(v.strip()):
            raise ValueError("Email invalide")
        return v.strip().lower()

    @field_validator('password', mode='before')
    @classmethod
    def _password(cls, v):
        if not isinstance(v, str) or len(v) < 6:
            raise ValueError("Le mot de passe doit contenir au moins 6 caractères")
        return v


# ── Comptes ──────────────────────────────────────────────────────────────────

class CompteSchema(_Schema):
    nom: str = None
    couleur: str = None
    icone: str = None
    solde_initial: float = None

    @field_validator('nom', mode='before')
    @classmethod
    def _nom(cls, v):
        return _texte_requis(v, "Le nom est requis")

    @field_validator('couleur', mode='before')
    @classmethod
    def _couleur(cls, v):
        return _texte_requis(v, "La couleur est requise")

    @field_validator('icone', mode='before')
    @classmethod
    def _icone(cls, v):
        return _texte_requis(v, "L'icône est requise")

    @field_validator('solde_initial', mode='before')
    @classmethod
    def _solde(cls, v):
        return _nombre(v, "Le solde initial doit être un nombre")


class UpdateCompteSchema(CompteSchema):
    id: str = None

    @field_validator('id', mode='before')
    @classmethod
    def _id(cls, v):
        return _uuid_requis(v, "Identifiant invalide")


class SoldeInitialSchema(_Schema):
    montant: float = None

    @field_validator('montant', mode='before')
    @classmethod
    def _montant(cls, v):
        return _nombre(v, "Montant invalide")


# ── Catégories ───────────────────────────────────────────────────────────────

class CategorieSchema(_Schema):
    nom: str = None
    couleur: str = None
    icone: str = None

    @field_validator('nom', mode='before')
    @classmethod
    def _nom(cls, v):
        return _texte_requis(v, "Le nom est requis")

    @field_validator('couleur', mode='before')
    @classmethod
    def _couleur(cls, v):
        return _texte_requis(v, "La couleur est requise")

    @field_validator('icone', mode='before')
    @classmethod
    def _icone(cls, v):
        return _texte_optionnel(v) or 'tag'


# ── Transactions ─────────────────────────────────────────────────────────────

class _TransactionBase(_Schema):
    montant: float = None
    type: str = None
    categorie_id: Optional[str] = None
    description: Optional[str] = None
    date: Optional[DateType] = None

    @field_validator('montant', mode='before')
    @classmethod
    def _montant(cls, v):
        montant = _nombre(v, "Le montant doit être positif")
        if montant <= 0:
            raise ValueError("Le montant doit être positif")
        return montant

    @field_validator('type', mode='before')
    @classmethod
    def _type(cls, v):
        return _choix(v, TYPES_TRANSACTION, "Type de transaction invalide")

    @field_validator('categorie_id', mode='before')
    @classmethod
    def _categorie(cls, v):
        return _uuid_optionnel(v, "Catégorie invalide")

    @field_validator('description', mode='before')
    @classmethod
    def _description(cls, v):
        return _texte_optionnel(v)

    @field_validator('date', mode='before')
    @classmethod
    def _valide_date(cls, v):
        return _date(v, "La date est requise")


class TransactionSchema(_TransactionBase):
    compte_id: str = None
    # objectif_id n'est pas stocké : il sert uniquement à mettre à jour la progression
    objectif_id: Optional[str] = None
    budget_item_id: Optional[str] = None

    @field_validator('compte_id', mode='before')
    @classmethod
    def _compte(cls, v):
        return _uuid_requis(v, "Compte invalide")

    @field_validator('objectif_id', 'budget_item_id', mode='before')
    @classmethod
    def _liens(cls, v):
        return _uuid_optionnel(v)


class UpdateTransactionSchema(_TransactionBase):
    id: str = None

    @field_validator('id', mode='before')
    @classmethod
    def _id(cls, v):
        return _uuid_requis(v, "Identifiant invalide")


class TransactionFiltersSchema(_Schema):
    """Filtres de la liste des transactions (lus depuis la query string)"""
    date_debut: Optional[date] = None
    date_fin: Optional[date] = None
    type: Optional[str] = None
    categorie_ids: list = []
    montant_min: Optional[float] = None
    montant_max: Optional[float] = None

    @field_validator('date_debut', 'date_fin', mode='before')
    @classmethod
    def _dates(cls, v):
        if not _texte_optionnel(v) and not isinstance(v, date):
            return None
        return _date(v, "Date invalide")

    @field_validator('type', mode='before')
    @classmethod
    def _type(cls, v):
        v = _texte_optionnel(v)
        if v in (None, 'all'):
            return None
        return _choix(v, TYPES_TRANSACTION, "Type de transaction invalide")

    @field_validator('categorie_ids', mode='before')
    @classmethod
    def _categories(cls, v):
        if not v:
            return []
        if isinstance(v, str):
            v = v.split(',')
        return [c.strip() for c in v if c and c.strip()]

    @field_validator('montant_min', 'montant_max', mode='before')
    @classmethod
    def _montants(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return _nombre(v, "Montant invalide")


# ── Budget ───────────────────────────────────────────────────────────────────

class _BudgetItemBase(_Schema):
    nom: str = None
    montant: float = None
    frequence: str = None
    categorie_id: Optional[str] = None
    objectif_id: Optional[str] = None

    @field_validator('nom', mode='before')
    @classmethod
    def _nom(cls, v):
        return _texte_requis(v, "Le nom est requis")

    @field_validator('montant', mode='before')
    @classmethod
    def _montant(cls, v):
        montant = _nombre(v, "Le montant doit être positif")
        if montant <= 0:
            raise ValueError("Le montant doit être positif")
        return montant

    @field_validator('frequence', mode='before')
    @classmethod
    def _frequence(cls, v):
        return _choix(v, FREQUENCES_BUDGET, "Fréquence invalide")

    @field_validator('categorie_id', mode='before')
    @classmethod
    def _categorie(cls, v):
        return _uuid_optionnel(v, "Catégorie invalide")

    @field_validator('objectif_id', mode='before')
    @classmethod
    def _objectif(cls, v):
        return _uuid_optionnel(v)


class BudgetItemSchema(_BudgetItemBase):
    compte_id: str = None
    creer_objectif: bool = False
    objectif_nom: Optional[str] = None
    objectif_cible: Optional[float] = None
    objectif_periode: Optional[str] = None

    @field_validator('compte_id', mode='before')
    @classmethod
    def _compte(cls, v):
        return _uuid_requis(v, "Compte invalide")

    @field_validator('creer_objectif', mode='before')
    @classmethod
    def _creer(cls, v):
        if isinstance(v, str):
            return v.lower() in ('1', 'true', 'on', 'oui')
        return bool(v)

    @field_validator('objectif_nom', mode='before')
    @classmethod
    def _objectif_nom(cls, v):
        return _texte_optionnel(v)

    @field_validator('objectif_cible', mode='before')
    @classmethod
    def _objectif_cible(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        cible = _nombre(v, "Le montant cible doit être positif")
        if cible <= 0:
            raise ValueError("Le montant cible doit être positif")
        return cible

    @field_validator('objectif_periode', mode='before')
    @classmethod
    def _objectif_periode(cls, v):
        v = _texte_optionnel(v)
        if v is None:
            return None
        return _choix(v, PERIODES_OBJECTIF, "Période invalide")


class UpdateBudgetItemSchema(_BudgetItemBase):
    id: str = None

    @field_validator('id', mode='before')
    @classmethod
    def _id(cls, v):
        return _uuid_requis(v, "Identifiant invalide")


# ── Objectifs ────────────────────────────────────────────────────────────────

class _ObjectifBase(_Schema):
    nom: str = None
    montant_cible: float = None
    montant_actuel: float = None
    periode: str = None
    date_fin: Optional[date] = None

    @field_validator('nom', mode='before')
    @classmethod
    def _nom(cls, v):
        return _texte_requis(v, "Le nom est requis")

    @field_validator('montant_cible', mode='before')
    @classmethod
    def _cible(cls, v):
        cible = _nombre(v, "Le montant cible doit être positif")
        if cible <= 0:
            raise ValueError("Le montant cible doit être positif")
        return cible

    @field_validator('montant_actuel', mode='before')
    @classmethod
    def _actuel(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return 0.0
        actuel = _nombre(v, "Le montant actuel ne peut pas être négatif")
        if actuel < 0:
            raise ValueError("Le montant actuel ne peut pas être négatif")
        return actuel

    @field_validator('periode', mode='before')
    @classmethod
    def _periode(cls, v):
        return _choix(v, PERIODES_OBJECTIF, "Période invalide")

    @field_validator('date_fin', mode='before')
    @classmethod
    def _date_fin(cls, v):
        if _texte_optionnel(v) is None and not isinstance(v, date):
            return None
        return _date(v, "Date invalide")


class ObjectifSchema(_ObjectifBase):
    compte_id: str = None

    @field_validator('compte_id', mode='before')
    @classmethod
    def _compte(cls, v):
        return _uuid_requis(v, "Compte invalide")


class UpdateObjectifSchema(_ObjectifBase):
    id: str = None

    @field_validator('id', mode='before')
    @classmethod
    def _id(cls, v):
        return _uuid_requis(v, "Identifiant invalide")
