"""
Valeurs de contenu par défaut, séparées de la configuration d'exécution.

Ce module est la source unique des données initiales (catégories, entrées
de navigation) et des constantes de domaine partagées par services et vues.
"""

TYPES_TRANSACTION = ('revenu', 'depense')
FREQUENCES_BUDGET = ('mensuel', 'annuel')
PERIODES_OBJECTIF = ('mensuel', 'annuel', 'ponctuel')

# Catégorie de repli pour les transactions sans catégorie
CATEGORIE_AUTRES = 'Autres'
COULEUR_AUTRES = '#94a3b8'

# Catégories prédéfinies (nom, couleur, icône)
CATEGORIES_DEFAULT = [
    ('Alimentation', '#f97316', 'shopping-cart'),
    ('Logement', '#6366f1', 'home'),
    ('Transport', '#3b82f6', 'car'),
    ('Loisirs', '#ec4899', 'gamepad-2'),
    ('Santé', '#22c55e', 'heart-pulse'),
    ('Abonnements', '#a855f7', 'repeat'),
    ('Salaire', '#14b8a6', 'briefcase'),
    ('Épargne', '#eab308', 'piggy-bank'),
]

# Premier compte créé à l'inscription
COMPTE_DEFAULT = {
    'nom': 'Compte courant',
    'couleur': '#f97316',
    'icone': 'wallet',
    'solde_initial': 0.0,
}

# Entrées de navigation (clé, endpoint, libellé, icône)
NAV_ITEMS = [
    ('dashboard', 'dashboard.index', 'Tableau de bord', 'layout-dashboard'),
    ('transactions', 'transactions.index', 'Transactions', 'arrow-left-right'),
    ('budget', 'budget.index', 'Budget', 'receipt'),
    ('bilan', 'bilan.index', 'Bilan', 'bar-chart-3'),
    ('objectifs', 'objectifs.index', 'Objectifs', 'target'),
    ('parametres', 'parametres.index', 'Paramètres', 'settings'),
]
NAV_KEYS = [item[0] for item in NAV_ITEMS]

MOIS_COURTS = [
    'janv.', 'févr.', 'mars', 'avr.', 'mai', 'juin',
    'juil.', 'août', 'sept.', 'oct.', 'nov.', 'déc.'
]

MOIS_LONGS = [
    'Janvier', 'Février', 'Mars', 'Avril', 'Mai', 'Juin',
    'Juillet', 'Août', 'Septembre', 'Octobre', 'Novembre', 'Décembre'
]
