"""Point d'entrée de l'application.

Démarre le serveur Flask ; si la variable d'environnement `INIT_DB` vaut
``1``, les tables sont créées et les catégories par défaut insérées.
"""

import os
import logging
from finatrak import create_app, db


def init_database():
    """Crée les tables et les données par défaut.

    N'est exécutée qu'avec INIT_DB=1, pour éviter tout effet de bord.
    """
    from finatrak.services.categories.categories_service import CategoriesService

    db.create_all()
    ajoutees = CategoriesService().seed_default_categories()
    logging.getLogger(__name__).info("Initialisation : %d catégorie(s) ajoutée(s)", ajoutees)


def main():
    app = create_app(os.environ.get('FINATRAK_CONFIG', 'default'))
    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'))

    if os.environ.get('INIT_DB') == '1':
        with app.app_context():
            init_database()

    app.run(host=app.config.get('HOST', '0.0.0.0'), port=app.config.get('PORT', 5001),
            debug=os.environ.get('FLASK_DEBUG') == '1')


if __name__ == '__main__':
    main()
