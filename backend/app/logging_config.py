"""
Configuration de la journalisation.
Un seul handler stdout sur le logger racine ; chaque module utilise logging.getLogger(__name__).
"""

import logging
from typing import Optional

from app.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure le logger racine (niveau issu de LOG_LEVEL par défaut).
    Appelée une fois au démarrage de l'API ; les appels suivants remplacent le handler.
    """
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [handler]

    # SQLAlchemy est trop bavard en INFO, sauf si SQL_ECHO est demandé explicitement
    if not settings.SQL_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    return root_logger
