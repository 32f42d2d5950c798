# init_db.py
import logging

from app.config import settings
from app.core.logging_config import setup_logging
from app.db.session import init_db

logger = logging.getLogger(__name__)


def init():
    setup_logging(settings.LOG_LEVEL)
    logger.info("Creating tables (if not exist) on %s", settings.DATABASE_URL)
    init_db()
    logger.info("Done.")


if __name__ == "__main__":
    init()
