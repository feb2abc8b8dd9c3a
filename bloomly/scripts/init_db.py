# bloomly/scripts/init_db.py
import logging

from bloomly.config import settings
from bloomly.db import engine
from bloomly.bootstrap import migrate
from bloomly.logging_config import setup_logging


def apply_schema():
    setup_logging(settings.LOG_LEVEL)
    migrate(engine)
    logging.getLogger(__name__).info("Schema applied successfully.")


if __name__ == "__main__":
    apply_schema()
