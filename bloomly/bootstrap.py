# bloomly/bootstrap.py
import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from bloomly.db import Base
from bloomly.models import core  # noqa: F401  registers the tables on Base.metadata

logger = logging.getLogger(__name__)


def _enable_pgcrypto(engine: Engine) -> None:
    # gen_random_uuid(); some hosted plans refuse CREATE EXTENSION
    try:
        with engine.begin() as conn:
            conn.execute(text('CREATE EXTENSION IF NOT EXISTS "pgcrypto"'))
    except SQLAlchemyError as e:
        logger.warning("Could not enable pgcrypto extension: %s", e)


def migrate(engine: Engine) -> None:
    """Create every table that is missing. Safe to run on each boot."""
    if engine.dialect.name == "postgresql":
        _enable_pgcrypto(engine)

    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Database migrated / verified")
