from database import engine, Base
from sqlalchemy import inspect
import logging

import models  # noqa: F401  registers the tables on Base.metadata

logger = logging.getLogger(__name__)


def init_database(bind=None):
    """
    Create any missing tables.

    Args:
        bind: Engine to create tables on (default: the application engine)

    Returns:
        Names of the tables that were created
    """
    bind = bind if bind is not None else engine
    existing = set(inspect(bind).get_table_names())
    Base.metadata.create_all(bind)
    created = sorted(set(Base.metadata.tables) - existing)
    if created:
        logger.info(f"Created tables: {', '.join(created)}")
    else:
        logger.info("Database schema up to date")
    return created


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
