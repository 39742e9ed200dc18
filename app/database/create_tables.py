"""
Create the fleet schema from the SQLAlchemy models.
"""
from app.models import *  # noqa: F401,F403  registers every table on Base
from app.database.session import engine, Base
from app.core.logging_config import get_logger

logger = get_logger(__name__)


def create_tables(bind=None):
    """Initialize the database and create all tables."""
    try:
        Base.metadata.create_all(bind=bind or engine)
        logger.info("Database initialization completed")
    except Exception as e:
        logger.exception(f"Database initialization failed: {str(e)}")
        raise
