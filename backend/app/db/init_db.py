"""
Database initialization script.
"""
import logging
from app.core.logging import configure_logging
from app.db.session import engine, init_db

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    configure_logging()
    logger.info("Initializing database at %s", engine.url.render_as_string(hide_password=True))
    init_db()
    logger.info("Database initialized successfully!")
