"""
Logging setup, called once at application startup.
"""
import logging
from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def configure_logging(level: str = None) -> None:
    """Attach a single stream handler to the root logger."""
    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL

    root = logging.getLogger()
    if not any(getattr(h, "_connectsphere", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._connectsphere = True
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
