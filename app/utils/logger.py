import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int = logging.INFO):
    """Configure root logging once for the whole application."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def setup_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a named application logger (root "app" logger by default)."""
    return logging.getLogger(f"app.{name}" if name else "app")
