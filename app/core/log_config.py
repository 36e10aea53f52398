# app/core/log_config.py
import logging
from typing import Optional

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the API process."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
    # uvicorn's access log is noisy with the dashboard polling every 10s
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
