# cruddemo/core/logging.py
import logging
import sys

from cruddemo.core.config import settings


# Configure standard Python logging
def setup_logging(level: str = None) -> logging.Logger:
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)  # Print logs to console
        ]
    )
    return logging.getLogger("cruddemo")
