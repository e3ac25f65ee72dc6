# app/core/logging.py
import logging
import sys

from app.core.config import settings


def setup_logging(level: str = settings.LOG_LEVEL) -> logging.Logger:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    return logging.getLogger("student_api")


logger = setup_logging()
