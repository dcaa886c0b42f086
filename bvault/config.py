import logging
import os

from dotenv import load_dotenv

load_dotenv()

STORAGE_PATH = os.getenv("STORAGE_PATH", "./_data")
LOG_LEVEL = os.getenv("BVAULT_LOG_LEVEL", "WARNING").upper()


def configure_logging(level: str = LOG_LEVEL) -> None:
    # Solo para aplicaciones; la librería no toca el logging raíz.
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
