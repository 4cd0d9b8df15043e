import os
import sys

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

# library code stays silent until an application opts in
logger.disable("shopsdk")

API_BASE = os.getenv("INVENTORY_API_BASE", "http://127.0.0.1:8085").rstrip("/")
SNAPSHOT_URL = os.getenv("INVENTORY_SNAPSHOT_URL") or None
LOG_LEVEL = os.getenv("INVENTORY_LOG_LEVEL", "WARNING").upper()


def configure_logging(level: str = LOG_LEVEL):
    # debug shows every request and flag change
    logger.remove()
    logger.enable("shopsdk")
    logger.add(sys.stderr, level=level, format="{time:HH:mm:ss} | {level} | {name} | {message}")
