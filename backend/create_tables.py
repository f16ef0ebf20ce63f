# create_tables.py — create the receipt tables in DATABASE_URL (development helper)
from receipt_points.core.config import settings
from receipt_points.services.store import ReceiptStore
import logging, sys

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

logger.info("Creating receipt tables (if not exist)...")
try:
    ReceiptStore(settings.DATABASE_URL).open().close()
    logger.info("Done.")
except Exception:
    logger.exception("Error creating tables:")
    sys.exit(1)
