"""
APPLICATION CONFIGURATION

All settings come from environment variables with local-dev defaults.
"""

import logging
import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent

# ══════════════════════════════════════════════════════════════
# STORAGE
# ══════════════════════════════════════════════════════════════

DATA_DIR = Path(os.getenv("SHIPMENT_TRACKER_DATA_DIR", "data"))
STORAGE_KEY = os.getenv("SHIPMENT_TRACKER_STORAGE_KEY", "shipments-db")
SEED_FILE = Path(
    os.getenv("SHIPMENT_TRACKER_SEED_FILE", str(PACKAGE_DIR / "data" / "shipments.json"))
)

# ══════════════════════════════════════════════════════════════
# UI
# ══════════════════════════════════════════════════════════════

PAGE_SIZE_OPTIONS = [5, 10, 20]
DEFAULT_PAGE_SIZE = int(os.getenv("SHIPMENT_TRACKER_PAGE_SIZE", "10"))

# ══════════════════════════════════════════════════════════════
# LOGGING
# ══════════════════════════════════════════════════════════════

LOG_LEVEL = os.getenv("SHIPMENT_TRACKER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    """Configure root logging once (Streamlit re-runs the script on every interaction)."""
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
