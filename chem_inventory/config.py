"""Configuration and settings."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Paths
# Directories are created lazily: the file store makes its parent on first
# write and the logger makes LOG_DIR when it is configured.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = Path(os.getenv("INVENTORY_DATA_DIR", "") or PROJECT_ROOT / "data")
OUTPUT_DIR = Path(os.getenv("INVENTORY_OUTPUT_DIR", "") or PROJECT_ROOT / "output")

# Device key-value store (one JSON file holding every key)
STORE_PATH = Path(os.getenv("INVENTORY_STORE_PATH", "") or DATA_DIR / "device_store.json")
STORAGE_KEY = os.getenv("INVENTORY_STORAGE_KEY", "chemicals")

# Logging
LOG_DIR = Path(os.getenv("INVENTORY_LOG_DIR", "") or OUTPUT_DIR / "logs")
LOG_FILE = LOG_DIR / "app.jsonl"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
VERBOSE_LOGGING = os.getenv("VERBOSE_LOGGING", "false").lower() == "true"

# Products
UNITS = ("kg", "L", "g", "mL")
DEFAULT_UNIT = "kg"
DEFAULT_STOCK = 0
DEFAULT_MIN_STOCK = 10

# Alert / dialog copy
VALIDATION_ALERT_TITLE = "Error"
DELETE_CONFIRM_TITLE = "Confirm deletion"
DELETE_CONFIRM_MESSAGE = "Are you sure you want to delete this product?"
DELETE_CONFIRM_LABEL = "Delete"
DELETE_CANCEL_LABEL = "Cancel"
