"""
Pairing Method Configuration
Centralized settings for the application
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Pick up PAIRING_* overrides from a local .env
load_dotenv()

# Dataset location (foods.json / wines.json)
DATA_DIR = Path(os.getenv("PAIRING_DATA_DIR", Path(__file__).parent.parent.parent / "data"))
FOODS_FILE = DATA_DIR / "foods.json"
WINES_FILE = DATA_DIR / "wines.json"

# Logging
LOG_LEVEL = os.getenv("PAIRING_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
