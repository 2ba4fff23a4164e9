"""
Cart Parser Configuration
Loads environment variables (and an optional .env file) and provides defaults.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Project root (two levels up from this file: src/cart_parser/cart_config.py)
# ---------------------------------------------------------------------------
CART_PARSER_ROOT = Path(__file__).parent
PROJECT_ROOT = CART_PARSER_ROOT.parent.parent

env_file = PROJECT_ROOT / ".env"
if env_file.exists():
    load_dotenv(env_file)

# ---------------------------------------------------------------------------
# Input format
# ---------------------------------------------------------------------------
CSV_DELIMITER: str = os.getenv("CART_PARSER_DELIMITER", ",")
FILE_ENCODING: str = os.getenv("CART_PARSER_ENCODING", "utf-8-sig")

# ---------------------------------------------------------------------------
# Tolerance for comparing floating-point cart totals
# ---------------------------------------------------------------------------
TOTAL_TOLERANCE: float = float(os.getenv("CART_PARSER_TOTAL_TOLERANCE", "0.001"))

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL: str = os.getenv("CART_PARSER_LOG_LEVEL", "INFO").upper()
LOG_DIR: str = os.getenv("CART_PARSER_LOG_DIR", "")
LOG_MAX_MB: int = int(os.getenv("CART_PARSER_LOG_MAX_MB", "10"))
LOG_BACKUP_COUNT: int = int(os.getenv("CART_PARSER_LOG_BACKUP_COUNT", "5"))
