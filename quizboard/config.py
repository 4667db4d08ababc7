"""Runtime settings, read once from the environment (and .env if present)."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_CSV_PATH = Path(os.getenv("QUIZBOARD_DEFAULT_CSV", str(PACKAGE_DIR / "example.csv")))
LOG_LEVEL = os.getenv("QUIZBOARD_LOG_LEVEL", "INFO").upper()
