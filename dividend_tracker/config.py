"""Configuration settings for dividend_tracker.

Values are read from the environment (a ``.env`` file in the working
directory is loaded first) and fall back to sensible local defaults.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BACKEND_URL = os.environ.get("BACKEND_URL", "http://localhost:8000")
REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "15"))
FETCH_WORKERS = int(os.environ.get("FETCH_WORKERS", "1"))
DB_PATH = Path(
    os.environ.get("DIVIDEND_DB_PATH", str(Path.home() / ".dividend_tracker.db"))
).expanduser()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Set up root logging for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
