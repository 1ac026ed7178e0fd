"""Test configuration.

The environment is prepared before anything under ``src`` is imported: the
application context reads config.yaml once, at import time.
"""

import os
from pathlib import Path

os.environ["APP_ENVIRONMENT"] = "test"
os.environ["CONFIG_FILE"] = str(Path(__file__).resolve().parents[1] / "config.yaml")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE"] = ""
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.pop("CORS_ORIGIN", None)
os.environ.pop("AUTH_CORS_ORIGIN", None)

from tests.fixtures import *  # noqa: E402,F401,F403
