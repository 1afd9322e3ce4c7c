"""Test configuration.

Environment is pinned before any application module is imported so the
configuration context is built against an in-memory database.
"""

import os
from pathlib import Path

os.environ["APP_ENVIRONMENT"] = "test"
os.environ["APP_CONFIG_FILE"] = str(Path(__file__).resolve().parent.parent / "config.yaml")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE"] = ""
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ["SESSION_SIGNING_SECRET"] = "test-session-secret"

from tests.fixtures import *  # noqa: E402,F401,F403
