"""Root conftest: shared test configuration."""

import os

# Ensure tests never touch the restaurants.db file of a local run
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
