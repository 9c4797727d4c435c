"""Root conftest — shared test configuration."""

import os

# Settings are read at import time by main.py; never point tests at a real DB
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
