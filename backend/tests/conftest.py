"""Root conftest — shared test configuration."""

import os

# Tests never touch a real database or a real passkey list
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("PASSKEYS", "{}")
os.environ.setdefault("LOG_FORMAT", "text")
