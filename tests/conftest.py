"""Root conftest — shared test configuration."""

import os

# Settings are read when dashboard.main is imported; keep tests off real infrastructure
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("DATABASE_SSL", "")
os.environ.setdefault("SESSION_SECRET_KEY", "test-session-secret")
os.environ.setdefault("SESSION_HTTPS_ONLY", "false")
os.environ.setdefault("LOG_FORMAT", "text")
