"""Root conftest — shared test configuration."""

import os

# Ensure tests don't pick up a developer's .env overrides
os.environ.setdefault("CORS_ORIGINS", '["http://localhost:63342"]')
os.environ.setdefault("CORS_METHODS", '["DELETE"]')
os.environ.setdefault("LOG_FORMAT", "text")
