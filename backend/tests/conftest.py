"""Root conftest — shared test configuration."""

import os

# Ensure tests don't accidentally use a real API key
os.environ.setdefault("YOUTUBE_API_KEY", "test-fake-api-key")
os.environ.setdefault("TRACING_EXPORTER", "none")
