"""Invoice Dashboard HTTP API (FastAPI)."""
