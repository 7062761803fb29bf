"""API schemas (pydantic)."""
