"""FastAPI REST API for ThoughtLine."""
