"""Command-line interface for ThoughtLine."""
