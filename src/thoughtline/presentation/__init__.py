"""Presentation layer: REST API and command-line interface."""
