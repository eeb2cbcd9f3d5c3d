"""Persistence implementations.

Structure:
    persistence/
    └── sqlalchemy/     # SQLAlchemy/SQL database implementation
"""
