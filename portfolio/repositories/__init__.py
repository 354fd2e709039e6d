"""
Persistence adapters.

Two interchangeable stores expose the same operations: ``JSONStorage`` keeps
one JSON file per collection in DATA_DIR, ``SQLRepository`` maps the same
collections to SQLAlchemy tables when DATABASE_URL is configured. Services
depend on whichever one ``build_store`` returns and never touch files or
sessions themselves.
"""

from .factory import build_store

__all__ = ["build_store"]
