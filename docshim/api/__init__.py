"""API module for docshim.

Collection-scoped CRUD over a document database, value coercion helpers,
and a small HTTP server bootstrap.
"""

__all__ = []
