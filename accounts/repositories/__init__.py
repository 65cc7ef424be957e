"""
Persistence adapters.

Services depend on these repositories rather than on SQLAlchemy sessions.
"""

from .sql_repository import AccountRepository, AuthorityRepository

__all__ = ["AccountRepository", "AuthorityRepository"]
