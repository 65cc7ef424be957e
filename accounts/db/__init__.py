"""SQL backend: declarative models, engine and per-call sessions."""

from .session import Base, get_engine, get_session

__all__ = ["Base", "get_engine", "get_session"]
