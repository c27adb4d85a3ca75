"""Database package — async SQLAlchemy engine/session builders, Base."""
from audit_dashboard.db.base import Base, build_engine, build_session_factory, create_schema

__all__ = ["Base", "build_engine", "build_session_factory", "create_schema"]
