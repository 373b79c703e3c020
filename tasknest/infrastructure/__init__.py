"""Infrastructure layer: persistence (SQLAlchemy), security (JWT)."""
