"""Infrastructure layer: persistence (SQLAlchemy + asyncpg)."""
