"""Database Package: SQLAlchemy declarative Base."""
