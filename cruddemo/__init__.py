"""Student CRUD demo on top of SQLAlchemy."""

__version__ = "1.0.0"
