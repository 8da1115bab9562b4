"""Database metadata — the SQLAlchemy declarative Base shared by all models."""
