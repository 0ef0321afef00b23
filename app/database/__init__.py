"""
Database package following kkb_fastapi pattern.

``Base`` is the declarative base every model in ``app.database.schemas``
registers on; Alembic and the test fixtures read its metadata.
"""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

__all__ = ["Base"]
