"""SQLAlchemy ORM base for the portal's own tables."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base. Only login sessions live locally; all business data is upstream."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
