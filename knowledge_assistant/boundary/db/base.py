"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and reusable mixins
for the write-once entities of the knowledge store.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    pass


class StringKeyMixin:
    """
    Mixin providing a caller-supplied string primary key.

    Keys are derived by the domain (file name + timestamp + index for
    chunks, role + timestamp for messages), so no default is generated.
    Inserting an existing key fails with an integrity error.

    Attributes:
        id: String primary key
    """

    id: Mapped[str] = mapped_column(String(512), primary_key=True)


class EpochTimestampMixin:
    """
    Mixin providing an indexed epoch-milliseconds creation timestamp.

    Attributes:
        timestamp: Creation time in epoch milliseconds (immutable)
    """

    timestamp: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
