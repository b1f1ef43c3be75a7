#!/usr/bin/env python3
"""
Shared SQLAlchemy base and mixins for the Chirpy API.

- TimestampMixin: created_at / updated_at, set in Python on insert so rows
  created in the same second still order correctly, with server defaults as
  a fallback for raw inserts.
- BaseModel: UUID String(36) primary key on top of the timestamps, plus
  save() / delete() wired to DBStorage.

Models with a natural primary key (RefreshToken) use TimestampMixin only.
"""

from __future__ import annotations

from datetime import datetime, timezone
import uuid

# Importing 'models' gives access to the global 'storage' instance (DBStorage)
import models

from sqlalchemy import Column, String, DateTime
from sqlalchemy.types import TypeDecorator
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

# Declarative base for all models
Base = declarative_base()


def _uuid_str() -> str:
    """Return a canonical UUIDv4 string (36 chars, with hyphens)."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """SQLite hands back naive datetimes; treat them as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware DateTime that always comes back in UTC.
    SQLite drops the offset on write, so values are normalized to UTC going
    in and tagged as UTC coming out.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return as_utc(value).astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return as_utc(value).astimezone(timezone.utc)


class TimestampMixin:
    created_at = Column(UTCDateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(
        UTCDateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow, nullable=False
    )


class BaseModel(TimestampMixin):
    """
    Base mixin for persistent models keyed by a UUID string.

    Attribute initialization goes through kwargs; an id is generated when the
    caller does not pass one so it is known before the first flush.
    """

    id = Column(String(36), primary_key=True, default=_uuid_str, nullable=False)

    def __init__(self, *args, **kwargs):
        for key, value in kwargs.items():
            if key != "__class__":
                setattr(self, key, value)
        if getattr(self, "id", None) is None:
            self.id = _uuid_str()

    def save(self):
        """Touch updated_at and persist the instance using DBStorage."""
        self.updated_at = utcnow()
        models.storage.new(self)
        models.storage.save()

    def delete(self):
        """
        Hard delete the current instance using DBStorage.
        Not committed here; the caller decides when to commit.
        """
        models.storage.delete(self)

