"""Persisted key-value options."""

from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from exclude_categories.models.base import Base, IntegerPrimaryKeyMixin, TimestampMixin


class Option(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "options"

    option_name: Mapped[str] = mapped_column(String(191), unique=True, nullable=False)
    option_value: Mapped[str] = mapped_column(Text, nullable=False, default="")
