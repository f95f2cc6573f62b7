"""SQLAlchemy models — import all models here so metadata.create_all sees them."""

from exclude_categories.models.base import Base
from exclude_categories.models.option import Option

__all__ = [
    "Base",
    "Option",
]
