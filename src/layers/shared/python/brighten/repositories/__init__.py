"""Repository classes for DynamoDB data access."""

from brighten.repositories.base import BaseRepository
from brighten.repositories.content import ContentRepository
from brighten.repositories.visitor import VisitorRepository

__all__ = [
    "BaseRepository",
    "ContentRepository",
    "VisitorRepository",
]
