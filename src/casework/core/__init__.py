"""Core framework: database, ORM base, repositories, managers, schemas."""

from .database import Database
from .exceptions import CaseworkError, InvalidRequestError, NotFoundError
from .manager import BaseManager, Manager
from .models import Base, Entity
from .repository import BaseRepository, Repository
from .schemas import EntityIn, EntityOut, ErrorResponse

__all__ = [
    "Database",
    "Base",
    "Entity",
    "Repository",
    "BaseRepository",
    "Manager",
    "BaseManager",
    "EntityIn",
    "EntityOut",
    "ErrorResponse",
    "CaseworkError",
    "InvalidRequestError",
    "NotFoundError",
]
