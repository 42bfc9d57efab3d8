"""Database persistence infrastructure.

This module provides database-related functionality including:
- Base model and mixins for all database entities
- Database connection and session management
- Generic repository and unit of work
"""

from src.infrastructure.persistence.base import BaseEntity, BaseModel
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.repository import Repository
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "BaseEntity",
    "BaseModel",
    "Database",
    "Repository",
    "SqlAlchemyUnitOfWork",
]
