"""
Domain-split SQLAlchemy models with a single import surface.

Exposes `Base`, `now_utc`, the enumerations and every ORM class.
"""

from .base import Base, now_utc  # re-export

from .enums import TaskStatus, Priority, EntityStatus
from .users import User
from .projects import Project
from .tasks import Task
from .entities import Entity

__all__ = [
    # base
    "Base",
    "now_utc",
    # enums
    "TaskStatus",
    "Priority",
    "EntityStatus",
    # tables
    "User",
    "Project",
    "Task",
    "Entity",
]
