"""Managers: one per entity kind, wired explicitly by the API layer."""

from .base import Manager
from .users import UserManager
from .projects import ProjectManager
from .tasks import TaskFilters, TaskManager
from .entities import EntityFilters, EntityManager

__all__ = [
    "Manager",
    "UserManager",
    "ProjectManager",
    "TaskFilters",
    "TaskManager",
    "EntityFilters",
    "EntityManager",
]
