"""
Domain-split Pydantic schemas with a single import surface.
"""

# Import order: define base/simple types first to satisfy forward refs
from .refs import Ref
from .users import UserBase, UserCreate, UserUpdate, User
from .projects import ProjectBase, ProjectCreate, ProjectUpdate, Project
from .tasks import (
    TaskBase,
    TaskCreate,
    TaskUpdate,
    TaskStatusUpdate,
    Task,
    TaskStats,
)
from .entities import (
    EntityBase,
    EntityCreate,
    EntityUpdate,
    EntityStatusUpdate,
    Entity,
    EntityStats,
)

__all__ = [
    "Ref",
    "UserBase",
    "UserCreate",
    "UserUpdate",
    "User",
    "ProjectBase",
    "ProjectCreate",
    "ProjectUpdate",
    "Project",
    "TaskBase",
    "TaskCreate",
    "TaskUpdate",
    "TaskStatusUpdate",
    "Task",
    "TaskStats",
    "EntityBase",
    "EntityCreate",
    "EntityUpdate",
    "EntityStatusUpdate",
    "Entity",
    "EntityStats",
]
