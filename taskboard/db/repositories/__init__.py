"""
Per-kind stores over a SQLAlchemy session.

`base.Store` implements the shared lookup/save/delete contract; each module
adds the derived finders its manager needs.
"""
from .base import Store
from .users import UserStore
from .projects import ProjectStore
from .tasks import TaskStore
from .entities import EntityStore

__all__ = ["Store", "UserStore", "ProjectStore", "TaskStore", "EntityStore"]
