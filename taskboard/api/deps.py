"""
API dependency helpers.

Builds the per-request managers. Wiring is explicit: each manager receives
its store and the sibling managers it resolves references through, all
sharing the request's database session.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from taskboard.db.database import get_db
from taskboard.db.repositories import EntityStore, ProjectStore, TaskStore, UserStore
from taskboard.services import EntityManager, ProjectManager, TaskManager, UserManager


def build_user_manager(db: Session) -> UserManager:
    return UserManager(UserStore(db))


def build_project_manager(db: Session) -> ProjectManager:
    return ProjectManager(ProjectStore(db), build_user_manager(db))


def build_task_manager(db: Session) -> TaskManager:
    users = build_user_manager(db)
    return TaskManager(TaskStore(db), users, ProjectManager(ProjectStore(db), users))


def build_entity_manager(db: Session) -> EntityManager:
    return EntityManager(EntityStore(db), build_user_manager(db))


def get_user_manager(db: Session = Depends(get_db)) -> UserManager:
    return build_user_manager(db)


def get_project_manager(db: Session = Depends(get_db)) -> ProjectManager:
    return build_project_manager(db)


def get_task_manager(db: Session = Depends(get_db)) -> TaskManager:
    return build_task_manager(db)


def get_entity_manager(db: Session = Depends(get_db)) -> EntityManager:
    return build_entity_manager(db)
