"""
Project manager: resolves the creating user on create.
"""
import logging
from typing import List

from taskboard.db import models, schemas
from taskboard.db.repositories import ProjectStore
from .base import Manager
from .users import UserManager

logger = logging.getLogger(__name__)


class ProjectManager(Manager[models.Project]):
    def __init__(self, store: ProjectStore, users: UserManager):
        super().__init__(store)
        self.users = users

    def get_by_user(self, user_id: int) -> List[models.Project]:
        return self.store.find_by_created_by(user_id)

    def search(self, keyword: str) -> List[models.Project]:
        return self.store.search(keyword)

    def create(self, payload: schemas.ProjectCreate) -> models.Project:
        name = self._require_text(payload.name, "name")
        creator = self._resolve(self.users, payload.created_by)
        project = models.Project(
            name=name,
            description=payload.description,
            created_by_id=creator.id if creator is not None else None,
        )
        project = self.store.save(project)
        logger.info("Created project %s", project.id)
        return project

    def update(self, project_id: int, payload: schemas.ProjectUpdate) -> models.Project:
        # The creator is fixed at creation time; only name and description change
        project = self._get_for_write(project_id)
        project.name = self._require_text(payload.name, "name")
        project.description = payload.description
        project = self.store.save(project)
        logger.info("Updated project %s", project.id)
        return project
