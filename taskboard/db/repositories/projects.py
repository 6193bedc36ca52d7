"""
Project store.
"""
from __future__ import annotations

from typing import List

from taskboard.db import models
from taskboard.db.matchers import contains, eq
from .base import Store


class ProjectStore(Store[models.Project]):
    model = models.Project
    kind = "Project"

    def find_by_created_by(self, user_id: int) -> List[models.Project]:
        return self.find_by(eq("created_by_id", user_id))

    def search(self, keyword: str) -> List[models.Project]:
        return self.find_by(contains("name", keyword) | contains("description", keyword))
