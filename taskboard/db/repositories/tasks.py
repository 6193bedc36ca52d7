"""
Task store with the derived finders used by the task manager.
"""
from __future__ import annotations

from datetime import date
from typing import List, Optional

from taskboard.db import models
from taskboard.db.models.enums import Priority, TaskStatus
from taskboard.db.matchers import between, contains, eq
from .base import Store


class TaskStore(Store[models.Task]):
    model = models.Task
    kind = "Task"

    def find_by_status(self, status: TaskStatus) -> List[models.Task]:
        return self.find_by(eq("status", status))

    def find_by_priority(self, priority: Priority) -> List[models.Task]:
        return self.find_by(eq("priority", priority))

    def find_by_status_and_priority(self, status: TaskStatus, priority: Priority) -> List[models.Task]:
        return self.find_by(eq("status", status) & eq("priority", priority))

    def find_by_assignee(self, user_id: int) -> List[models.Task]:
        return self.find_by(eq("assigned_to_id", user_id))

    def find_by_project(self, project_id: int) -> List[models.Task]:
        return self.find_by(eq("project_id", project_id))

    def search(self, keyword: str) -> List[models.Task]:
        return self.find_by(contains("title", keyword) | contains("description", keyword))

    def find_due_between(self, start: Optional[date], end: Optional[date]) -> List[models.Task]:
        # Rows without a due date never satisfy a bound
        return self.find_by(between("due_date", start, end), order_by=(models.Task.due_date, models.Task.id))

    def count_by_status(self) -> dict:
        return self.count_grouped("status")
