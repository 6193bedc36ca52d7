"""
Task manager.

Resolves the assignee and project references through their managers before
anything is written, so a dangling reference in a payload leaves the store
untouched. Also owns the list-filter precedence used by ``GET /tasks``.
"""
import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from taskboard.db import models, schemas
from taskboard.db.models.enums import Priority, TaskStatus
from taskboard.db.repositories import TaskStore
from taskboard.errors import ValidationFailure
from .base import Manager
from .projects import ProjectManager
from .users import UserManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskFilters:
    status: Optional[TaskStatus] = None
    priority: Optional[Priority] = None
    assigned_to: Optional[int] = None
    project_id: Optional[int] = None
    keyword: Optional[str] = None
    due_from: Optional[date] = None
    due_to: Optional[date] = None


class TaskManager(Manager[models.Task]):
    def __init__(self, store: TaskStore, users: UserManager, projects: ProjectManager):
        super().__init__(store)
        self.users = users
        self.projects = projects

    # Filters

    def get_by_status(self, status) -> List[models.Task]:
        return self.store.find_by_status(self._coerce_enum(TaskStatus, status, "status"))

    def get_by_priority(self, priority) -> List[models.Task]:
        return self.store.find_by_priority(self._coerce_enum(Priority, priority, "priority"))

    def get_by_status_and_priority(self, status, priority) -> List[models.Task]:
        return self.store.find_by_status_and_priority(
            self._coerce_enum(TaskStatus, status, "status"),
            self._coerce_enum(Priority, priority, "priority"),
        )

    def get_by_user(self, user_id: int) -> List[models.Task]:
        return self.store.find_by_assignee(user_id)

    def get_by_project(self, project_id: int) -> List[models.Task]:
        return self.store.find_by_project(project_id)

    def search(self, keyword: str) -> List[models.Task]:
        return self.store.search(keyword)

    def get_due_between(self, start: Optional[date], end: Optional[date]) -> List[models.Task]:
        if start is not None and end is not None and start > end:
            raise ValidationFailure("due date range start must not be after its end", field="due_date")
        return self.store.find_due_between(start, end)

    def list(self, filters: TaskFilters) -> List[models.Task]:
        """Apply the most specific filter given; with none, return every task."""
        if filters.status is not None and filters.priority is not None:
            return self.get_by_status_and_priority(filters.status, filters.priority)
        if filters.status is not None:
            return self.get_by_status(filters.status)
        if filters.priority is not None:
            return self.get_by_priority(filters.priority)
        if filters.assigned_to is not None:
            return self.get_by_user(filters.assigned_to)
        if filters.project_id is not None:
            return self.get_by_project(filters.project_id)
        if filters.keyword:
            return self.search(filters.keyword)
        if filters.due_from is not None or filters.due_to is not None:
            return self.get_due_between(filters.due_from, filters.due_to)
        return self.get_all()

    def stats(self) -> schemas.TaskStats:
        counts = self.store.count_by_status()
        return schemas.TaskStats(
            total=sum(counts.values()),
            todo=counts.get(TaskStatus.TODO.value, 0),
            in_progress=counts.get(TaskStatus.IN_PROGRESS.value, 0),
            done=counts.get(TaskStatus.DONE.value, 0),
        )

    # Writes

    def _assemble(self, payload: schemas.TaskCreate) -> dict:
        """Validate ``payload`` and resolve its references into column values."""
        assignee = self._resolve(self.users, payload.assigned_to)
        project = self._resolve(self.projects, payload.project)
        return {
            "title": self._require_text(payload.title, "title"),
            "description": payload.description,
            "status": self._coerce_enum(TaskStatus, payload.status, "status").value,
            "priority": self._coerce_enum(Priority, payload.priority, "priority").value,
            "due_date": payload.due_date,
            "assigned_to_id": assignee.id if assignee is not None else None,
            "project_id": project.id if project is not None else None,
        }

    def create(self, payload: schemas.TaskCreate) -> models.Task:
        task = self.store.save(models.Task(**self._assemble(payload)))
        logger.info("Created task %s", task.id)
        return task

    def update(self, task_id: int, payload: schemas.TaskUpdate) -> models.Task:
        task = self._get_for_write(task_id)
        values = self._assemble(payload)
        for key, value in values.items():
            setattr(task, key, value)
        task = self.store.save(task)
        logger.info("Updated task %s", task.id)
        return task

    def update_status(self, task_id: int, status) -> models.Task:
        task = self._get_for_write(task_id)
        task.status = self._coerce_enum(TaskStatus, status, "status").value
        task = self.store.save(task)
        logger.info("Task %s moved to %s", task.id, task.status)
        return task
