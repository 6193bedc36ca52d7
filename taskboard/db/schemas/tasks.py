from datetime import date, datetime
from pydantic import BaseModel, ConfigDict

from taskboard.db.models.enums import TaskStatus, Priority
from .refs import Ref
from .users import User
from .projects import Project


class TaskBase(BaseModel):
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    priority: Priority = Priority.MEDIUM
    due_date: date | None = None


class TaskCreate(TaskBase):
    assigned_to: Ref | None = None
    project: Ref | None = None


class TaskUpdate(TaskCreate):
    """Full replacement payload; omitted references are cleared."""


class TaskStatusUpdate(BaseModel):
    status: TaskStatus


class Task(TaskBase):
    id: int
    assigned_to_id: int | None = None
    project_id: int | None = None
    assigned_to: User | None = None
    project: Project | None = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class TaskStats(BaseModel):
    total: int
    todo: int
    in_progress: int
    done: int
