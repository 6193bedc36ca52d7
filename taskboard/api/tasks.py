"""
Tasks API endpoints.

CRUD, status transitions and filtered listings for tasks. Domain errors
raised by the manager are translated by the handlers in ``main``.
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from taskboard.api.deps import get_task_manager
from taskboard.db import schemas
from taskboard.db.models.enums import Priority, TaskStatus
from taskboard.services import TaskFilters, TaskManager

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=List[schemas.Task])
def list_tasks_endpoint(
    status: Optional[TaskStatus] = None,
    priority: Optional[Priority] = None,
    assigned_to: Optional[int] = None,
    project_id: Optional[int] = None,
    q: Optional[str] = None,
    due_from: Optional[date] = None,
    due_to: Optional[date] = None,
    tasks: TaskManager = Depends(get_task_manager),
):
    return tasks.list(
        TaskFilters(
            status=status,
            priority=priority,
            assigned_to=assigned_to,
            project_id=project_id,
            keyword=q,
            due_from=due_from,
            due_to=due_to,
        )
    )


@router.get("/stats", response_model=schemas.TaskStats)
def task_stats_endpoint(tasks: TaskManager = Depends(get_task_manager)):
    return tasks.stats()


@router.get("/user/{user_id}", response_model=List[schemas.Task])
def list_tasks_by_user_endpoint(user_id: int, tasks: TaskManager = Depends(get_task_manager)):
    return tasks.get_by_user(user_id)


@router.get("/project/{project_id}", response_model=List[schemas.Task])
def list_tasks_by_project_endpoint(project_id: int, tasks: TaskManager = Depends(get_task_manager)):
    return tasks.get_by_project(project_id)


@router.get("/{task_id}", response_model=schemas.Task)
def get_task_endpoint(task_id: int, tasks: TaskManager = Depends(get_task_manager)):
    return tasks.get_by_id(task_id)


@router.post("", response_model=schemas.Task, status_code=status.HTTP_201_CREATED)
def create_task_endpoint(payload: schemas.TaskCreate, tasks: TaskManager = Depends(get_task_manager)):
    return tasks.create(payload)


@router.put("/{task_id}", response_model=schemas.Task)
def update_task_endpoint(
    task_id: int,
    payload: schemas.TaskUpdate,
    tasks: TaskManager = Depends(get_task_manager),
):
    return tasks.update(task_id, payload)


@router.patch("/{task_id}/status", response_model=schemas.Task)
def update_task_status_endpoint(
    task_id: int,
    payload: schemas.TaskStatusUpdate,
    tasks: TaskManager = Depends(get_task_manager),
):
    return tasks.update_status(task_id, payload.status)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task_endpoint(task_id: int, tasks: TaskManager = Depends(get_task_manager)):
    tasks.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
