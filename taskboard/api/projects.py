"""
Projects API endpoints.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from taskboard.api.deps import get_project_manager
from taskboard.db import schemas
from taskboard.services import ProjectManager

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=List[schemas.Project])
def list_projects_endpoint(
    q: Optional[str] = None,
    projects: ProjectManager = Depends(get_project_manager),
):
    if q:
        return projects.search(q)
    return projects.get_all()


@router.get("/user/{user_id}", response_model=List[schemas.Project])
def list_projects_by_user_endpoint(user_id: int, projects: ProjectManager = Depends(get_project_manager)):
    return projects.get_by_user(user_id)


@router.get("/{project_id}", response_model=schemas.Project)
def get_project_endpoint(project_id: int, projects: ProjectManager = Depends(get_project_manager)):
    return projects.get_by_id(project_id)


@router.post("", response_model=schemas.Project, status_code=status.HTTP_201_CREATED)
def create_project_endpoint(
    payload: schemas.ProjectCreate,
    projects: ProjectManager = Depends(get_project_manager),
):
    return projects.create(payload)


@router.put("/{project_id}", response_model=schemas.Project)
def update_project_endpoint(
    project_id: int,
    payload: schemas.ProjectUpdate,
    projects: ProjectManager = Depends(get_project_manager),
):
    return projects.update(project_id, payload)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project_endpoint(project_id: int, projects: ProjectManager = Depends(get_project_manager)):
    # Tasks keep their project_id; nothing cascades
    projects.delete(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
