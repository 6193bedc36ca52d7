"""
Users API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from taskboard.api.deps import get_user_manager
from taskboard.db import schemas
from taskboard.services import UserManager

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[schemas.User])
def list_users_endpoint(users: UserManager = Depends(get_user_manager)):
    return users.get_all()


@router.get("/{user_id}", response_model=schemas.User)
def get_user_endpoint(user_id: int, users: UserManager = Depends(get_user_manager)):
    return users.get_by_id(user_id)


@router.post("", response_model=schemas.User, status_code=status.HTTP_201_CREATED)
def create_user_endpoint(payload: schemas.UserCreate, users: UserManager = Depends(get_user_manager)):
    return users.create(payload)


@router.put("/{user_id}", response_model=schemas.User)
def update_user_endpoint(
    user_id: int,
    payload: schemas.UserUpdate,
    users: UserManager = Depends(get_user_manager),
):
    return users.update(user_id, payload)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user_endpoint(user_id: int, users: UserManager = Depends(get_user_manager)):
    users.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
