"""
Entities API endpoints.

The generic template resource: CRUD plus the query shapes a concrete
resource usually needs (by owner, by creation-date range, keyword search,
status statistics, recent rows and bulk creation).
"""
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from taskboard.api.deps import get_entity_manager
from taskboard.db import schemas
from taskboard.db.models.enums import EntityStatus
from taskboard.services import EntityFilters, EntityManager

router = APIRouter(prefix="/entities", tags=["entities"])


@router.get("", response_model=List[schemas.Entity])
def list_entities_endpoint(
    status: Optional[EntityStatus] = None,
    name: Optional[str] = None,
    entities: EntityManager = Depends(get_entity_manager),
):
    return entities.list(EntityFilters(status=status, name=name))


@router.get("/stats", response_model=schemas.EntityStats)
def entity_stats_endpoint(entities: EntityManager = Depends(get_entity_manager)):
    return entities.stats()


@router.get("/recent", response_model=List[schemas.Entity])
def recent_entities_endpoint(
    limit: int = Query(default=10, ge=1, le=100),
    entities: EntityManager = Depends(get_entity_manager),
):
    return entities.get_recent(limit)


@router.get("/user/{user_id}", response_model=List[schemas.Entity])
def list_entities_by_user_endpoint(user_id: int, entities: EntityManager = Depends(get_entity_manager)):
    return entities.get_by_owner(user_id)


@router.get("/date-range", response_model=List[schemas.Entity])
def list_entities_by_date_range_endpoint(
    start_date: datetime,
    end_date: datetime,
    entities: EntityManager = Depends(get_entity_manager),
):
    return entities.get_by_date_range(start_date, end_date)


@router.get("/search", response_model=List[schemas.Entity])
def search_entities_endpoint(query: str, entities: EntityManager = Depends(get_entity_manager)):
    return entities.search(query)


@router.get("/{entity_id}", response_model=schemas.Entity)
def get_entity_endpoint(entity_id: int, entities: EntityManager = Depends(get_entity_manager)):
    return entities.get_by_id(entity_id)


@router.post("", response_model=schemas.Entity, status_code=status.HTTP_201_CREATED)
def create_entity_endpoint(payload: schemas.EntityCreate, entities: EntityManager = Depends(get_entity_manager)):
    return entities.create(payload)


@router.post("/bulk", response_model=List[schemas.Entity], status_code=status.HTTP_201_CREATED)
def bulk_create_entities_endpoint(
    payload: List[schemas.EntityCreate],
    entities: EntityManager = Depends(get_entity_manager),
):
    return entities.save_all(payload)


@router.put("/{entity_id}", response_model=schemas.Entity)
def update_entity_endpoint(
    entity_id: int,
    payload: schemas.EntityUpdate,
    entities: EntityManager = Depends(get_entity_manager),
):
    return entities.update(entity_id, payload)


@router.patch("/{entity_id}/status", response_model=schemas.Entity)
def update_entity_status_endpoint(
    entity_id: int,
    payload: schemas.EntityStatusUpdate,
    entities: EntityManager = Depends(get_entity_manager),
):
    return entities.update_status(entity_id, payload.status)


@router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_entity_endpoint(entity_id: int, entities: EntityManager = Depends(get_entity_manager)):
    entities.delete(entity_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
