"""
User manager: validation and uniqueness of e-mail addresses.
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from taskboard.db import models, schemas
from taskboard.db.repositories import UserStore
from taskboard.errors import NotFound, ValidationFailure
from .base import Manager

logger = logging.getLogger(__name__)


class UserManager(Manager[models.User]):
    def __init__(self, store: UserStore):
        super().__init__(store)

    def get_by_email(self, email: str) -> models.User:
        user = self.store.find_by_email(email)
        if user is None:
            raise NotFound(self.kind, email)
        return user

    def _validated(self, payload: schemas.UserBase, *, current_id: Optional[int] = None):
        name = self._require_text(payload.name, "name")
        email = self._require_text(payload.email, "email")
        if "@" not in email:
            raise ValidationFailure(f"Invalid email '{email}'", field="email")
        existing = self.store.find_by_email(email)
        if existing is not None and existing.id != current_id:
            raise ValidationFailure(f"Email '{email}' is already in use", field="email")
        return name, email

    def _save(self, user: models.User, email: str) -> models.User:
        # A concurrent writer can claim the address between the check and the insert
        try:
            return self.store.save(user)
        except IntegrityError:
            raise ValidationFailure(f"Email '{email}' is already in use", field="email") from None

    def create(self, payload: schemas.UserCreate) -> models.User:
        name, email = self._validated(payload)
        user = self._save(models.User(name=name, email=email), email)
        logger.info("Created user %s", user.id)
        return user

    def update(self, user_id: int, payload: schemas.UserUpdate) -> models.User:
        user = self._get_for_write(user_id)
        name, email = self._validated(payload, current_id=user.id)
        user.name = name
        user.email = email
        user = self._save(user, email)
        logger.info("Updated user %s", user.id)
        return user
