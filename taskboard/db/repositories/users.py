"""
User store.
"""
from __future__ import annotations

from typing import Optional

from taskboard.db import models
from taskboard.db.matchers import eq
from .base import Store


class UserStore(Store[models.User]):
    model = models.User
    kind = "User"

    def find_by_email(self, email: str) -> Optional[models.User]:
        rows = self.find_by(eq("email", email, case_sensitive=False), limit=1)
        return rows[0] if rows else None
