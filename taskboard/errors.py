"""
Domain errors shared by stores, managers and the HTTP layer.

Only two kinds exist: a missing row (``NotFound``) and a rejected field value
(``ValidationFailure``). The API maps them to 404 and 400 respectively.
"""
from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base class for errors raised by the service layer."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(DomainError):
    def __init__(self, kind: str, ident: Any):
        super().__init__(f"{kind} not found with id: {ident}")
        self.kind = kind
        self.ident = ident


class ValidationFailure(DomainError):
    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
