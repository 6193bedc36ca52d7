"""
Closed value sets for enumerated columns.

Stored as plain strings; the CHECK constraints on each table are generated
from these classes so the database and the API agree on the allowed values.
"""
from enum import Enum


class TaskStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class Priority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class EntityStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"


def check_in(column: str, enum_cls) -> str:
    """Render a SQL ``IN`` predicate listing every member of ``enum_cls``."""
    values = ",".join(f"'{member.value}'" for member in enum_cls)
    return f"{column} in ({values})"
