from pydantic import BaseModel


class Ref(BaseModel):
    """Reference to another row, given in request bodies as ``{"id": N}``."""
    id: int | None = None
