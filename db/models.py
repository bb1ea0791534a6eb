"""
Pydantic models for project records.
"""
from typing import Optional
from pydantic import BaseModel


class Project(BaseModel):
    id: str
    name: str
    path: str
    last_opened: str


class ProjectUpdate(BaseModel):
    """Partial change to a stored project; None means leave unchanged."""
    name: Optional[str] = None
    path: Optional[str] = None
    last_opened: Optional[str] = None

    def changes(self) -> dict:
        fields = ("name", "path", "last_opened")
        return {f: getattr(self, f) for f in fields if getattr(self, f) is not None}
