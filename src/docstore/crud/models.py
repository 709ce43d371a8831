"""Document, author and search request models"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def as_utc(value: datetime | None) -> datetime | None:
    """Naive datetimes are read as UTC; aware ones are converted to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Author(BaseModel):
    id: str
    name: str


class Document(BaseModel):
    """A stored record; an id of None or "" marks the document as new."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[datetime] = None

    @field_validator("created")
    @classmethod
    def created_to_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)

    def is_new(self) -> bool:
        return not self.id


class SearchRequest(BaseModel):
    """Filter over stored documents.

    None on a field means the dimension is unconstrained. Values inside one
    field are OR-ed, fields are AND-ed. An empty list is still a constraint
    and matches nothing. Bounds are compared in UTC.
    """
    title_prefixes:    Optional[list[str]] = Field(default=None, description="Title must start with one of these")
    contains_contents: Optional[list[str]] = Field(default=None, description="Content must contain one of these")
    author_ids:        Optional[list[str]] = Field(default=None, description="Author id must be one of these")
    created_from:      Optional[datetime] = Field(default=None, description="Inclusive lower bound on created")
    created_to:        Optional[datetime] = Field(default=None, description="Inclusive upper bound on created")

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_to_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)
