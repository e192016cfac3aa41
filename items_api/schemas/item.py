"""Pydantic schemas for item payloads."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

ItemStatus = Literal["active", "inactive"]


class ItemCreate(BaseModel):
    """Validated payload to create an item."""

    name: str
    description: str


class ItemUpdate(BaseModel):
    """Validated payload to update mutable item fields."""

    name: str | None = None
    description: str | None = None
    status: ItemStatus | None = None


class Item(BaseModel):
    """Item response payload."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    status: ItemStatus
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")


class ItemDeleted(BaseModel):
    """Payload returned after deleting an item."""

    id: str
