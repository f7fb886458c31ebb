"""Data models for derived findings."""

from __future__ import annotations

from pydantic import BaseModel, Field

from swot.items.models import Item


class Finding(BaseModel):
    """A ranked recommendation derived from one item. Never persisted."""

    category: str
    item: Item
    impact: str
    recommendation: str
    urgency: int = Field(ge=2, le=5)
