"""Data models for SWOT items and the four-category analysis set."""

from __future__ import annotations

import random
import string
import time
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

_ID_ALPHABET = string.ascii_lowercase + string.digits


def now_ms() -> int:
    return int(time.time() * 1000)


def generate_item_id() -> str:
    """Timestamp plus a random base36 suffix, e.g. ``1760870400000-k3v9x0a``."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=7))
    return f"{now_ms()}-{suffix}"


class Priority(str, Enum):
    """Item priority. Ordering follows severity and only applies between
    Priority members; comparing against a plain string raises TypeError
    instead of falling back to alphabetical str ordering. Equality still
    matches the wire value.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def severity(self) -> int:
        return _SEVERITY_ORDER.index(self)

    def _severity_of(self, other, op: str) -> int:
        if not isinstance(other, Priority):
            raise TypeError(
                f"'{op}' not supported between Priority and {type(other).__name__}"
            )
        return other.severity

    def __lt__(self, other):
        return self.severity < self._severity_of(other, "<")

    def __le__(self, other):
        return self.severity <= self._severity_of(other, "<=")

    def __gt__(self, other):
        return self.severity > self._severity_of(other, ">")

    def __ge__(self, other):
        return self.severity >= self._severity_of(other, ">=")


_SEVERITY_ORDER = (Priority.LOW, Priority.MEDIUM, Priority.HIGH, Priority.CRITICAL)


class Category(str, Enum):
    STRENGTHS = "strengths"
    WEAKNESSES = "weaknesses"
    OPPORTUNITIES = "opportunities"
    THREATS = "threats"


# Iteration order of Category is the display and traversal order.
CATEGORY_TITLES = MappingProxyType({
    Category.STRENGTHS: "Strengths",
    Category.WEAKNESSES: "Weaknesses",
    Category.OPPORTUNITIES: "Opportunities",
    Category.THREATS: "Threats",
})

PRIORITY_LABELS = MappingProxyType({
    Priority.LOW: "Low",
    Priority.MEDIUM: "Medium",
    Priority.HIGH: "High",
    Priority.CRITICAL: "Critical",
})

# RGB in 0..1, as consumed by the PDF writer.
PRIORITY_COLORS = MappingProxyType({
    Priority.LOW: (0.13, 0.77, 0.37),
    Priority.MEDIUM: (0.92, 0.70, 0.03),
    Priority.HIGH: (0.98, 0.45, 0.09),
    Priority.CRITICAL: (0.94, 0.27, 0.27),
})

PRIORITY_URGENCY = MappingProxyType({
    Priority.CRITICAL: 5,
    Priority.HIGH: 4,
    Priority.MEDIUM: 3,
    Priority.LOW: 2,
})


class Item(BaseModel):
    """A single recorded observation inside one category."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=generate_item_id)
    text: str
    priority: Priority = Priority.MEDIUM
    responsible: str = ""
    created_at: int = Field(alias="createdAt", default_factory=now_ms)


class AnalysisSet(BaseModel):
    """The full SWOT state: every category is always present."""

    strengths: list[Item] = []
    weaknesses: list[Item] = []
    opportunities: list[Item] = []
    threats: list[Item] = []

    def items(self, category: Category) -> list[Item]:
        return getattr(self, Category(category).value)

    def counts(self) -> dict[str, int]:
        return {c.value: len(self.items(c)) for c in Category}

    def total_items(self) -> int:
        return sum(len(self.items(c)) for c in Category)

    def is_empty(self) -> bool:
        return self.total_items() == 0
