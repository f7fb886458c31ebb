"""Normalize untrusted payloads (stored snapshots, imported files) into an AnalysisSet."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping

from swot.items.models import (
    AnalysisSet,
    Category,
    Item,
    Priority,
    generate_item_id,
    now_ms,
)

logger = logging.getLogger("swot.ingestion")

_PRIORITY_MAP = {p.value: p for p in Priority}


def _coerce_id(raw) -> str:
    if isinstance(raw, bool):
        return generate_item_id()
    if isinstance(raw, int):
        return str(raw)
    if isinstance(raw, str) and raw:
        return raw
    return generate_item_id()


def _coerce_created_at(raw) -> int:
    if isinstance(raw, bool):
        return now_ms()
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and math.isfinite(raw):
        return int(raw)
    return now_ms()


def _has_text(raw) -> bool:
    return isinstance(raw, Mapping) and isinstance(raw.get("text"), str) and bool(raw["text"].strip())


def normalize_item(raw: Mapping) -> Item:
    """Build an Item from a mapping already known to carry non-empty text."""
    priority = raw.get("priority")
    responsible = raw.get("responsible")
    return Item(
        id=_coerce_id(raw.get("id")),
        text=raw["text"].strip(),
        priority=_PRIORITY_MAP.get(priority, Priority.MEDIUM) if isinstance(priority, str) else Priority.MEDIUM,
        responsible=responsible.strip() if isinstance(responsible, str) else "",
        created_at=_coerce_created_at(raw.get("createdAt")),
    )


def normalize(raw: object) -> AnalysisSet:
    """Coerce any value into a structurally valid AnalysisSet.

    Never raises. Anything that is not a mapping yields the empty set;
    categories that are not lists become empty; elements without usable
    text are dropped and every other field is defaulted when malformed.
    """
    if not isinstance(raw, Mapping):
        return AnalysisSet()

    categories: dict[str, list[Item]] = {}
    for category in Category:
        entries = raw.get(category.value)
        if not isinstance(entries, list):
            categories[category.value] = []
            continue

        kept = [normalize_item(entry) for entry in entries if _has_text(entry)]
        dropped = len(entries) - len(kept)
        if dropped:
            logger.debug("Dropped %d malformed %s entries", dropped, category.value)
        categories[category.value] = kept

    return AnalysisSet(**categories)
