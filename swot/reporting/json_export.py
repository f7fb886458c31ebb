"""JSON export, in the same shape the importer and the repository accept."""

from __future__ import annotations

import json
import logging

from swot.errors import ExportError
from swot.items.models import AnalysisSet, Category

logger = logging.getLogger("swot.reporting")

JSON_EXPORT_FILENAME = "analise-swot.json"

_ITEM_FIELDS = ("id", "text", "priority", "responsible", "createdAt")


def to_document(data: AnalysisSet) -> dict:
    """Plain dict with categories and item fields in their fixed order."""
    document = {}
    for category in Category:
        entries = []
        for item in data.items(category):
            dumped = item.model_dump(mode="json", by_alias=True)
            entries.append({field: dumped[field] for field in _ITEM_FIELDS})
        document[category.value] = entries
    return document


def to_json(data: AnalysisSet, indent: int | None = 2) -> str:
    """Serialize the full set; pretty-printed unless ``indent`` is None."""
    try:
        return json.dumps(to_document(data), indent=indent, ensure_ascii=False)
    except Exception as exc:
        logger.exception("Failed to serialize SWOT data")
        raise ExportError("Error exporting JSON.") from exc
