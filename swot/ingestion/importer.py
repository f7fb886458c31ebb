"""Parse an uploaded JSON file and validate it into a new AnalysisSet."""

from __future__ import annotations

import json
import logging

from opentelemetry import trace

from swot.errors import MalformedImportError
from swot.ingestion.normalizer import normalize
from swot.items.models import AnalysisSet
from swot.telemetry.metrics import imports_total

logger = logging.getLogger("swot.ingestion")
tracer = trace.get_tracer(__name__)


def parse_import(contents: str | bytes) -> AnalysisSet:
    """Parse file contents into a validated AnalysisSet.

    Raises MalformedImportError when the contents are not UTF-8 JSON, nest
    deeper than the parser can follow, or hold integers past the interpreter's
    digit limit. Any other JSON succeeds; shape problems are absorbed by
    ``normalize``.
    """
    with tracer.start_as_current_span("swot-import") as span:
        try:
            if isinstance(contents, bytes):
                contents = contents.decode("utf-8-sig")
            raw = json.loads(contents)
        # ValueError covers UnicodeDecodeError, JSONDecodeError and int digit limits
        except (ValueError, RecursionError) as exc:
            imports_total.labels(outcome="malformed").inc()
            logger.warning("Rejected import: %s", exc)
            raise MalformedImportError("Error importing file. Check that it is valid JSON.") from exc

        data = normalize(raw)
        span.set_attribute("swot.items", data.total_items())
        imports_total.labels(outcome="success").inc()
        logger.info("Imported SWOT data: %s", data.counts())
        return data
