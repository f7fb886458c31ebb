"""Export and import endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile
from fastapi.responses import Response

from swot.dependencies import get_session
from swot.errors import ExportError, MalformedImportError
from swot.reporting.json_export import JSON_EXPORT_FILENAME, to_json
from swot.reporting.pdf import PDF_EXPORT_FILENAME, render_pdf
from swot.session import Session
from swot.telemetry.metrics import exports_total

logger = logging.getLogger("swot.routers")
router = APIRouter(tags=["transfer"])


def _attachment(content: bytes | str, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/export/json")
async def export_json(session: Session = Depends(get_session)):
    try:
        content = to_json(session.data)
    except ExportError as exc:
        exports_total.labels(format="json", outcome="error").inc()
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    exports_total.labels(format="json", outcome="success").inc()
    return _attachment(content.encode("utf-8"), "application/json", JSON_EXPORT_FILENAME)


@router.get("/export/pdf")
async def export_pdf(session: Session = Depends(get_session)):
    """Full report; the analysis section is included only while it is displayed."""
    findings = session.findings if session.analysis_visible else None
    try:
        content = render_pdf(session.data, findings)
    except ExportError as exc:
        exports_total.labels(format="pdf", outcome="error").inc()
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    exports_total.labels(format="pdf", outcome="success").inc()
    return _attachment(content, "application/pdf", PDF_EXPORT_FILENAME)


@router.post("/import")
async def import_file(file: UploadFile, session: Session = Depends(get_session)):
    """Replace the whole data set with an uploaded JSON export."""
    contents = await file.read()

    # No awaits past this point: parse, validate and replace run as one step.
    try:
        data = session.import_json(contents)
    except MalformedImportError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    logger.info("Import applied from file=%s", file.filename)
    return {"imported": data.counts(), "total": data.total_items()}
