"""Prometheus metrics endpoint, with the session's item gauges refreshed per scrape."""

from fastapi import APIRouter, Depends
from starlette.responses import Response

from swot.dependencies import get_session
from swot.session import Session
from swot.telemetry.metrics import analysis_findings, get_metrics, items_recorded

router = APIRouter()


@router.get("/metrics", include_in_schema=False)
async def metrics(session: Session = Depends(get_session)):
    for category, count in session.data.counts().items():
        items_recorded.labels(category=category).set(count)
    analysis_findings.set(len(session.findings) if session.analysis_visible else 0)

    body, content_type = get_metrics()
    return Response(content=body, media_type=content_type)
