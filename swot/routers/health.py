"""Health endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from swot.config import settings
from swot.dependencies import get_session
from swot.session import Session

router = APIRouter()

_start_time = datetime.now(timezone.utc)


@router.get("/health")
async def health(session: Session = Depends(get_session)):
    uptime = (datetime.now(timezone.utc) - _start_time).total_seconds()
    return {
        "status": "healthy",
        "uptime_seconds": round(uptime, 2),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.service_version,
        "items": session.data.total_items(),
    }
