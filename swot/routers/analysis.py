"""Strategic analysis endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from swot.dependencies import get_session
from swot.session import Session

router = APIRouter(prefix="/analysis", tags=["analysis"])


def _view(session: Session) -> dict:
    return {
        "visible": session.analysis_visible,
        "findings": [f.model_dump(mode="json", by_alias=True) for f in session.findings],
    }


@router.get("")
async def get_analysis(session: Session = Depends(get_session)):
    return _view(session)


@router.post("")
async def generate_analysis(session: Session = Depends(get_session)):
    """Recompute the prioritized findings from the current data set."""
    session.generate_analysis()
    return _view(session)


@router.delete("")
async def hide_analysis(session: Session = Depends(get_session)):
    session.hide_analysis()
    return _view(session)
