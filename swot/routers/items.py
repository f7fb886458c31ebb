"""SWOT item endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel

from swot.dependencies import get_session
from swot.errors import InvalidItemError
from swot.items.models import CATEGORY_TITLES, AnalysisSet, Category, Priority
from swot.session import Session

router = APIRouter(prefix="/swot", tags=["items"])


class ItemInput(BaseModel):
    text: str
    priority: Priority = Priority.MEDIUM
    responsible: str = ""


def _view(data: AnalysisSet) -> dict:
    return {
        "data": data.model_dump(mode="json", by_alias=True),
        "counts": data.counts(),
        "total": data.total_items(),
        "titles": {c.value: title for c, title in CATEGORY_TITLES.items()},
    }


@router.get("")
async def get_swot(session: Session = Depends(get_session)):
    return _view(session.data)


@router.post("/{category}/items", status_code=201)
async def add_item(category: Category, body: ItemInput, session: Session = Depends(get_session)):
    try:
        item = session.add_item(category, body.text, body.priority, body.responsible)
    except InvalidItemError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return item.model_dump(mode="json", by_alias=True)


@router.put("/{category}/items/{item_id}")
async def edit_item(
    category: Category,
    item_id: str,
    body: ItemInput,
    session: Session = Depends(get_session),
):
    try:
        item = session.edit_item(category, item_id, body.text, body.priority, body.responsible)
    except InvalidItemError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    if item is None:
        raise HTTPException(status_code=404, detail=f"Item not found: {item_id}")
    return item.model_dump(mode="json", by_alias=True)


@router.delete("/{category}/items/{item_id}", status_code=204)
async def remove_item(category: Category, item_id: str, session: Session = Depends(get_session)):
    session.remove_item(category, item_id)
    return Response(status_code=204)


@router.delete("")
async def clear_all(confirm: bool = False, session: Session = Depends(get_session)):
    """Wipe every category. Nothing happens unless ``confirm=true``."""
    if not confirm:
        raise HTTPException(status_code=400, detail="Clearing requires confirm=true")
    session.clear()
    return _view(session.data)
