from typing import Callable

from fastapi import APIRouter, Depends, HTTPException

from generationgap.deps import get_family_store, get_llm
from generationgap.families import FamilyStore
from generationgap.insights import get_ai_insight
from generationgap.models import (
    FamilyCreate,
    FamilyResponse,
    JournalEntriesResponse,
    JournalEntryCreate,
    JournalEntryResponse,
)
from generationgap.state import NotFoundError

router = APIRouter(prefix="/families", tags=["families"])

_FAMILY_NOT_FOUND = "Family not found"


@router.post("", response_model=FamilyResponse, status_code=201)
def create_family(req: FamilyCreate, families: FamilyStore = Depends(get_family_store)) -> FamilyResponse:
    family = families.create_family(req.family_name, req.parent_name, req.teen_name)
    return FamilyResponse(family=family, message="Family created successfully")


@router.get("/{family_id}", response_model=FamilyResponse, response_model_exclude_none=True)
def get_family(family_id: str, families: FamilyStore = Depends(get_family_store)) -> FamilyResponse:
    try:
        family = families.get_family(family_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=_FAMILY_NOT_FOUND)
    return FamilyResponse(family=family)


@router.post("/{family_id}/journal", response_model=JournalEntryResponse, status_code=201)
def add_journal_entry(
    family_id: str,
    req: JournalEntryCreate,
    families: FamilyStore = Depends(get_family_store),
    complete: Callable[..., str] = Depends(get_llm),
) -> JournalEntryResponse:
    try:
        families.get_family(family_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=_FAMILY_NOT_FOUND)

    insight = get_ai_insight(complete, req.content, req.mood, req.entry_type)

    try:
        entry = families.add_entry(
            family_id,
            author=req.author,
            content=req.content,
            mood=req.mood,
            entry_type=req.entry_type,
            ai_insight=insight,
        )
    except NotFoundError:
        raise HTTPException(status_code=404, detail=_FAMILY_NOT_FOUND)
    return JournalEntryResponse(entry=entry, message="Journal entry added successfully")


@router.get("/{family_id}/journal", response_model=JournalEntriesResponse)
def list_journal_entries(family_id: str, families: FamilyStore = Depends(get_family_store)) -> JournalEntriesResponse:
    try:
        entries = families.list_entries(family_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=_FAMILY_NOT_FOUND)
    return JournalEntriesResponse(entries=entries)
