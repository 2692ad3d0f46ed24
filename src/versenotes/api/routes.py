"""API route definitions."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

# Keep typing imports in namespace for Pydantic annotation evaluation
__typing_imports__ = (List, Optional)

from versenotes import __version__
from versenotes.api.models import (
    BookModel,
    HealthModel,
    LookupResponseModel,
    SuggestionResponseModel,
    VerseModel,
)
from versenotes.config import Settings
from versenotes.errors import InvalidReferenceError, NotInitializedError
from versenotes.reference.formatting import render_passage
from versenotes.service import BibleService
from versenotes.store.models import BibleResult

router = APIRouter()


@lru_cache(maxsize=1)
def get_service() -> BibleService:
    """Shared service instance, initialized on first use."""
    service = BibleService(Settings())
    service.initialize()
    return service


ServiceDep = Annotated[BibleService, Depends(get_service)]


def _lookup_model(reference: str, result: BibleResult) -> LookupResponseModel:
    return LookupResponseModel(
        reference=reference,
        formatted_reference=result.formatted_reference,
        found=result.found,
        verses=[VerseModel(**verse.to_dict()) for verse in result.verses],
        text=render_passage(result),
    )


@router.get("/health", response_model=HealthModel)
async def health_check(service: ServiceDep):
    """Health check endpoint."""
    status = service.status()
    return HealthModel(
        status="ok" if status.enabled else "degraded",
        version=__version__,
        verse_lookup_enabled=status.enabled,
        backend=status.backend,
        verse_count=status.verse_count,
        error=status.error,
    )


@router.get("/lookup", response_model=LookupResponseModel)
async def lookup_reference(
    service: ServiceDep,
    ref: Annotated[str, Query(description="Scripture reference (e.g., 'Jn 3:16-18')")],
):
    """
    Look up the verses for a reference.

    An unknown chapter or verse returns ``found: false`` with no verses.
    """
    try:
        result = service.lookup(ref)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotInitializedError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return _lookup_model(ref, result)


@router.get("/suggest", response_model=SuggestionResponseModel)
async def suggest_reference(
    service: ServiceDep,
    text: Annotated[str, Query(description="Editor text up to (at least) the cursor")],
    cursor: Annotated[
        Optional[int], Query(ge=0, description="Cursor offset; defaults to end of text")
    ] = None,
):
    """Suggest verses for a reference typed just before the cursor."""
    try:
        suggestion = service.suggest(text, cursor)
    except NotInitializedError as e:
        raise HTTPException(status_code=503, detail=str(e))

    if suggestion is None:
        return SuggestionResponseModel()

    return SuggestionResponseModel(
        suggestion=_lookup_model(suggestion.reference, suggestion.result),
        start=suggestion.start,
        end=suggestion.end,
    )


@router.get("/books", response_model=List[BookModel])
async def list_books(service: ServiceDep):
    """List canonical books in canonical order with their abbreviations."""
    return [
        BookModel(name=entry.name, abbreviations=list(entry.abbreviations))
        for entry in service.books.table
    ]
