"""Pydantic models for API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class VerseModel(BaseModel):
    """A single verse."""

    book: str = Field(..., description="Canonical book name")
    chapter: int
    verse: int
    text: str


class LookupResponseModel(BaseModel):
    """Response for a lookup request."""

    reference: str = Field(..., description="Reference as submitted")
    formatted_reference: str = Field(..., description="Canonical display form")
    found: bool = Field(..., description="False when no verses matched")
    verses: List[VerseModel] = Field(..., description="Verses in ascending order")
    text: str = Field(..., description="Passage flattened for insertion into a note")


class SuggestionResponseModel(BaseModel):
    """Response for a live suggestion request."""

    suggestion: Optional[LookupResponseModel] = Field(
        None, description="Suggested passage, if a reference precedes the cursor"
    )
    start: Optional[int] = Field(None, description="Start offset of the reference")
    end: Optional[int] = Field(None, description="End offset of the reference")


class BookModel(BaseModel):
    """A canonical book and its abbreviations."""

    name: str
    abbreviations: List[str]


class HealthModel(BaseModel):
    """Health check response."""

    status: str
    version: str
    verse_lookup_enabled: bool
    backend: str
    verse_count: int
    error: Optional[str] = None
