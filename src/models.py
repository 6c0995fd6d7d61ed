"""Pydantic models for the vocabulary API requests and responses."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


# ============================================================================
# Request Models
# ============================================================================


class WordRequest(BaseModel):
    """Request body for looking up or adding a single word."""
    word: str = Field(..., min_length=1, max_length=100, description="English word")


class SenseModel(BaseModel):
    """One part-of-speech block of a dictionary entry."""
    part_of_speech: str = Field(..., description="verb, noun, adjective, adverb, ...")
    glosses: list[str] = Field(default_factory=list, description="Definition strings")


class InferRequest(BaseModel):
    """Request body for offline form inference."""
    word: str = Field(..., min_length=1, max_length=100, description="Headword")
    senses: list[SenseModel] | None = Field(None, description="Dictionary senses (optional)")
    part_of_speech: Literal["verb", "noun", "adjective", "adverb"] | None = Field(
        None, description="Force a part of speech instead of choosing one from the senses"
    )


class StarsRequest(BaseModel):
    """Request body for rating a word."""
    stars: int = Field(..., description="New rating; clamped to 0-5")


class ImportRequest(BaseModel):
    """Request body for batch import. Either `words` or `text` (one word per line)."""
    words: list[str] = Field(default_factory=list, description="Words to import")
    text: str | None = Field(None, description="Newline-separated words")
    fast: bool = Field(False, description="Shorter pause between lookups")


# ============================================================================
# Response Models
# ============================================================================


class InferResponse(BaseModel):
    """Response for /infer."""
    word: str
    part_of_speech: str = Field(..., description="Chosen part of speech")
    forms: dict[str, str] = Field(..., description="Form label -> surface form")


class LookupResponse(BaseModel):
    """Response for /lookup."""
    word: str
    meaning: str = Field(..., description="Translation")
    part_of_speech: str
    forms: dict[str, str]


class WordResponse(BaseModel):
    """A stored vocabulary card."""
    id: int
    word: str
    meaning: str
    part_of_speech: str
    forms: dict[str, str]
    stars: int = Field(..., ge=0, le=5)
    import_date: datetime


class WordListResponse(BaseModel):
    """Response for GET /words."""
    words: list[WordResponse]
    count: int = Field(..., description="Number of words returned")
    total: int = Field(..., description="Number of words stored")


class ImportResponse(BaseModel):
    """Response for /words/import."""
    total: int
    imported: int
    skipped: int
    errors: int
    failed_words: list[str] = Field(default_factory=list)
    message: str


class ClearResponse(BaseModel):
    """Response for DELETE /words."""
    deleted: int
