"""Vocabulary flashcard API - English word lookup, form inference and review."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Annotated

import httpx
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware

from config import Config
from logging_config import setup_logging
from models import (
    ClearResponse,
    ImportRequest,
    ImportResponse,
    InferRequest,
    InferResponse,
    LookupResponse,
    StarsRequest,
    WordListResponse,
    WordRequest,
    WordResponse,
)
from services.dictionary import DictionaryClient, DictionaryError
from services.lookup import LookupService, WordNotFoundError, split_import_text
from services.morphology import DictionarySense, infer_forms
from services.store import DuplicateWordError, SortOrder, UnknownWordIdError, WordStore
from services.translation import TranslationClient


# ============================================================================
# Application Lifespan
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the word store and the shared HTTP client."""
    setup_logging(Config.LOG_LEVEL, Config.LOG_FILE, Config.DEBUG)
    Path(Config.DB_PATH).parent.mkdir(parents=True, exist_ok=True)
    app.state.store = WordStore(Config.db_url())
    async with httpx.AsyncClient(timeout=Config.HTTP_TIMEOUT) as http:
        app.state.lookup = LookupService(
            dictionary=DictionaryClient(http),
            translator=TranslationClient(http),
            store=app.state.store,
        )
        yield


# ============================================================================
# FastAPI Application
# ============================================================================


app = FastAPI(
    title="Vocabulary API",
    description="""English vocabulary flashcards.

## Features
- **Lookup**: Dictionary definitions and translation for a word
- **Forms**: Verb tenses, noun plurals and adjective degrees
- **Review**: Stored words with star ratings, sorting and search
- **Import**: Batch import from a word list

## Endpoints
- `/infer` - Form inference only (no network)
- `/lookup` - Look up a word without storing it
- `/words` - Stored words (add, list, search, rate, import, clear)
""",
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Dependencies
# ============================================================================


def get_store(request: Request) -> WordStore:
    return request.app.state.store


def get_lookup_service(request: Request) -> LookupService:
    return request.app.state.lookup


StoreDep = Annotated[WordStore, Depends(get_store)]
LookupDep = Annotated[LookupService, Depends(get_lookup_service)]


# ============================================================================
# Health Endpoints
# ============================================================================


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "service": "vocabulary", "version": "0.1.0"}


@app.get("/health", tags=["Health"])
async def health() -> dict[str, str]:
    """Detailed health check."""
    return {"status": "healthy", "version": "0.1.0"}


# ============================================================================
# Lookup Endpoints
# ============================================================================


@app.post("/infer", response_model=InferResponse, tags=["Lookup"])
async def infer_endpoint(request: InferRequest) -> InferResponse:
    """
    Infer the forms of a word without calling any remote service.

    Pass dictionary senses to use phrases like "past tense of run";
    without them the forms are guessed from spelling.
    """
    word = request.word.strip().lower()
    if not word:
        raise HTTPException(status_code=400, detail="Please enter an English word")
    senses = [
        DictionarySense(part_of_speech=s.part_of_speech, glosses=tuple(s.glosses))
        for s in request.senses or []
    ]
    result = infer_forms(word, senses, request.part_of_speech)
    return InferResponse(word=word, part_of_speech=str(result.part_of_speech), forms=result.forms)


@app.post("/lookup", response_model=LookupResponse, tags=["Lookup"])
async def lookup_endpoint(request: WordRequest, service: LookupDep) -> LookupResponse:
    """
    Look up a word: dictionary senses, inferred forms and translation.

    Nothing is stored.
    """
    try:
        result = await service.lookup(request.word)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except WordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except DictionaryError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e
    return LookupResponse(
        word=result.word,
        meaning=result.meaning,
        part_of_speech=result.part_of_speech,
        forms=result.forms,
    )


# ============================================================================
# Word Store Endpoints
# ============================================================================


@app.post("/words", response_model=WordResponse, status_code=201, tags=["Words"])
async def add_word_endpoint(request: WordRequest, service: LookupDep) -> WordResponse:
    """Look up a word and add it to the store with zero stars."""
    try:
        stored = await service.add_word(request.word)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except WordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except DuplicateWordError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    except DictionaryError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e
    return WordResponse.model_validate(stored, from_attributes=True)


@app.get("/words", response_model=WordListResponse, tags=["Words"])
async def list_words_endpoint(
    store: StoreDep,
    sort: SortOrder = SortOrder.IMPORT,
    q: Annotated[str | None, Query(max_length=100, description="Search word or meaning")] = None,
) -> WordListResponse:
    """
    List stored words.

    With `q`, returns words whose spelling or meaning contains it;
    otherwise every word in the requested `sort` order.
    """
    if q and q.strip():
        words = store.search_words(q)
    else:
        words = store.list_words(sort)
    return WordListResponse(
        words=[WordResponse.model_validate(w, from_attributes=True) for w in words],
        count=len(words),
        total=store.count(),
    )


@app.get("/words/{word_id}", response_model=WordResponse, tags=["Words"])
async def get_word_endpoint(word_id: int, store: StoreDep) -> WordResponse:
    """Fetch one stored word."""
    try:
        stored = store.get_word(word_id)
    except UnknownWordIdError as e:
        raise HTTPException(status_code=404, detail=f"Word {word_id} does not exist") from e
    return WordResponse.model_validate(stored, from_attributes=True)


@app.patch("/words/{word_id}/stars", response_model=WordResponse, tags=["Words"])
async def update_stars_endpoint(word_id: int, request: StarsRequest, store: StoreDep) -> WordResponse:
    """Set a word's star rating (clamped to 0-5)."""
    try:
        stored = store.update_stars(word_id, request.stars)
    except UnknownWordIdError as e:
        raise HTTPException(status_code=404, detail=f"Word {word_id} does not exist") from e
    return WordResponse.model_validate(stored, from_attributes=True)


@app.post("/words/import", response_model=ImportResponse, tags=["Words"])
async def import_words_endpoint(request: ImportRequest, service: LookupDep) -> ImportResponse:
    """
    Import many words at once.

    Already stored words are skipped; words that cannot be looked up
    are counted as failures and the import carries on.
    """
    words = list(request.words)
    if request.text:
        words.extend(split_import_text(request.text))
    if not any(w.strip() for w in words):
        raise HTTPException(status_code=400, detail="No words to import")

    summary = await service.import_words(words, fast=request.fast)
    return ImportResponse(
        total=summary.total,
        imported=summary.imported,
        skipped=summary.skipped,
        errors=summary.errors,
        failed_words=summary.failed_words,
        message=summary.message,
    )


@app.delete("/words", response_model=ClearResponse, tags=["Words"])
async def clear_words_endpoint(store: StoreDep) -> ClearResponse:
    """Delete every stored word."""
    return ClearResponse(deleted=store.clear_all())


# ============================================================================
# CLI Entry Point
# ============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
