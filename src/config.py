"""Configuration for the vocabulary service."""

import os
from pathlib import Path


class Config:
    """Application configuration."""

    # Storage
    BASE_DIR = Path(__file__).resolve().parent.parent  # repo root
    DEFAULT_DB_PATH = BASE_DIR / "data" / "vocabulary.sqlite"
    DB_PATH = os.environ.get("VOCAB_DB_PATH", str(DEFAULT_DB_PATH))

    # Remote services
    DICTIONARY_API_URL = os.environ.get(
        "VOCAB_DICTIONARY_API_URL", "https://api.dictionaryapi.dev/api/v2/entries/en"
    )
    TRANSLATION_API_URL = os.environ.get(
        "VOCAB_TRANSLATION_API_URL", "https://api.mymemory.translated.net/get"
    )
    TRANSLATION_LANGPAIR = os.environ.get("VOCAB_TRANSLATION_LANGPAIR", "en|zh")
    HTTP_TIMEOUT = float(os.environ.get("VOCAB_HTTP_TIMEOUT", 10))

    # Batch import pacing (seconds between lookups)
    IMPORT_DELAY = float(os.environ.get("VOCAB_IMPORT_DELAY", 0.2))
    IMPORT_FAST_DELAY = float(os.environ.get("VOCAB_IMPORT_FAST_DELAY", 0.05))
    IMPORT_PROGRESS_EVERY = 5

    # Logging
    LOG_LEVEL = os.environ.get("VOCAB_LOG_LEVEL", "INFO").upper()
    LOG_FILE = os.environ.get("VOCAB_LOG_FILE") or None
    DEBUG = os.environ.get("VOCAB_DEBUG", "False").lower() == "true"

    # Review
    MIN_STARS = 0
    MAX_STARS = 5

    # Shown when the translation service has nothing
    NO_TRANSLATION = "暂无翻译"

    @classmethod
    def db_url(cls) -> str:
        return f"sqlite:///{cls.DB_PATH}"
