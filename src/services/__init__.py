"""Vocabulary services module."""

from .morphology import (
    DictionarySense,
    FormLabel,
    InferenceResult,
    PartOfSpeech,
    choose_part_of_speech,
    extract_gloss_forms,
    infer_adjective_forms,
    infer_forms,
    infer_noun_forms,
    infer_verb_forms,
    plural_form,
)
from .dictionary import DictionaryClient, DictionaryEntry, DictionaryError
from .translation import TranslationClient
from .store import DuplicateWordError, SortOrder, StoredWord, UnknownWordIdError, WordStore
from .lookup import ImportSummary, LookupService, WordLookup, WordNotFoundError

__all__ = [
    # Form inference
    "DictionarySense",
    "FormLabel",
    "InferenceResult",
    "PartOfSpeech",
    "choose_part_of_speech",
    "extract_gloss_forms",
    "infer_adjective_forms",
    "infer_forms",
    "infer_noun_forms",
    "infer_verb_forms",
    "plural_form",
    # Remote services
    "DictionaryClient",
    "DictionaryEntry",
    "DictionaryError",
    "TranslationClient",
    # Storage
    "DuplicateWordError",
    "SortOrder",
    "StoredWord",
    "UnknownWordIdError",
    "WordStore",
    # Lookup
    "ImportSummary",
    "LookupService",
    "WordLookup",
    "WordNotFoundError",
]
