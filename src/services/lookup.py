"""Word lookup: dictionary + translation + form inference, and batch import."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from config import Config
from services.dictionary import DictionaryClient
from services.morphology import infer_forms
from services.store import DuplicateWordError, StoredWord, WordStore
from services.translation import TranslationClient


logger = logging.getLogger(__name__)


class WordNotFoundError(LookupError):
    """The dictionary has no usable entry for the word."""


@dataclass(frozen=True, slots=True)
class WordLookup:
    """Everything needed to show or store a word card."""

    word: str
    meaning: str
    part_of_speech: str
    forms: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class ImportSummary:
    """Counts from a batch import."""

    total: int = 0
    imported: int = 0
    skipped: int = 0
    errors: int = 0
    failed_words: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        parts = ["Import finished."]
        if self.imported:
            parts.append(f"imported: {self.imported}")
        if self.skipped:
            parts.append(f"skipped: {self.skipped}")
        if self.errors:
            parts.append(f"failed: {self.errors}")
        return " ".join(parts)


def normalize_word(word: str) -> str:
    return word.strip().lower()


def split_import_text(text: str) -> list[str]:
    """Split newline-separated input into trimmed, non-empty words."""
    return [line.strip() for line in text.splitlines() if line.strip()]


class LookupService:
    """Ties the remote clients, the inference engine and the store together."""

    def __init__(
        self,
        dictionary: DictionaryClient,
        translator: TranslationClient,
        store: WordStore,
    ) -> None:
        self._dictionary = dictionary
        self._translator = translator
        self._store = store

    async def lookup(self, word: str) -> WordLookup:
        """Look up a word and infer its forms. Nothing is stored.

        Raises:
            ValueError: If the word is empty.
            WordNotFoundError: If the dictionary does not know the word.
            DictionaryError: If the dictionary service fails.
        """
        word = normalize_word(word)
        if not word:
            raise ValueError("Please enter an English word")

        entry = await self._dictionary.fetch_entry(word)
        if entry is None:
            raise WordNotFoundError(f"No form information found for '{word}'")

        result = infer_forms(entry.word, entry.senses)
        logger.debug("Inferred %s forms for %r: %s", result.part_of_speech, entry.word, result.forms)

        meaning = await self._translator.translate(word)
        return WordLookup(
            word=word,
            meaning=meaning,
            part_of_speech=str(result.part_of_speech),
            forms=result.forms,
        )

    async def add_word(self, word: str) -> StoredWord:
        """Look up a word and store it with zero stars.

        Raises:
            DuplicateWordError: If the word is already stored.
        """
        looked_up = await self.lookup(word)
        return self._store.add_word(
            word=looked_up.word,
            meaning=looked_up.meaning,
            part_of_speech=looked_up.part_of_speech,
            forms=looked_up.forms,
        )

    async def import_words(self, words: Iterable[str], fast: bool = False) -> ImportSummary:
        """Look up and store many words, one at a time.

        Words already stored (or repeated within the batch) are skipped.
        A failing word is counted and the import carries on.
        """
        batch = [w for w in (normalize_word(w) for w in words) if w]
        summary = ImportSummary(total=len(batch))
        existing = self._store.existing_words()
        delay = Config.IMPORT_FAST_DELAY if fast else Config.IMPORT_DELAY

        for i, word in enumerate(batch):
            if word in existing:
                summary.skipped += 1
            else:
                try:
                    await self.add_word(word)
                except DuplicateWordError:
                    summary.skipped += 1
                    existing.add(word)
                except Exception as e:
                    logger.warning("Importing %r failed: %s", word, e)
                    summary.errors += 1
                    summary.failed_words.append(word)
                else:
                    summary.imported += 1
                    existing.add(word)

            if (i + 1) % Config.IMPORT_PROGRESS_EVERY == 0 or i == len(batch) - 1:
                logger.info(
                    "Importing: %s (%d/%d) - imported: %d skipped: %d failed: %d",
                    word, i + 1, len(batch), summary.imported, summary.skipped, summary.errors,
                )

            if delay > 0 and i < len(batch) - 1:
                await asyncio.sleep(delay)

        logger.info(summary.message)
        return summary
