"""Client for the Free Dictionary API (dictionaryapi.dev).

Only the first entry of a response is used. Each `meanings` block becomes a
DictionarySense carrying its part of speech and definition strings.
"""

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

from config import Config
from services.morphology import DictionarySense


logger = logging.getLogger(__name__)


class DictionaryError(Exception):
    """The dictionary service could not be reached or answered badly."""


@dataclass(frozen=True, slots=True)
class DictionaryEntry:
    """Headword plus its senses."""

    word: str
    senses: tuple[DictionarySense, ...]


def parse_entry(data: Any) -> DictionaryEntry | None:
    """Convert one raw API entry into a DictionaryEntry.

    Missing `definitions` or `definition` fields are treated as empty.
    Returns None when the entry has no meanings at all.
    """
    if not isinstance(data, dict) or not data.get("meanings"):
        return None

    senses = []
    for meaning in data["meanings"]:
        if not isinstance(meaning, dict):
            continue
        glosses = tuple(
            definition.get("definition") or ""
            for definition in meaning.get("definitions") or []
            if isinstance(definition, dict)
        )
        senses.append(
            DictionarySense(
                part_of_speech=meaning.get("partOfSpeech") or "",
                glosses=glosses,
            )
        )

    word = data.get("word") or ""
    if not word:
        return None
    return DictionaryEntry(word=word.lower(), senses=tuple(senses))


class DictionaryClient:
    """Looks up English words on dictionaryapi.dev."""

    def __init__(self, http: httpx.AsyncClient, base_url: str | None = None) -> None:
        self._http = http
        self._base_url = (base_url or Config.DICTIONARY_API_URL).rstrip("/")

    async def fetch_entry(self, word: str) -> DictionaryEntry | None:
        """Fetch the first dictionary entry for a word.

        Returns:
            The parsed entry, or None if the dictionary does not know the word.

        Raises:
            DictionaryError: On transport failures or unexpected statuses.
        """
        url = f"{self._base_url}/{quote(word)}"
        try:
            response = await self._http.get(url)
        except httpx.HTTPError as e:
            raise DictionaryError(f"Dictionary request failed: {e!s}") from e

        if response.status_code == 404:
            logger.info("Dictionary has no entry for %r", word)
            return None
        if response.is_error:
            raise DictionaryError(
                f"Dictionary returned HTTP {response.status_code} for {word!r}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise DictionaryError(f"Dictionary returned invalid JSON: {e!s}") from e

        if not isinstance(data, list) or not data:
            return None

        logger.debug("Dictionary raw entry for %r: %s", word, data[0])
        return parse_entry(data[0])
