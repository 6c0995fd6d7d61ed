"""Shared fixtures: a fake dictionary/translation backend over httpx.MockTransport."""

import httpx
import pytest

from config import Config
from services.dictionary import DictionaryClient
from services.lookup import LookupService
from services.store import WordStore
from services.translation import TranslationClient


DICTIONARY_URL = "https://dictionary.test/entries/en"
TRANSLATION_URL = "https://translate.test/get"

ENTRIES = {
    "ran": {
        "word": "ran",
        "meanings": [
            {"partOfSpeech": "verb", "definitions": [{"definition": "Simple past tense of run."}]},
        ],
    },
    "running": {
        "word": "running",
        "meanings": [
            {"partOfSpeech": "noun", "definitions": [{"definition": "The act of running."}]},
            {"partOfSpeech": "verb", "definitions": [{"definition": "To move quickly."}]},
        ],
    },
    "boxes": {
        "word": "boxes",
        "meanings": [{"partOfSpeech": "noun", "definitions": [{"definition": "A container."}]}],
    },
    "faster": {
        "word": "faster",
        "meanings": [{"partOfSpeech": "adjective", "definitions": [{}]}],
    },
    "empty": {"word": "empty", "meanings": []},
}

TRANSLATIONS = {
    "ran": "跑了",
    "running": "跑步",
    "boxes": "盒子",
}


class FakeBackend:
    """Answers dictionary and translation requests from the tables above."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.dictionary_down = False

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url.startswith(DICTIONARY_URL):
            if self.dictionary_down:
                return httpx.Response(503)
            word = request.url.path.rsplit("/", 1)[-1]
            if word not in ENTRIES:
                return httpx.Response(404, json={"title": "No Definitions Found"})
            return httpx.Response(200, json=[ENTRIES[word]])
        if url.startswith(TRANSLATION_URL):
            word = request.url.params["q"]
            if word not in TRANSLATIONS:
                return httpx.Response(200, json={"responseStatus": 403, "responseData": None})
            return httpx.Response(
                200,
                json={"responseStatus": 200, "responseData": {"translatedText": TRANSLATIONS[word]}},
            )
        return httpx.Response(500)


@pytest.fixture(autouse=True)
def no_import_delay(monkeypatch):
    monkeypatch.setattr(Config, "IMPORT_DELAY", 0)
    monkeypatch.setattr(Config, "IMPORT_FAST_DELAY", 0)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def http(backend):
    return httpx.AsyncClient(transport=httpx.MockTransport(backend))


@pytest.fixture
def store():
    return WordStore("sqlite://")


@pytest.fixture
def service(http, store):
    return LookupService(
        dictionary=DictionaryClient(http, base_url=DICTIONARY_URL),
        translator=TranslationClient(http, base_url=TRANSLATION_URL, langpair="en|zh"),
        store=store,
    )
