"""Client for the MyMemory translation API."""

import logging

import httpx

from config import Config


logger = logging.getLogger(__name__)


class TranslationClient:
    """Translates single words; falls back to a placeholder on any failure."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        base_url: str | None = None,
        langpair: str | None = None,
    ) -> None:
        self._http = http
        self._base_url = base_url or Config.TRANSLATION_API_URL
        self._langpair = langpair or Config.TRANSLATION_LANGPAIR

    async def translate(self, word: str) -> str:
        """Translate a word, returning Config.NO_TRANSLATION if that fails."""
        try:
            response = await self._http.get(
                self._base_url,
                params={"q": word, "langpair": self._langpair},
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Translation failed for %r: %s", word, e)
            return Config.NO_TRANSLATION

        if not isinstance(data, dict):
            return Config.NO_TRANSLATION

        response_data = data.get("responseData")
        if data.get("responseStatus") == 200 and isinstance(response_data, dict):
            translated = response_data.get("translatedText")
            if translated:
                return translated

        logger.info("No translation available for %r", word)
        return Config.NO_TRANSLATION
