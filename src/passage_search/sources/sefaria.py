"""Source-text provider backed by the Sefaria texts API."""

from typing import Any, Iterator
from urllib.parse import quote

import httpx

from passage_search.errors import FetchFailure
from passage_search.sources.converter import html_to_markdown
from passage_search.utils.config import settings
from passage_search.utils.logger import get_logger

log = get_logger(__name__)


def _segments(text: Any) -> Iterator[str]:
    """Yield string segments from Sefaria's (possibly nested) text arrays."""
    if isinstance(text, str):
        yield text
    elif isinstance(text, list):
        for item in text:
            yield from _segments(item)


class SefariaSource:
    """Fetch the English text of a Sefaria reference (e.g. ``Genesis 1:1-5``)."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        api_url: str | None = None,
        version: str | None = None,
    ):
        self._client = client
        self.api_url = api_url or settings.sefaria_api_url
        self.version = version or settings.sefaria_version

    def text_url(self, ref: str) -> str:
        return self.api_url + quote(ref, safe="")

    async def fetch_text(self, ref: str) -> str:
        """Return the passage as plain Markdown text; raise ``FetchFailure`` otherwise."""
        url = self.text_url(ref)
        try:
            data = await self._get_json(url, {"version": self.version})
        except (httpx.HTTPError, ValueError) as exc:
            log.warning("Failed to fetch Sefaria text for %s: %s", ref, exc)
            raise FetchFailure(f"Could not fetch {ref!r}") from exc

        versions = data.get("versions") if isinstance(data, dict) else None
        if not isinstance(versions, list) or not versions or not isinstance(versions[0], dict):
            raise FetchFailure(f"No text versions returned for {ref!r}")

        segments = [html_to_markdown(s) for s in _segments(versions[0].get("text"))]
        text = "\n".join(s for s in segments if s)
        if not text:
            raise FetchFailure(f"Empty text returned for {ref!r}")

        log.info("Loaded %d chars of source text for %s", len(text), ref)
        return text

    async def _get_json(self, url: str, params: dict) -> Any:
        if self._client is not None:
            resp = await self._client.get(url, params=params)
        else:
            async with httpx.AsyncClient(
                timeout=settings.http_timeout,
                follow_redirects=True,
                headers={"User-Agent": settings.user_agent},
            ) as client:
                resp = await client.get(url, params=params)
        resp.raise_for_status()
        return resp.json()
