"""Wikipedia full-text search (encyclopedia provider)."""

from typing import List
from urllib.parse import quote

import httpx

from passage_search.providers.base import (
    LinkRef,
    ProviderAdapter,
    ProviderName,
    ResultRecord,
)
from passage_search.utils.config import settings


def page_url(title: str, base_url: str | None = None) -> str:
    """Build the article URL for *title* (spaces -> underscores, then percent-encoded)."""
    base = base_url or settings.wikipedia_page_url
    return base + quote(title.replace(" ", "_"), safe="!~*'()")


class WikipediaSearch(ProviderAdapter):
    """Search articles via the MediaWiki ``list=search`` API.

    Results are links out to the article; the page title doubles as the
    identity key since the search endpoint reports nothing more stable.
    """

    name = ProviderName.ENCYCLOPEDIA

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        api_url: str | None = None,
        page_base_url: str | None = None,
    ):
        super().__init__(client)
        self.api_url = api_url or settings.wikipedia_api_url
        self.page_base_url = page_base_url or settings.wikipedia_page_url

    async def _fetch(self, query: str) -> List[ResultRecord]:
        data = await self._get_json(
            self.api_url,
            {
                "action": "query",
                "list": "search",
                "format": "json",
                "srsearch": query,
            },
        )
        hits = (data.get("query") or {}).get("search") or []

        results: List[ResultRecord] = []
        for hit in hits:
            title = hit.get("title")
            if not title:
                continue
            results.append(
                ResultRecord(
                    display_title=title,
                    identity_key=title,
                    target=LinkRef(url=page_url(title, self.page_base_url)),
                )
            )
        return results
