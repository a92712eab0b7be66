"""Abstract provider interface and the normalised result record shapes."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

import httpx

from passage_search.utils.config import settings
from passage_search.utils.logger import get_logger

log = get_logger(__name__)


class ProviderName(str, Enum):
    """Enumerated provider keys -- each selects exactly one adapter."""

    ENCYCLOPEDIA = "encyclopedia"
    VIDEO = "video"
    SOCIAL = "social"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    ProviderName.ENCYCLOPEDIA: "Wikipedia",
    ProviderName.VIDEO: "YouTube",
    ProviderName.SOCIAL: "Twitter",
}


@dataclass(frozen=True)
class PlayableRef:
    """Content that can be played in place (embedded player)."""

    content_id: str
    embed_url: str


@dataclass(frozen=True)
class LinkRef:
    """Content only reachable through an external URL."""

    url: str


@dataclass(frozen=True)
class ResultRecord:
    """A single normalised search result."""

    display_title: str
    identity_key: str
    target: Union[PlayableRef, LinkRef]

    @property
    def playable(self) -> bool:
        return isinstance(self.target, PlayableRef)


@dataclass(frozen=True)
class Unavailable:
    """Sentinel returned by providers that cannot be searched at all."""

    provider: ProviderName
    reason: str


class ProviderAdapter(ABC):
    """Abstract interface -- one subclass per provider, selected by ``name``.

    Subclasses implement ``_fetch`` for a single query.  ``search`` wraps it so
    that any failure degrades to zero results for that query only.
    """

    name: ProviderName
    # None means the provider decides how many results to return.
    max_results_per_query: Optional[int] = None

    def __init__(self, client: httpx.AsyncClient | None = None):
        self._client = client

    def availability(self) -> Optional[Unavailable]:
        """Return an ``Unavailable`` sentinel if this provider cannot be searched."""
        return None

    async def search(self, query: str) -> List[ResultRecord]:
        """Return normalised results for *query*; never raises."""
        try:
            records = await self._fetch(query)
        except Exception:
            log.exception("%s search failed for query: %s", self.name.display_name, query)
            return []
        if self.max_results_per_query is not None:
            records = records[: self.max_results_per_query]
        log.debug("%s returned %d results for %r", self.name.display_name, len(records), query)
        return records

    @abstractmethod
    async def _fetch(self, query: str) -> List[ResultRecord]:
        """Call the provider for one query and normalise its response."""
        ...

    async def _get_json(self, url: str, params: dict) -> dict:
        """GET *url* and return the decoded JSON body (raises on non-2xx)."""
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
