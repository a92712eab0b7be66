"""Twitter placeholder (social provider) -- search needs authenticated API access."""

from typing import List, Optional

from passage_search.providers.base import (
    ProviderAdapter,
    ProviderName,
    ResultRecord,
    Unavailable,
)

UNAVAILABLE_REASON = (
    "Twitter API access requires authentication. "
    "This functionality is not implemented."
)


class TwitterSearch(ProviderAdapter):
    name = ProviderName.SOCIAL

    def availability(self) -> Optional[Unavailable]:
        return Unavailable(provider=self.name, reason=UNAVAILABLE_REASON)

    async def _fetch(self, query: str) -> List[ResultRecord]:
        return []
