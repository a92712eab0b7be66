"""YouTube Data API search (video provider)."""

from typing import List

import httpx

from passage_search.providers.base import (
    PlayableRef,
    ProviderAdapter,
    ProviderName,
    ResultRecord,
)
from passage_search.utils.config import settings

MAX_RESULTS = 5


class YouTubeSearch(ProviderAdapter):
    """Video search; every result is playable in place by its video ID."""

    name = ProviderName.VIDEO
    max_results_per_query = MAX_RESULTS

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        api_key: str | None = None,
        api_url: str | None = None,
        embed_base_url: str | None = None,
    ):
        super().__init__(client)
        self.api_key = api_key or settings.youtube_api_key
        self.api_url = api_url or settings.youtube_api_url
        self.embed_base_url = embed_base_url or settings.youtube_embed_url

    async def _fetch(self, query: str) -> List[ResultRecord]:
        data = await self._get_json(
            self.api_url,
            {
                "part": "snippet",
                "q": query,
                "key": self.api_key,
                "type": "video",
                "maxResults": MAX_RESULTS,
            },
        )

        results: List[ResultRecord] = []
        for item in data.get("items") or []:
            video_id = (item.get("id") or {}).get("videoId")
            if not video_id:
                continue
            title = (item.get("snippet") or {}).get("title") or video_id
            results.append(
                ResultRecord(
                    display_title=title,
                    identity_key=video_id,
                    target=PlayableRef(
                        content_id=video_id,
                        embed_url=f"{self.embed_base_url}{video_id}",
                    ),
                )
            )
        return results
