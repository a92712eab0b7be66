"""Providers module -- Wikipedia, YouTube and Twitter search adapters."""

from passage_search.providers.base import (
    LinkRef,
    PlayableRef,
    ProviderAdapter,
    ProviderName,
    ResultRecord,
    Unavailable,
)
from passage_search.providers.registry import ADAPTERS, build_adapters, parse_provider
from passage_search.providers.twitter import TwitterSearch
from passage_search.providers.wikipedia import WikipediaSearch
from passage_search.providers.youtube import YouTubeSearch

__all__ = [
    "ADAPTERS",
    "LinkRef",
    "PlayableRef",
    "ProviderAdapter",
    "ProviderName",
    "ResultRecord",
    "TwitterSearch",
    "Unavailable",
    "WikipediaSearch",
    "YouTubeSearch",
    "build_adapters",
    "parse_provider",
]
