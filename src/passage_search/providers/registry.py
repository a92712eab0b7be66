"""Provider registry -- maps each ``ProviderName`` to its adapter class."""

from typing import Dict, Type

import httpx

from passage_search.providers.base import ProviderAdapter, ProviderName
from passage_search.providers.twitter import TwitterSearch
from passage_search.providers.wikipedia import WikipediaSearch
from passage_search.providers.youtube import YouTubeSearch

ADAPTERS: Dict[ProviderName, Type[ProviderAdapter]] = {
    ProviderName.ENCYCLOPEDIA: WikipediaSearch,
    ProviderName.VIDEO: YouTubeSearch,
    ProviderName.SOCIAL: TwitterSearch,
}


def build_adapters(
    client: httpx.AsyncClient | None = None,
) -> Dict[ProviderName, ProviderAdapter]:
    """Instantiate one adapter per registered provider."""
    return {name: cls(client=client) for name, cls in ADAPTERS.items()}


def parse_provider(value: str) -> ProviderName:
    """Resolve a provider from its key or display name (case-insensitive)."""
    needle = value.strip().lower()
    for name in ProviderName:
        if needle in (name.value, name.display_name.lower()):
            return name
    choices = ", ".join(n.value for n in ProviderName)
    raise ValueError(f"Unknown provider {value!r} (choose from: {choices})")
