"""Configuration management -- reads from environment with sensible defaults."""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    """Centralised settings read once from env vars."""

    # --- OpenAI (query generation) -----------------------------------------
    openai_api_key: str = field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))
    query_model: str = field(
        default_factory=lambda: os.getenv("OPENAI_QUERY_MODEL", "gpt-4o-mini")
    )
    query_max_tokens: int = field(
        default_factory=lambda: int(os.getenv("QUERY_MAX_TOKENS", "200"))
    )
    query_temperature: float = field(
        default_factory=lambda: float(os.getenv("QUERY_TEMPERATURE", "0.7"))
    )
    query_audience: str = field(
        default_factory=lambda: os.getenv("QUERY_AUDIENCE", "a Jewish person learning")
    )

    # --- Search providers --------------------------------------------------
    youtube_api_key: str = field(default_factory=lambda: os.getenv("YOUTUBE_API_KEY", ""))
    wikipedia_api_url: str = field(
        default_factory=lambda: os.getenv(
            "WIKIPEDIA_API_URL", "https://en.wikipedia.org/w/api.php"
        )
    )
    wikipedia_page_url: str = field(
        default_factory=lambda: os.getenv(
            "WIKIPEDIA_PAGE_URL", "https://en.wikipedia.org/wiki/"
        )
    )
    youtube_api_url: str = field(
        default_factory=lambda: os.getenv(
            "YOUTUBE_API_URL", "https://www.googleapis.com/youtube/v3/search"
        )
    )
    youtube_embed_url: str = field(
        default_factory=lambda: os.getenv(
            "YOUTUBE_EMBED_URL", "https://www.youtube.com/embed/"
        )
    )

    # --- Source text (Sefaria) ---------------------------------------------
    sefaria_api_url: str = field(
        default_factory=lambda: os.getenv(
            "SEFARIA_API_URL", "https://www.sefaria.org/api/v3/texts/"
        )
    )
    sefaria_version: str = field(
        default_factory=lambda: os.getenv("SEFARIA_VERSION", "english")
    )

    # --- HTTP ----------------------------------------------------------------
    # None means no timeout; callers wrap their own cancellation.
    http_timeout: Optional[float] = field(
        default_factory=lambda: _optional_float("HTTP_TIMEOUT")
    )
    user_agent: str = field(
        default_factory=lambda: os.getenv(
            "USER_AGENT", "passage-search/0.1 (https://github.com/passage-search)"
        )
    )

    # --- Logging -----------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", "logs/search.log"))
    analytics_file: str = field(
        default_factory=lambda: os.getenv("ANALYTICS_FILE", "logs/searches.jsonl")
    )


# Module-level singleton -- import this everywhere.
settings = Settings()
