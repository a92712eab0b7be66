"""Query generator -- turns a passage into provider-specific search queries.

Default model: gpt-4o-mini (configurable via OPENAI_QUERY_MODEL).
"""

from typing import List

from passage_search.errors import EmptyQueries, GenerationFailure
from passage_search.llm.base import BaseLLM
from passage_search.providers.base import ProviderName
from passage_search.utils.config import settings
from passage_search.utils.logger import get_logger

log = get_logger(__name__)

QUERY_SEPARATOR = ";"

QUERY_PROMPT = """Create relevant search queries for {provider} that would be relevant for {audience} the following passage:

{text}

Return data as a simple list of queries (just text). Use "{separator}" to separate queries."""


def build_prompt(provider: ProviderName, source_text: str, audience: str | None = None) -> str:
    return QUERY_PROMPT.format(
        provider=provider.display_name,
        audience=audience or settings.query_audience,
        text=source_text,
        separator=QUERY_SEPARATOR,
    )


def parse_queries(raw: str) -> List[str]:
    """Split a ``;``-separated reply into trimmed, non-empty queries (order kept)."""
    return [q.strip() for q in raw.split(QUERY_SEPARATOR) if q.strip()]


class QueryGenerator(BaseLLM):
    """Single-shot query generation; no retries."""

    def __init__(self, model: str | None = None, audience: str | None = None, **kwargs):
        super().__init__(model=model or settings.query_model, **kwargs)
        self.audience = audience or settings.query_audience

    async def generate(self, provider: ProviderName, source_text: str) -> List[str]:
        """Return the ordered queries for *provider*.

        Raises ``GenerationFailure`` if the model call fails and
        ``EmptyQueries`` if the reply contains no usable query.
        """
        if not source_text or not source_text.strip():
            raise ValueError("source_text must be non-empty")

        prompt = build_prompt(provider, source_text, self.audience)
        messages = [{"role": "user", "content": prompt}]
        raw = await self.complete(
            messages,
            temperature=settings.query_temperature,
            max_tokens=settings.query_max_tokens,
            n=1,
        )
        if not raw:
            raise GenerationFailure(f"Query generation failed for {provider.display_name}")

        queries = parse_queries(raw)
        if not queries:
            log.warning("Model returned no usable queries: %r", raw[:200])
            raise EmptyQueries(f"No queries generated for {provider.display_name}")

        log.info("Generated %d queries for %s: %s", len(queries), provider.display_name, queries)
        return queries
