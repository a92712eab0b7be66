"""Node implementations for the search pipeline graph.

Each node receives the full ``SearchState`` and returns a *partial* dict with
only the keys it updates.  Dependencies (query generator, provider adapters)
are bound once per ``SearchNodes`` instance.
"""

import asyncio
import time
from typing import Any, Dict, List, Mapping

from passage_search.llm.query_generator import QueryGenerator
from passage_search.providers.base import ProviderAdapter, ProviderName, ResultRecord
from passage_search.search.dedup import dedupe
from passage_search.search.state import SearchState
from passage_search.utils.logger import get_logger, log_search

log = get_logger(__name__)


class SearchNodes:
    def __init__(
        self,
        generator: QueryGenerator,
        adapters: Mapping[ProviderName, ProviderAdapter],
    ):
        self.generator = generator
        self.adapters = adapters

    def adapter_for(self, provider: ProviderName) -> ProviderAdapter:
        return self.adapters[provider]

    # ---- Routing -----------------------------------------------------------

    def route_provider(self, state: SearchState) -> str:
        """Conditional entry: 'unavailable' for sentinel providers, else 'available'."""
        if self.adapter_for(state["provider"]).availability() is not None:
            return "unavailable"
        return "available"

    # ---- Nodes -------------------------------------------------------------

    async def provider_unavailable(self, state: SearchState) -> Dict[str, Any]:
        """Short-circuit: no generation, no provider calls, just the reason."""
        sentinel = self.adapter_for(state["provider"]).availability()
        log.info("%s unavailable: %s", state["provider"].display_name, sentinel.reason)
        return {"queries": [], "per_query_results": [], "results": [], "notice": sentinel.reason}

    async def generate_queries(self, state: SearchState) -> Dict[str, Any]:
        log.info("Generating queries for %s", state["provider"].display_name)
        queries = await self.generator.generate(state["provider"], state["source_text"])
        return {"queries": queries}

    async def fan_out(self, state: SearchState) -> Dict[str, Any]:
        """Run every query concurrently; a failed query contributes no results."""
        adapter = self.adapter_for(state["provider"])
        queries = state.get("queries") or []
        outcomes = await asyncio.gather(
            *(adapter.search(q) for q in queries), return_exceptions=True
        )

        per_query: List[List[ResultRecord]] = []
        for query, outcome in zip(queries, outcomes):
            if isinstance(outcome, BaseException):
                log.warning("Query %r failed: %s", query, outcome)
                per_query.append([])
            else:
                per_query.append(list(outcome))
        return {"per_query_results": per_query}

    async def dedupe_results(self, state: SearchState) -> Dict[str, Any]:
        merged = [r for batch in state.get("per_query_results") or [] for r in batch]
        results = dedupe(merged)
        log.info("Merged %d results, %d after dedup", len(merged), len(results))
        return {"results": results}

    async def log_search(self, state: SearchState) -> Dict[str, Any]:
        """Log the search and stamp end_time."""
        end = time.time()
        elapsed_ms = (end - state.get("start_time", end)) * 1000
        results = state.get("results") or []
        log_search(
            source_ref=state.get("source_ref"),
            provider=state["provider"].value,
            queries=state.get("queries") or [],
            result_count=len(results),
            outcome="unavailable" if state.get("notice") else "ok",
            response_time_ms=elapsed_ms,
        )
        log.info("Done -- provider=%s, results=%d, time=%.0fms",
                 state["provider"].value, len(results), elapsed_ms)
        return {"end_time": end}
