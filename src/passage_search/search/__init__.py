"""Search module -- LangGraph pipeline, dedup and the orchestrator."""

from passage_search.search.dedup import dedupe
from passage_search.search.graph import build_graph
from passage_search.search.orchestrator import SearchOrchestrator
from passage_search.search.state import SearchState

__all__ = ["SearchOrchestrator", "SearchState", "build_graph", "dedupe"]
