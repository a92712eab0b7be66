"""Search pipeline state schema -- the TypedDict that flows through every node."""

from typing import List, Optional, TypedDict

from passage_search.providers.base import ProviderName, ResultRecord


class SearchState(TypedDict, total=False):
    """State carried across the LangGraph search pipeline.

    Every node receives the full state and returns a *partial* dict with only
    the keys it wants to update.
    """

    # Input
    provider: ProviderName
    source_ref: Optional[str]
    source_text: str

    # Query generation
    queries: Optional[List[str]]

    # Fan-out / merge (one inner list per query, in submission order)
    per_query_results: Optional[List[List[ResultRecord]]]
    results: Optional[List[ResultRecord]]
    notice: Optional[str]

    # Observability
    start_time: float
    end_time: Optional[float]
