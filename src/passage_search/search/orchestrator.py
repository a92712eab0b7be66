"""Search orchestrator -- the presentation boundary over the search pipeline.

Exposes ``load_source``, ``run_search``, ``select_result``, ``go_back`` and
``current_state``.  Searches are ordered by sequence number: a newer search
or a source change supersedes any in-flight search, whose outcome is then
dropped instead of being applied.
"""

import time
from typing import Callable, List, Mapping, Optional, Tuple

from passage_search.errors import (
    ErrorKind,
    FetchFailure,
    PassageSearchError,
    SearchFailure,
)
from passage_search.llm.query_generator import QueryGenerator
from passage_search.providers.base import ProviderAdapter, ProviderName, ResultRecord
from passage_search.providers.registry import build_adapters
from passage_search.search.graph import build_graph
from passage_search.search.nodes import SearchNodes
from passage_search.search.state import SearchState
from passage_search.session.state import (
    IDLE,
    Session,
    SessionState,
    back,
    begin_search,
    fail,
    queries_ready,
    select,
    show_results,
)
from passage_search.sources.sefaria import SefariaSource
from passage_search.utils.logger import get_logger, log_search

log = get_logger(__name__)


class SearchOrchestrator:
    """Drives query generation, provider fan-out, dedup and state transitions."""

    def __init__(
        self,
        session: Session | None = None,
        generator: QueryGenerator | None = None,
        adapters: Mapping[ProviderName, ProviderAdapter] | None = None,
        source: SefariaSource | None = None,
    ):
        self.session = session or Session()
        self.generator = generator or QueryGenerator()
        self.adapters = adapters if adapters is not None else build_adapters()
        self.source = source or SefariaSource()
        self._graph = build_graph(SearchNodes(self.generator, self.adapters))

    # ---- Presentation boundary ----------------------------------------------

    def current_state(self) -> SessionState:
        return self.session.state

    async def load_source(self, ref: str) -> Optional[SessionState]:
        """Fetch the text for *ref*, replacing the previous source wholesale.

        Returns the new state, or None if a later load/search superseded it.
        """
        session = self.session
        if ref == session.source_ref and session.source_text:
            return session.state

        session.source_version += 1
        version = session.source_version
        seq = self._next_sequence()
        session.source_ref = ref
        session.source_text = None
        self._transition(seq, lambda _: IDLE)

        try:
            text = await self.source.fetch_text(ref)
        except FetchFailure:
            log.warning("Source text load failed for %s", ref)
            return self._transition(seq, fail, ErrorKind.FETCH_FAILURE)

        if version != session.source_version:
            log.info("Discarding stale source text for %s", ref)
            return None
        session.source_text = text
        return self._transition(seq, lambda state: state)

    async def run_search(self, provider: ProviderName) -> Optional[SessionState]:
        """Search *provider* with the loaded source text.

        Never raises for pipeline failures: they land in the ``Error`` phase.
        Returns the applied state, or None when a newer call superseded this one.
        """
        seq = self._next_sequence()
        text = self.session.source_text
        if not text or not text.strip():
            log.warning("Search requested before source text was loaded")
            return self._transition(seq, fail, ErrorKind.NO_SOURCE_TEXT)

        self._transition(seq, begin_search)
        try:
            results, notice = await self.search(
                provider,
                text,
                source_ref=self.session.source_ref,
                on_queries=lambda _: self._transition(seq, queries_ready),
            )
        except PassageSearchError as exc:
            log.warning("Search failed (%s): %s", exc.kind.value, exc)
            return self._transition(seq, fail, exc.kind)

        return self._transition(seq, show_results, tuple(results), notice)

    def select_result(self, identity_key: str) -> ResultRecord:
        """Select a result; playable ones switch to ``ItemPlaying``.

        Link results leave the state unchanged and are returned so the caller
        can open ``record.target.url``.
        """
        self.session.state, record = select(self.session.state, identity_key)
        return record

    def go_back(self) -> SessionState:
        self.session.state = back(self.session.state)
        return self.session.state

    # ---- Pipeline -----------------------------------------------------------

    async def search(
        self,
        provider: ProviderName,
        source_text: str,
        source_ref: str | None = None,
        on_queries: Callable[[List[str]], None] | None = None,
    ) -> Tuple[List[ResultRecord], Optional[str]]:
        """Run the graph once and return (deduplicated results, notice).

        Raises ``GenerationFailure``/``EmptyQueries`` from query generation and
        ``SearchFailure`` for anything else that goes wrong.
        """
        initial: SearchState = {
            "provider": provider,
            "source_ref": source_ref,
            "source_text": source_text,
            "queries": None,
            "per_query_results": None,
            "results": None,
            "notice": None,
            "start_time": time.time(),
            "end_time": None,
        }
        final = dict(initial)

        try:
            async for update in self._graph.astream(initial, stream_mode="updates"):
                for node, partial in update.items():
                    if partial:
                        final.update(partial)
                    if node == "generate_queries" and on_queries is not None:
                        on_queries(final["queries"])
        except PassageSearchError as exc:
            self._log_failure(final, exc.kind)
            raise
        except Exception as exc:
            log.exception("Search pipeline failed for %s", provider.value)
            self._log_failure(final, ErrorKind.SEARCH_FAILURE)
            raise SearchFailure(str(exc)) from exc

        return list(final.get("results") or []), final.get("notice")

    # ---- Helpers -------------------------------------------------------------

    def _next_sequence(self) -> int:
        self.session.sequence += 1
        return self.session.sequence

    def _transition(self, seq: int, fn, *args) -> Optional[SessionState]:
        """Apply ``fn(state, *args)`` only if *seq* is still the latest call."""
        if seq != self.session.sequence:
            log.info("Discarding superseded update (seq=%d, current=%d)",
                     seq, self.session.sequence)
            return None
        self.session.state = fn(self.session.state, *args)
        return self.session.state

    @staticmethod
    def _log_failure(state: dict, kind: ErrorKind) -> None:
        elapsed_ms = (time.time() - state["start_time"]) * 1000
        log_search(
            source_ref=state.get("source_ref"),
            provider=state["provider"].value,
            queries=state.get("queries") or [],
            result_count=0,
            outcome=kind.value,
            response_time_ms=elapsed_ms,
        )
