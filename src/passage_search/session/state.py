"""Presentation state machine.

Phases::

  Idle -> QueriesGenerating -> Searching -> ResultsShown <-> ItemPlaying
                  |                 |
                  +------> Error <--+      (any phase may re-enter search)

``SessionState`` is an immutable value; every transition function returns a
new one and leaves its input untouched.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from passage_search.errors import ERROR_MESSAGES, ErrorKind, InvalidTransition, UnknownResult
from passage_search.providers.base import PlayableRef, ResultRecord

NO_RESULTS_NOTICE = "No results found."


class Phase(str, Enum):
    IDLE = "idle"
    QUERIES_GENERATING = "queries_generating"
    SEARCHING = "searching"
    RESULTS_SHOWN = "results_shown"
    ITEM_PLAYING = "item_playing"
    ERROR = "error"


@dataclass(frozen=True)
class SessionState:
    phase: Phase = Phase.IDLE
    results: Optional[Tuple[ResultRecord, ...]] = None
    playing: Optional[PlayableRef] = None
    error: Optional[ErrorKind] = None
    notice: Optional[str] = None

    def find(self, identity_key: str) -> ResultRecord:
        for record in self.results or ():
            if record.identity_key == identity_key:
                return record
        raise UnknownResult(identity_key)


IDLE = SessionState()


def begin_search(state: SessionState) -> SessionState:
    return SessionState(phase=Phase.QUERIES_GENERATING)


def queries_ready(state: SessionState) -> SessionState:
    if state.phase is not Phase.QUERIES_GENERATING:
        raise InvalidTransition(f"Cannot start searching from {state.phase.value}")
    return SessionState(phase=Phase.SEARCHING)


def show_results(
    state: SessionState,
    results: Tuple[ResultRecord, ...],
    notice: Optional[str] = None,
) -> SessionState:
    """Enter ResultsShown; an empty set is a normal outcome with a notice."""
    if state.phase not in (Phase.QUERIES_GENERATING, Phase.SEARCHING):
        raise InvalidTransition(f"Cannot show results from {state.phase.value}")
    if not results and notice is None:
        notice = NO_RESULTS_NOTICE
    return SessionState(phase=Phase.RESULTS_SHOWN, results=tuple(results), notice=notice)


def fail(state: SessionState, kind: ErrorKind) -> SessionState:
    return SessionState(phase=Phase.ERROR, error=kind, notice=ERROR_MESSAGES[kind])


def select(state: SessionState, identity_key: str) -> Tuple[SessionState, ResultRecord]:
    """Select a record; playable ones start playback, links leave state as is."""
    if state.phase is not Phase.RESULTS_SHOWN:
        raise InvalidTransition(f"Cannot select a result from {state.phase.value}")
    record = state.find(identity_key)
    if not isinstance(record.target, PlayableRef):
        return state, record
    return replace(state, phase=Phase.ITEM_PLAYING, playing=record.target), record


def back(state: SessionState) -> SessionState:
    if state.phase is not Phase.ITEM_PLAYING:
        return state
    return replace(state, phase=Phase.RESULTS_SHOWN, playing=None)


@dataclass
class Session:
    """Mutable holder for one session: source text plus current presentation state.

    ``sequence`` is bumped by every search and every source change; only the
    holder of the latest number may write ``state``.  ``source_version`` is
    bumped by every source change and guards ``source_text``.
    """

    source_ref: Optional[str] = None
    source_text: Optional[str] = None
    state: SessionState = IDLE
    sequence: int = 0
    source_version: int = 0
