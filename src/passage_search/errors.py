"""Error kinds and the exception hierarchy shared by the search pipeline.

Every recoverable failure carries an ``ErrorKind`` so the presentation layer
can display it and move the session into a re-triggerable ``Error`` state.
"""

from enum import Enum


class ErrorKind(str, Enum):
    NO_SOURCE_TEXT = "no_source_text"
    FETCH_FAILURE = "fetch_failure"
    GENERATION_FAILURE = "generation_failure"
    EMPTY_QUERIES = "empty_queries"
    SEARCH_FAILURE = "search_failure"


ERROR_MESSAGES = {
    ErrorKind.NO_SOURCE_TEXT: "Source text not loaded yet.",
    ErrorKind.FETCH_FAILURE: "Failed to fetch source text.",
    ErrorKind.GENERATION_FAILURE: "An error occurred while generating queries.",
    ErrorKind.EMPTY_QUERIES: "No queries generated.",
    ErrorKind.SEARCH_FAILURE: "An error occurred during search.",
}


class PassageSearchError(Exception):
    """Base class for recoverable pipeline failures."""

    kind: ErrorKind = ErrorKind.SEARCH_FAILURE

    @property
    def display_message(self) -> str:
        return ERROR_MESSAGES[self.kind]


class NoSourceText(PassageSearchError):
    kind = ErrorKind.NO_SOURCE_TEXT


class FetchFailure(PassageSearchError):
    kind = ErrorKind.FETCH_FAILURE


class GenerationFailure(PassageSearchError):
    kind = ErrorKind.GENERATION_FAILURE


class EmptyQueries(GenerationFailure):
    """Generation succeeded but produced no usable query."""

    kind = ErrorKind.EMPTY_QUERIES


class SearchFailure(PassageSearchError):
    kind = ErrorKind.SEARCH_FAILURE


class InvalidTransition(Exception):
    """An action was requested that the current presentation phase forbids."""


class UnknownResult(KeyError):
    """No record with the given identity key in the active result set."""
