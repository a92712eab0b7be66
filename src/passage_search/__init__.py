"""passage-search -- generate search queries from a passage and fan them out to providers."""

from passage_search.providers.base import ProviderName
from passage_search.search.orchestrator import SearchOrchestrator
from passage_search.session.state import Phase, Session, SessionState

__all__ = ["Phase", "ProviderName", "SearchOrchestrator", "Session", "SessionState"]

__version__ = "0.1.0"
