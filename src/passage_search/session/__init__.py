"""Session module -- presentation state machine."""

from passage_search.session.state import IDLE, Phase, Session, SessionState

__all__ = ["IDLE", "Phase", "Session", "SessionState"]
