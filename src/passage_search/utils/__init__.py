"""Utils module -- config and logging."""

from passage_search.utils.config import settings
from passage_search.utils.logger import get_logger, log_search, set_level

__all__ = ["settings", "get_logger", "log_search", "set_level"]
