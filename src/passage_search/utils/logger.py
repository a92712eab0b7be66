"""Package logging and per-search analytics logging.

Handlers live on the ``passage_search`` logger only; module loggers are its
children and inherit its level, so ``set_level`` reaches every one of them.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

PACKAGE_LOGGER = "passage_search"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _package_logger() -> logging.Logger:
    """Return the package logger, attaching stdout/file handlers on first use."""
    from passage_search.utils.config import settings

    root = logging.getLogger(PACKAGE_LOGGER)
    if root.handlers:
        return root

    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    root.propagate = False
    formatter = logging.Formatter(LOG_FORMAT)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(formatter)
        root.addHandler(fh)

    return root


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return a logger under the package logger.

    Names outside the package (``__main__``) are nested under it so the CLI
    shares its handlers and level.  *level* pins this one logger only.
    """
    _package_logger()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger


def set_level(level: str | int) -> None:
    """Change the level of every package logger at once (e.g. ``--verbose``)."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    _package_logger().setLevel(level)


def log_search(
    source_ref: Optional[str],
    provider: str,
    queries: List[str],
    result_count: int,
    outcome: str,
    response_time_ms: float,
) -> None:
    """Append a single search record to the JSONL analytics file."""
    from passage_search.utils.config import settings

    if not settings.analytics_file:
        return

    record = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "source_ref": source_ref,
        "provider": provider,
        "queries": queries,
        "result_count": result_count,
        "outcome": outcome,
        "response_time_ms": round(response_time_ms, 1),
    }

    path = Path(settings.analytics_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(record) + "\n")
