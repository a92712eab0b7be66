"""Result deduplication by identity key."""

from typing import Iterable, List, Set

from passage_search.providers.base import ResultRecord


def dedupe(records: Iterable[ResultRecord]) -> List[ResultRecord]:
    """Drop records whose ``identity_key`` was already seen.

    Stable: the first occurrence wins and input order is preserved.  Other
    fields are not compared.
    """
    seen: Set[str] = set()
    unique: List[ResultRecord] = []
    for record in records:
        if record.identity_key in seen:
            continue
        seen.add(record.identity_key)
        unique.append(record)
    return unique
