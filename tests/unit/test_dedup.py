"""Unit tests for result deduplication."""

from passage_search.providers.base import LinkRef, PlayableRef, ResultRecord
from passage_search.search.dedup import dedupe


def _link(key, title=None):
    return ResultRecord(
        display_title=title or key,
        identity_key=key,
        target=LinkRef(url=f"https://example.org/{key}"),
    )


def test_first_occurrence_wins_and_order_kept():
    out = dedupe([_link("a"), _link("b"), _link("a")])
    assert [r.identity_key for r in out] == ["a", "b"]


def test_differing_fields_collapse_to_first_seen():
    first = _link("a", title="First")
    later = ResultRecord(
        display_title="Second",
        identity_key="a",
        target=PlayableRef(content_id="a", embed_url="https://example.org/embed/a"),
    )
    out = dedupe([first, later])
    assert out == [first]


def test_no_duplicates_and_never_longer_than_input():
    records = [_link(k) for k in "abcabcdd"]
    out = dedupe(records)
    keys = [r.identity_key for r in out]
    assert len(out) <= len(records)
    assert len(keys) == len(set(keys))
    assert keys == ["a", "b", "c", "d"]


def test_empty_input():
    assert dedupe([]) == []


def test_accepts_generators():
    out = dedupe(_link(k) for k in ["x", "x", "y"])
    assert [r.identity_key for r in out] == ["x", "y"]
