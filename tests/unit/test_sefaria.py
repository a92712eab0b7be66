"""Unit tests for the Sefaria source-text provider and HTML conversion."""

import httpx
import pytest

from passage_search.errors import FetchFailure
from passage_search.sources.converter import html_to_markdown
from passage_search.sources.sefaria import SefariaSource

API = "https://sefaria.test/api/v3/texts/"


def _source(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SefariaSource(client=client, api_url=API, version="english")


class TestConverter:
    def test_strips_markup(self):
        md = html_to_markdown("<b>In</b> the beginning")
        assert "<b>" not in md
        assert "In" in md and "the beginning" in md

    def test_drops_footnotes(self):
        md = html_to_markdown(
            'God said<sup class="footnote-marker">*</sup>'
            '<i class="footnote">Or <b>spoke</b>.</i>, let there be light'
        )
        assert md == "God said, let there be light"

    def test_keeps_plain_emphasis(self):
        assert html_to_markdown("<i>and void</i>") == "*and void*"

    def test_empty(self):
        assert html_to_markdown("") == ""
        assert html_to_markdown("   ") == ""


@pytest.mark.asyncio
async def test_fetch_flattens_nested_segments():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["version"] = request.url.params.get("version")
        return httpx.Response(200, json={"versions": [{"text": [
            "In the beginning God created the heaven and the earth.",
            ["And the earth was without form,", "<i>and void</i>"],
        ]}]})

    text = await _source(handler).fetch_text("Genesis 1:1-2")

    assert seen["url"].startswith(API + "Genesis")
    assert seen["version"] == "english"
    assert text.splitlines()[0] == "In the beginning God created the heaven and the earth."
    assert "And the earth was without form," in text
    assert "and void" in text
    assert "<i>" not in text


@pytest.mark.asyncio
async def test_fetch_plain_string_text():
    def handler(request):
        return httpx.Response(200, json={"versions": [{"text": "Single segment"}]})

    assert await _source(handler).fetch_text("Genesis 1:1") == "Single segment"


@pytest.mark.asyncio
async def test_http_error_raises_fetch_failure():
    def handler(request):
        return httpx.Response(404, json={"error": "not found"})

    with pytest.raises(FetchFailure):
        await _source(handler).fetch_text("Nowhere 1:1")


@pytest.mark.asyncio
async def test_missing_versions_raises_fetch_failure():
    def handler(request):
        return httpx.Response(200, json={"versions": []})

    with pytest.raises(FetchFailure):
        await _source(handler).fetch_text("Genesis 1:1")


@pytest.mark.asyncio
async def test_empty_text_raises_fetch_failure():
    def handler(request):
        return httpx.Response(200, json={"versions": [{"text": ["", []]}]})

    with pytest.raises(FetchFailure):
        await _source(handler).fetch_text("Genesis 1:1")


@pytest.mark.asyncio
async def test_network_error_raises_fetch_failure():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(FetchFailure):
        await _source(handler).fetch_text("Genesis 1:1")
