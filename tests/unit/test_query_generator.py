"""Unit tests for the query generator."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from passage_search.errors import EmptyQueries, GenerationFailure
from passage_search.llm.query_generator import QueryGenerator, build_prompt, parse_queries
from passage_search.providers.base import ProviderName


def _mock_openai(mock_cls, content=None, error=None):
    mock_client = MagicMock()
    mock_cls.return_value = mock_client
    if error is not None:
        mock_client.chat.completions.create = AsyncMock(side_effect=error)
    else:
        msg = MagicMock()
        msg.content = content
        choice = MagicMock()
        choice.message = msg
        resp = MagicMock()
        resp.choices = [choice]
        mock_client.chat.completions.create = AsyncMock(return_value=resp)
    return mock_client


class TestParseQueries:
    def test_trims_and_splits(self):
        assert parse_queries("find X; find Y ;find Z") == ["find X", "find Y", "find Z"]

    def test_only_separators(self):
        assert parse_queries(";;") == []

    def test_drops_blank_segments(self):
        assert parse_queries("  a ;  ; b;\n") == ["a", "b"]

    def test_single_query_without_separator(self):
        assert parse_queries("creation narrative") == ["creation narrative"]


def test_prompt_names_provider_and_embeds_text():
    prompt = build_prompt(ProviderName.VIDEO, "In the beginning", audience="a student of")
    assert "YouTube" in prompt
    assert "In the beginning" in prompt
    assert "a student of the following passage" in prompt
    assert '";"' in prompt


@pytest.mark.asyncio
async def test_generate_returns_parsed_queries():
    with patch("passage_search.llm.base.AsyncOpenAI") as mock_cls:
        client = _mock_openai(mock_cls, content=" find X; find Y ;find Z ")
        gen = QueryGenerator(model="test-model")
        queries = await gen.generate(ProviderName.ENCYCLOPEDIA, "Some passage")

    assert queries == ["find X", "find Y", "find Z"]
    kwargs = client.chat.completions.create.await_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["n"] == 1
    assert "Wikipedia" in kwargs["messages"][0]["content"]
    assert "Some passage" in kwargs["messages"][0]["content"]


@pytest.mark.asyncio
async def test_empty_reply_raises_empty_queries():
    with patch("passage_search.llm.base.AsyncOpenAI") as mock_cls:
        _mock_openai(mock_cls, content=";;")
        gen = QueryGenerator()
        with pytest.raises(EmptyQueries):
            await gen.generate(ProviderName.VIDEO, "Some passage")


@pytest.mark.asyncio
async def test_api_error_raises_generation_failure():
    with patch("passage_search.llm.base.AsyncOpenAI") as mock_cls:
        _mock_openai(mock_cls, error=RuntimeError("503 Service Unavailable"))
        gen = QueryGenerator()
        with pytest.raises(GenerationFailure) as info:
            await gen.generate(ProviderName.VIDEO, "Some passage")
    assert not isinstance(info.value, EmptyQueries)


@pytest.mark.asyncio
async def test_missing_content_raises_generation_failure():
    with patch("passage_search.llm.base.AsyncOpenAI") as mock_cls:
        _mock_openai(mock_cls, content=None)
        gen = QueryGenerator()
        with pytest.raises(GenerationFailure):
            await gen.generate(ProviderName.ENCYCLOPEDIA, "Some passage")


@pytest.mark.asyncio
async def test_blank_source_text_rejected():
    with patch("passage_search.llm.base.AsyncOpenAI"):
        gen = QueryGenerator()
        with pytest.raises(ValueError):
            await gen.generate(ProviderName.ENCYCLOPEDIA, "   ")


@pytest.mark.asyncio
async def test_empty_string_reply_raises_generation_failure():
    with patch("passage_search.llm.base.AsyncOpenAI") as mock_cls:
        _mock_openai(mock_cls, content="")
        gen = QueryGenerator()
        with pytest.raises(GenerationFailure) as info:
            await gen.generate(ProviderName.VIDEO, "Some passage")
    assert not isinstance(info.value, EmptyQueries)
