"""LLM module -- model-agnostic base wrapper and the query generator."""

from passage_search.llm.base import BaseLLM
from passage_search.llm.query_generator import QueryGenerator, parse_queries

__all__ = ["BaseLLM", "QueryGenerator", "parse_queries"]
