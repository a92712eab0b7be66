"""Sources module -- source-text fetching and HTML conversion."""

from passage_search.sources.converter import html_to_markdown
from passage_search.sources.sefaria import SefariaSource

__all__ = ["SefariaSource", "html_to_markdown"]
