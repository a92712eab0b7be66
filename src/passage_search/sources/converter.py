"""Source segment HTML to Markdown.

Sefaria segments carry inline footnotes as ``<sup class="footnote-marker">``
followed by ``<i class="footnote">``; both are dropped so only the passage
itself reaches the query prompt.
"""

import re

from markdownify import ATX, MarkdownConverter


def _is_footnote(el) -> bool:
    return any(c.startswith("footnote") for c in el.get("class") or [])


class SegmentConverter(MarkdownConverter):
    def convert_i(self, el, text, *args, **kwargs):
        if _is_footnote(el):
            return ""
        return super().convert_i(el, text, *args, **kwargs)

    def convert_sup(self, el, text, *args, **kwargs):
        if _is_footnote(el):
            return ""
        return super().convert_sup(el, text, *args, **kwargs)


_converter = SegmentConverter(
    heading_style=ATX,
    strip=["img", "script", "style"],
    escape_asterisks=False,
    escape_underscores=False,
)


def html_to_markdown(html: str) -> str:
    """Convert one source segment to Markdown, without footnotes."""
    if not html or not html.strip():
        return ""
    md = _converter.convert(html)
    md = re.sub(r"[ \t]+\n", "\n", md)
    return re.sub(r"\n{3,}", "\n\n", md).strip()
