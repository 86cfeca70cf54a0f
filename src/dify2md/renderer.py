"""Minimal Markdown to HTML preview for converted transcripts.

Only the subset the formatter emits is understood: ``#`` and ``##`` headings,
``**bold**`` spans, and paragraphs separated by blank lines. Anything else
(lists, code fences, links, emphasis with single ``*``) passes through as
escaped paragraph text. This is not a general Markdown parser.
"""

from __future__ import annotations

import html
import re

_BLANK_LINE = re.compile(r"\n[ \t]*\n")
_HEADING = re.compile(r"^(#{1,2}) (.*\S.*)$")
_BOLD = re.compile(r"\*\*(.+?)\*\*")


def _inline(text: str) -> str:
    return _BOLD.sub(r"<strong>\1</strong>", text)


def _flush_paragraph(lines: list[str], out: list[str]) -> None:
    if lines:
        out.append("<p>" + "<br>\n".join(lines) + "</p>")
        lines.clear()


def markdown_to_html(markdown: str) -> str:
    """Render transcript Markdown as an HTML fragment, one block per line."""
    text = html.escape(markdown.replace("\r\n", "\n"), quote=False)
    out: list[str] = []

    for block in _BLANK_LINE.split(text):
        paragraph: list[str] = []
        for line in block.split("\n"):
            heading = _HEADING.match(line)
            if heading:
                _flush_paragraph(paragraph, out)
                level = len(heading.group(1))
                out.append(f"<h{level}>{_inline(heading.group(2).strip())}</h{level}>")
            elif line.strip():
                paragraph.append(_inline(line.strip()))
        _flush_paragraph(paragraph, out)

    return "\n".join(out)
