"""Format conversation messages as Markdown."""

from __future__ import annotations

from typing import Iterable

from .config import DEFAULT_TITLE
from .models import Message


def _format_block(label: str, content: str) -> str:
    return f"**{label}:**\n\n{content}"


def format_message(message: Message, user_label: str, ai_label: str) -> str:
    """Format one query/answer pair as up to two labeled blocks.

    Returns an empty string when both the query and the answer are blank.
    """
    parts: list[str] = []

    query = (message.query or "").strip()
    if query:
        parts.append(_format_block(user_label, query))

    answer = (message.answer or "").strip()
    if answer:
        parts.append(_format_block(ai_label, answer))

    return "\n\n".join(parts)


def assemble_markdown(
    chain: Iterable[Message],
    user_label: str,
    ai_label: str,
    title: str = DEFAULT_TITLE,
) -> str:
    """Join a title line and every non-empty message block with blank lines."""
    blocks = [f"# {title}"]
    for message in chain:
        formatted = format_message(message, user_label, ai_label)
        # Blank messages add no block, and no separator
        if formatted:
            blocks.append(formatted)
    return "\n\n".join(blocks)
