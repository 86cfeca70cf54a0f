"""Conversion pipeline: JSON text → messages → conversation chain → Markdown."""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from .config import DEFAULT_AI_LABEL, DEFAULT_TITLE, DEFAULT_USER_LABEL, MESSAGES_FIELD
from .errors import EmptyChainError, EmptyInputError, ParseError, SchemaError
from .formatter import assemble_markdown
from .models import ConversionResult, Message
from .parser import find_conversation_chain

logger = logging.getLogger(__name__)


def load_messages(records: list[Any]) -> list[Message]:
    """Validate raw message records, skipping the ones that are malformed."""
    messages: list[Message] = []

    for position, record in enumerate(records):
        try:
            messages.append(Message.model_validate(record))
        except ValidationError:
            logger.warning(
                "Skipping malformed message record at position %d", position, exc_info=True
            )

    return messages


def _extract_records(raw_json: str) -> list[Any]:
    if not raw_json or not raw_json.strip():
        raise EmptyInputError()

    try:
        data = json.loads(raw_json)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise ParseError(str(exc)) from exc

    records = data.get(MESSAGES_FIELD) if isinstance(data, dict) else None
    if not isinstance(records, list):
        raise SchemaError(f"JSON format error: missing {MESSAGES_FIELD} array")
    if not records:
        raise SchemaError("No chat messages found")

    return records


def convert(
    raw_json: str,
    user_label: str | None = DEFAULT_USER_LABEL,
    ai_label: str | None = DEFAULT_AI_LABEL,
    start_message_id: str | None = None,
    title: str | None = DEFAULT_TITLE,
) -> ConversionResult:
    """Convert a Dify chat export to a Markdown transcript.

    Blank labels or title fall back to their defaults. The conversation is
    traced back from ``start_message_id``, or from the last message in the
    export when it is not given.

    Raises a ConversionError subclass describing the first problem found.
    """
    records = _extract_records(raw_json)
    messages = load_messages(records)
    logger.debug("Loaded %d of %d message records", len(messages), len(records))

    chain = find_conversation_chain(messages, start_message_id)
    if not chain:
        raise EmptyChainError()

    markdown = assemble_markdown(
        chain,
        user_label=(user_label or "").strip() or DEFAULT_USER_LABEL,
        ai_label=(ai_label or "").strip() or DEFAULT_AI_LABEL,
        title=(title or "").strip() or DEFAULT_TITLE,
    )
    logger.info("Converted conversation of %d messages", len(chain))

    return ConversionResult(markdown=markdown, count=len(chain))
