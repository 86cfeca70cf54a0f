"""Rebuild a linear conversation from the parent links of a Dify message export."""

from __future__ import annotations

import logging
from typing import Sequence

from .errors import CycleDetectedError, NotFoundError
from .models import Message

logger = logging.getLogger(__name__)


def build_message_index(messages: Sequence[Message]) -> dict[str, Message]:
    """Map message ids to messages. A repeated id keeps its last occurrence."""
    index: dict[str, Message] = {}
    for msg in messages:
        if msg.id in index:
            logger.debug("Duplicate message id %s, keeping last occurrence", msg.id)
        index[msg.id] = msg
    return index


def find_conversation_chain(
    messages: Sequence[Message],
    start_message_id: str | None = None,
) -> list[Message]:
    """Walk from the start message back to the root via parent links.

    The start message is the one named by ``start_message_id``, or the last
    entry of ``messages`` when no id is given. Returns messages root-first.

    Raises NotFoundError if ``start_message_id`` is not in the export, and
    CycleDetectedError if the parent links loop back on themselves.
    """
    if not messages:
        return []

    index = build_message_index(messages)

    start_id = (start_message_id or "").strip()
    if start_id:
        current = index.get(start_id)
        if current is None:
            raise NotFoundError(start_id)
    else:
        current = messages[-1]

    chain: list[Message] = []
    visited: set[str] = set()

    while current is not None:
        if current.id in visited:
            logger.warning("Circular reference detected at message %s", current.id)
            raise CycleDetectedError(current.id)
        visited.add(current.id)
        chain.append(current)

        parent_id = current.parent_message_id
        current = index.get(parent_id) if parent_id else None

    chain.reverse()
    return chain
