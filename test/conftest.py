"""Pytest configuration and shared fixtures."""

import json

import pytest

from dify2md.models import Message


@pytest.fixture
def linear_messages() -> list[Message]:
    """Three messages linked a -> b -> c."""
    return [
        Message(id="a", parent_message_id=None, query="first", answer="one"),
        Message(id="b", parent_message_id="a", query="second", answer="two"),
        Message(id="c", parent_message_id="b", query="third", answer="three"),
    ]


@pytest.fixture
def branched_export() -> str:
    """Export where b and c are both regenerated answers to a."""
    return json.dumps(
        {
            "limit": 100,
            "has_more": False,
            "data": [
                {
                    "id": "a",
                    "conversation_id": "conv-1",
                    "parent_message_id": None,
                    "query": "What is Dify?",
                    "answer": "An LLM app platform.",
                    "created_at": 1700000000,
                },
                {
                    "id": "b",
                    "conversation_id": "conv-1",
                    "parent_message_id": "a",
                    "query": "Is it open source?",
                    "answer": "Yes.",
                    "created_at": 1700000010,
                },
                {
                    "id": "c",
                    "conversation_id": "conv-1",
                    "parent_message_id": "a",
                    "query": "Is it open source?",
                    "answer": "Yes, under a modified Apache license.",
                    "created_at": 1700000020,
                },
            ],
        }
    )
