"""Data models for chat export messages."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Message(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    parent_message_id: str | None = None
    query: str | None = None
    answer: str | None = None


class ConversionResult(BaseModel):
    markdown: str
    count: int
