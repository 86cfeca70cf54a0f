"""Errors raised while converting a chat export."""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for a failed conversion. The message is shown to the user."""


class EmptyInputError(ConversionError):
    def __init__(self) -> None:
        super().__init__("Please enter JSON data")


class ParseError(ConversionError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"JSON parsing error: {detail}")


class SchemaError(ConversionError):
    pass


class NotFoundError(ConversionError):
    def __init__(self, message_id: str) -> None:
        self.message_id = message_id
        super().__init__(f'Message with ID "{message_id}" not found')


class CycleDetectedError(ConversionError):
    def __init__(self, message_id: str) -> None:
        self.message_id = message_id
        super().__init__(
            f'Circular parent reference detected at message "{message_id}"'
        )


class EmptyChainError(ConversionError):
    def __init__(self) -> None:
        super().__init__("Unable to build valid conversation chain")
