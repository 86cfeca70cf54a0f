"""dify2md — Convert Dify chat history exports to Markdown."""

__version__ = "0.1.0"

from .converter import convert
from .errors import ConversionError

__all__ = ["__version__", "convert", "ConversionError"]
