"""
emlx2json - decompose Apple Mail .emlx messages into headers and body parts.
"""

from .models.message import Message, MessagePart, MessageSummary
from .parsing import parse, parse_bytes, parse_file, parse_file_async
from .summary import summarize
from .version import __version__

__all__ = [
    "parse",
    "parse_bytes",
    "parse_file",
    "parse_file_async",
    "summarize",
    "Message",
    "MessagePart",
    "MessageSummary",
    "__version__",
]
