# Data models for the message parser

from .message import Message, MessagePart, MessageSummary
from .api_models import HealthResponse, ParseMessageResponse, VersionResponse

__all__ = [
    "Message",
    "MessagePart",
    "MessageSummary",
    "ParseMessageResponse",
    "HealthResponse",
    "VersionResponse",
]
