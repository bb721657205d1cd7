"""
Display helpers built on top of a parsed Message.

Stable message identifiers, UTC dates, contact header splitting and a short
plain-text preview of the body.
"""

import hashlib
import quopri
import re
from datetime import timezone
from email.utils import parsedate_to_datetime
from typing import Dict, Optional

from .config import settings
from .models.message import Message, MessageSummary
from .parsing.content import html_to_text
from .parsing.mime_utils import decode_bytes, get_header, get_mime_type

EMAIL_PATTERN = re.compile(r"\b\S+@\S+\.\S\S+\b")


def _lookup(headers: Dict[str, str], name: str) -> str:
    """Case-insensitive header lookup, "" when absent."""
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return ""


def get_message_uuid(headers: Dict[str, str]) -> str:
    """
    Compute a deterministic message identifier.

    Args:
        headers: Top-level header mapping

    Returns:
        SHA-1 hex digest of Subject + Date + Message-ID
    """
    key = "".join(_lookup(headers, name) for name in ("Subject", "Date", "Message-ID"))
    return hashlib.sha1(key.encode("utf-8", errors="surrogatepass")).hexdigest()


def parse_date_to_utc_iso(value: Optional[str]) -> Optional[str]:
    """
    Convert an RFC 2822 date to a UTC ISO-8601 string.

    Args:
        value: Date header value

    Returns:
        ISO-8601 string, or None if the date cannot be parsed
    """
    if not value:
        return None
    try:
        date = parsedate_to_datetime(" ".join(value.split()))
    except (TypeError, ValueError):
        return None
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    return date.astimezone(timezone.utc).isoformat()


def remove_quoted_printables(text: str) -> str:
    """Decode quoted-printable escapes left in header text."""
    if not text:
        return ""
    return decode_bytes(quopri.decodestring(text.encode("utf-8", errors="surrogatepass")))


def get_name_from_contact_header(value: Optional[str]) -> str:
    """
    Extract the display name of a contact header ("Name <addr>").

    Args:
        value: From/To/Cc header value

    Returns:
        Display name without quotes, or "" if there is none
    """
    if not value:
        return ""
    name = value.replace("\n", "").split("<", 1)[0]
    name = name.strip().replace('"', "").replace("'", "")
    return remove_quoted_printables(name)


def get_email_from_contact_header(value: Optional[str]) -> str:
    """
    Extract all email addresses of a contact header.

    Args:
        value: From/To/Cc header value

    Returns:
        Addresses joined with ", ", or "" if there are none
    """
    if not value:
        return ""
    addresses = EMAIL_PATTERN.findall(value.replace("\n", ""))
    return remove_quoted_printables(", ".join(addresses))


def _preview(message: Message, limit: int) -> str:
    html_body = None
    for part in message.parts:
        mime_type = get_mime_type(get_header(part.headers, "Content-Type")).lower()
        if mime_type in ("", "text/plain") and part.body.strip():
            return " ".join(part.body.split())[:limit]
        if mime_type == "text/html" and html_body is None:
            html_body = part.body
    if html_body:
        return " ".join(html_to_text(html_body).split())[:limit]
    return ""


def summarize(message: Message, preview_chars: Optional[int] = None) -> MessageSummary:
    """
    Build a MessageSummary for a parsed message.

    Args:
        message: Parsed message
        preview_chars: Preview length (defaults to settings.summary_preview_chars)

    Returns:
        MessageSummary
    """
    limit = preview_chars if preview_chars is not None else settings.summary_preview_chars
    headers = message.headers
    return MessageSummary(
        uuid=get_message_uuid(headers),
        subject=_lookup(headers, "Subject"),
        date_utc=parse_date_to_utc_iso(_lookup(headers, "Date")),
        from_name=get_name_from_contact_header(_lookup(headers, "From")),
        from_email=get_email_from_contact_header(_lookup(headers, "From")),
        to_emails=get_email_from_contact_header(_lookup(headers, "To")),
        cc_emails=get_email_from_contact_header(_lookup(headers, "Cc")),
        preview=_preview(message, limit),
        part_count=len(message.parts),
        mime_types=[
            get_mime_type(get_header(part.headers, "Content-Type")) for part in message.parts
        ],
    )
