"""
MIME utility functions used by the message parser.

Encoded-word and quoted-printable decoding, plus small lookups on header
values. None of these raise on malformed input: undecodable text is returned
as-is or decoded with replacement characters.
"""

import quopri
import re
from email.errors import HeaderParseError
from email.header import decode_header, make_header
from typing import Dict, Optional

import charset_normalizer

ENCODED_WORD_PATTERN = re.compile(r"=\?[^?\s]+\?[QqBb]\?[^?]*\?=")
CHARSET_PATTERN = re.compile(r"charset\s*=\s*\"?([^\";\s]+)\"?", re.IGNORECASE)


def get_header(headers: Dict[str, str], name: str) -> Optional[str]:
    """
    Look up a header, falling back to the capitalize()-style case variant
    ("Content-type" for "Content-Type").

    Args:
        headers: Header mapping
        name: Canonical field name

    Returns:
        Header value or None
    """
    value = headers.get(name)
    if value is None:
        value = headers.get(name.capitalize())
    return value


def get_mime_type(content_type: Optional[str]) -> str:
    """
    Return the mime type of a Content-Type value (text before the first ';').

    Args:
        content_type: Content-Type header value

    Returns:
        Mime type, or "" when no value is given
    """
    if not content_type:
        return ""
    return content_type.split(";")[0].strip()


def get_content_charset(content_type: Optional[str]) -> Optional[str]:
    """
    Extract the charset parameter of a Content-Type value.

    Args:
        content_type: Content-Type header value

    Returns:
        Lowercased charset name or None
    """
    if not content_type:
        return None
    match = CHARSET_PATTERN.search(content_type)
    return match.group(1).lower() if match else None


def has_encoded_words(text: str) -> bool:
    """True if text contains at least one RFC 2047 encoded word."""
    return ENCODED_WORD_PATTERN.search(text) is not None


def decode_encoded_words(text: str) -> str:
    """
    Decode RFC 2047 encoded words (=?charset?Q|B?...?=) in a header value.

    Args:
        text: Header text possibly containing encoded words

    Returns:
        Decoded text; the input unchanged if it cannot be decoded
    """
    if not has_encoded_words(text):
        return text
    try:
        return str(make_header(decode_header(text)))
    except (HeaderParseError, LookupError, UnicodeDecodeError, ValueError):
        return text


def decode_bytes(payload: bytes, charset: Optional[str] = None) -> str:
    """
    Decode bytes to text handling various encodings.

    Args:
        payload: Raw bytes
        charset: Declared charset, if any

    Returns:
        Decoded string content
    """
    # Try declared charset first
    if charset:
        try:
            return payload.decode(charset)
        except (UnicodeDecodeError, LookupError):
            pass

    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError:
        pass

    # Try charset detection
    detected = charset_normalizer.from_bytes(payload).best()
    if detected:
        return str(detected)

    # Final fallback
    return payload.decode("utf-8", errors="replace")


def decode_quoted_printable(text: str, charset: Optional[str] = None) -> str:
    """
    Decode quoted-printable text (=XX escapes and '=' soft line breaks).

    Args:
        text: Quoted-printable encoded text
        charset: Charset of the decoded bytes (defaults to UTF-8)

    Returns:
        Decoded text
    """
    if not text:
        return ""
    raw = quopri.decodestring(text.encode("utf-8", errors="surrogatepass"))
    return decode_bytes(raw, charset)
