"""
Content-transfer decoding and HTML body normalization for message parts.
"""

import re
from typing import Dict

import html2text

from .mime_utils import decode_quoted_printable, get_content_charset, get_header

SOFT_BREAK_PATTERN = re.compile(r"=\n|\n|=$")
WHITESPACE_PATTERN = re.compile(r"\s+")
HTML_CLOSE_TAG = "</html>"


def flatten_html(html: str) -> str:
    """
    Flatten an HTML body to one line.

    Soft line breaks and newlines are removed, whitespace runs collapse to a
    single space and anything after the last closing html tag is dropped.

    Args:
        html: HTML body

    Returns:
        Flattened HTML
    """
    text = SOFT_BREAK_PATTERN.sub("", html)
    text = WHITESPACE_PATTERN.sub(" ", text)
    close_at = text.lower().rfind(HTML_CLOSE_TAG)
    if close_at != -1:
        text = text[: close_at + len(HTML_CLOSE_TAG)]
    return text


def transform_content(body: str, headers: Dict[str, str]) -> str:
    """
    Apply content-transfer decoding and HTML normalization to a part body.

    Quoted-printable decoding runs first, then HTML flattening; either step is
    skipped when its header does not call for it.

    Args:
        body: Raw part body
        headers: Part headers

    Returns:
        Transformed body
    """
    content_type = get_header(headers, "Content-Type") or ""
    encoding = get_header(headers, "Content-Transfer-Encoding") or ""

    if encoding.strip().lower() == "quoted-printable":
        body = decode_quoted_printable(body, get_content_charset(content_type))

    if content_type.lower().startswith("text/html"):
        body = flatten_html(body)

    return body


def html_to_text(html: str, preserve_links: bool = False) -> str:
    """
    Convert an HTML body to plain text.

    Args:
        html: HTML content
        preserve_links: Whether to keep links as markdown [text](url)

    Returns:
        Plain text representation
    """
    if not html:
        return ""

    h = html2text.HTML2Text()
    h.ignore_links = not preserve_links
    h.ignore_images = True
    h.ignore_emphasis = True
    h.body_width = 0  # Don't wrap lines
    h.unicode_snob = True

    return h.handle(html).strip()
