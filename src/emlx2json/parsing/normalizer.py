"""
Line normalization and header/body splitting.

Apple Mail stores messages with CRLF or LF endings and, in .emlx files, an XML
plist footer after the message. Both are normalized away here before any
header or part parsing happens.
"""

import re
from typing import Tuple

BLANK_LINE = "\n\n"

# Opener of the plist footer: "<?xml " or a bare "xml "
FOOTER_PATTERN = re.compile(r"(?:<\?)?xml ")


def normalize_line_endings(text: str) -> str:
    """
    Collapse CRLF line terminators to LF.

    Args:
        text: Raw message text

    Returns:
        Text using only "\\n" as line terminator
    """
    return text.replace("\r\n", "\n")


def strip_trailing_footer(body: str) -> str:
    """
    Drop the XML footer (and everything after it) and trailing whitespace.

    Args:
        body: Message body text

    Returns:
        Body without footer, right-stripped
    """
    match = FOOTER_PATTERN.search(body)
    if match:
        body = body[: match.start()]
    return body.rstrip()


def split_header_body(text: str) -> Tuple[str, str]:
    """
    Split normalized text at its first blank line.

    The body starts right where the header block ends, so it keeps its leading
    blank line and every later blank line verbatim.

    Args:
        text: Text with "\\n" line terminators

    Returns:
        Tuple of (header_block, body). Without a blank line the whole text is
        the header block and the body is empty.
    """
    header_block = text.split(BLANK_LINE, 1)[0]
    body = strip_trailing_footer(text[len(header_block):])
    return header_block, body
