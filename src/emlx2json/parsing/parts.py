"""
Splitting a message body into MIME parts and decoding each part.

Only one level of multipart is decoded: boundaries of nested sections are part
of the same boundary set, so nested containers come out as flat siblings.
"""

from typing import List, Optional

from ..models.message import MessagePart
from .content import transform_content
from .headers import parse_header_block
from .normalizer import BLANK_LINE


def split_parts(body: str, boundaries: List[str]) -> List[str]:
    """
    Cut the body into raw segments at boundary lines.

    Boundary lines are discarded. A line equal to the previous line kept in the
    same segment is skipped; some encoders emit such duplicates.

    Args:
        body: Message body
        boundaries: Boundary tokens, see resolve_boundaries()

    Returns:
        Raw segments; the first one holds any preamble
    """
    if not boundaries:
        return [body.strip()]

    segments: List[List[str]] = [[]]

    for line in body.split("\n"):
        if any(boundary in line for boundary in boundaries):
            segments.append([])
            continue

        current = segments[-1]
        if current and current[-1] == line:
            continue
        current.append(line)

    return ["\n".join(lines) for lines in segments]


def decode_part(segment: str) -> Optional[MessagePart]:
    """
    Decode one raw segment into a MessagePart.

    Args:
        segment: Raw segment from split_parts()

    Returns:
        MessagePart, or None when the segment has neither headers nor body
    """
    header_block, _, raw_body = segment.partition(BLANK_LINE)
    headers = parse_header_block(header_block, is_part=True)
    part = MessagePart(headers=headers, body=transform_content(raw_body, headers))
    if part.is_empty():
        return None
    return part


def parse_parts(body: str, boundaries: List[str]) -> List[MessagePart]:
    """
    Decode the message body into its list of parts.

    Args:
        body: Message body
        boundaries: Boundary tokens, see resolve_boundaries()

    Returns:
        Parts in source order. Without boundaries, a single part holding the
        whole trimmed body.
    """
    if not boundaries:
        return [MessagePart(headers={}, body=body.strip())]

    parts = []
    for segment in split_parts(body, boundaries):
        part = decode_part(segment)
        if part is not None:
            parts.append(part)
    return parts
