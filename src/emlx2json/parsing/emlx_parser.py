"""
Message parser for Apple Mail .emlx (and plain .eml) files.

parse() is a pure function from message text to Message; it never raises on
malformed input and degrades to empty or partial structures instead. Only the
file-reading helpers can fail, with the usual OSError family.
"""

import asyncio
from pathlib import Path
from typing import Union

import structlog

from ..models.message import Message
from .boundaries import resolve_boundaries
from .headers import parse_header_block
from .mime_utils import decode_bytes
from .normalizer import normalize_line_endings, split_header_body
from .parts import parse_parts

logger = structlog.get_logger(__name__)

PathLike = Union[str, Path]


def parse(raw_text: str) -> Message:
    """
    Decompose a raw message into its headers and body parts.

    Args:
        raw_text: Complete message text

    Returns:
        Parsed Message
    """
    text = normalize_line_endings(raw_text)
    header_block, body = split_header_body(text)
    headers = parse_header_block(header_block)
    boundaries = resolve_boundaries(headers, body)
    parts = parse_parts(body, boundaries)

    logger.debug(
        "message_parsed",
        headers_count=len(headers),
        boundaries_count=len(boundaries),
        parts_count=len(parts),
    )
    return Message(headers=headers, parts=parts)


def parse_bytes(raw: bytes) -> Message:
    """
    Decode raw message bytes and parse them.

    Args:
        raw: Message file bytes

    Returns:
        Parsed Message
    """
    return parse(decode_bytes(raw))


def read_message_text(path: PathLike) -> str:
    """
    Read a message file as text.

    Args:
        path: Path to .emlx/.eml file

    Returns:
        Decoded file content

    Raises:
        FileNotFoundError: If file doesn't exist
        OSError: On any other read failure
    """
    with open(path, "rb") as f:
        raw = f.read()
    return decode_bytes(raw)


def parse_file(path: PathLike) -> Message:
    """
    Parse a message file.

    Args:
        path: Path to .emlx/.eml file

    Returns:
        Parsed Message

    Raises:
        FileNotFoundError: If file doesn't exist
        OSError: On any other read failure
    """
    return parse(read_message_text(path))


async def parse_file_async(path: PathLike) -> Message:
    """
    Parse a message file, reading it in a worker thread.

    Args:
        path: Path to .emlx/.eml file

    Returns:
        Parsed Message

    Raises:
        FileNotFoundError: If file doesn't exist
        OSError: On any other read failure
    """
    text = await asyncio.to_thread(read_message_text, path)
    return parse(text)
