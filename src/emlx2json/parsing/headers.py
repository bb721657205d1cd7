"""
Header block scanning and positional key/value slicing.

Header values are not parsed field by field. Instead the field names present in
a block are found first, then each value is the text between its field name
and the next one. Folded continuation lines therefore stay with the field they
belong to.
"""

import re
from dataclasses import dataclass
from typing import Dict, List

import structlog

from .mime_utils import decode_encoded_words, has_encoded_words

logger = structlog.get_logger(__name__)

# Top-level fields: capitalized token up to the first colon on the line
MESSAGE_KEY_PATTERN = re.compile(r"^([A-Z][A-Za-z-]+.*?):", re.MULTILINE)

# Body-part fields: only Content-* lines, preamble text above them is ignored
PART_KEY_PATTERN = re.compile(r"^(Content-+.*?):", re.MULTILINE)


@dataclass(frozen=True)
class HeaderSpan:
    """Slice of a header block attributed to one field."""

    key: str
    start: int
    end: int
    value: str


def scan_header_keys(block: str, is_part: bool = False) -> List[str]:
    """
    Find the distinct field names in a header block, in order of appearance.

    Args:
        block: Header block text
        is_part: Scan a body-part header block (Content-* fields only)

    Returns:
        Deduplicated list of field names (empty if none match)
    """
    pattern = PART_KEY_PATTERN if is_part else MESSAGE_KEY_PATTERN
    return list(dict.fromkeys(pattern.findall(block)))


def _key_pattern(key: str) -> "re.Pattern[str]":
    return re.compile(r"(?:^|\n)" + re.escape(key) + ":")


def decode_subject(value: str) -> str:
    """
    Decode a Subject value that may be folded over several encoded-word lines.

    Lines holding encoded words are decoded and left-stripped; other lines are
    kept verbatim. Lines are joined without separator.

    Args:
        value: Raw Subject value

    Returns:
        Decoded subject
    """
    decoded = []
    for line in value.split("\n"):
        if has_encoded_words(line):
            decoded.append(decode_encoded_words(line.strip()))
        else:
            decoded.append(line)
    return "".join(decoded)


def _clean_value(key: str, chunk: str) -> str:
    value = chunk.lstrip("\n")
    value = value[len(key) + 1:]  # drop "key:"
    value = value.strip()
    if value.endswith(";"):
        value = value[:-1].rstrip()
    return value


def slice_header_values(keys: List[str], block: str) -> List[HeaderSpan]:
    """
    Derive each key's value by slicing the block between successive keys.

    A span starts at the key's first occurrence at line start (including the
    newline before it) and ends where the next key's span starts, or at the end
    of the block. Keys that cannot be located are skipped.

    Args:
        keys: Ordered field names, as returned by scan_header_keys()
        block: Header block the keys were scanned from

    Returns:
        List of HeaderSpan in block order
    """
    located = []
    for key in keys:
        match = _key_pattern(key).search(block)
        if match is None:
            logger.debug("header_key_missing", key=key)
            continue
        located.append((key, match.start()))

    spans = []
    for index, (key, start) in enumerate(located):
        end = located[index + 1][1] if index + 1 < len(located) else len(block)
        end = max(end, start)
        value = _clean_value(key, block[start:end])
        if key.lower() == "subject":
            value = decode_subject(value)
        spans.append(HeaderSpan(key=key, start=start, end=end, value=value))
    return spans


def parse_header_block(block: str, is_part: bool = False) -> Dict[str, str]:
    """
    Scan and slice a header block into a field mapping.

    Args:
        block: Header block text
        is_part: Parse a body-part header block

    Returns:
        Dict of field name to value, in block order
    """
    keys = scan_header_keys(block, is_part=is_part)
    return {span.key: span.value for span in slice_header_values(keys, block)}
