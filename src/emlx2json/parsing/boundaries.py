"""
MIME boundary discovery.

Boundaries come from two places: the governing Content-Type header and any
"boundary=" declarations found in the body itself (nested multipart sections).
All of them are collected before the body is split.
"""

import re
from typing import Dict, List, Optional

from .mime_utils import get_header

HEADER_BOUNDARY_PATTERN = re.compile(
    r"boundary=(?:\"([^\"]*)\"|([^;\s]+))", re.IGNORECASE
)

# Declaration inside the body: whitespace, "boundary=", rest of the line
BODY_BOUNDARY_PATTERN = re.compile(r"\sboundary=(.*)")

# Quoted-printable turns "=" into "=3D", so a declaration can read
# boundary=3D"..." once the encoded body is read as text
QP_ARTIFACT_PATTERN = re.compile(r"^3D(?=\"|Apple)")


def get_header_boundary(headers: Dict[str, str]) -> Optional[str]:
    """
    Extract the boundary parameter of the message Content-Type header.

    Args:
        headers: Top-level header mapping

    Returns:
        Unquoted boundary, or None if there is none
    """
    content_type = get_header(headers, "Content-Type")
    if not content_type:
        return None
    match = HEADER_BOUNDARY_PATTERN.search(content_type)
    if not match:
        return None
    boundary = match.group(1) if match.group(1) is not None else match.group(2)
    return boundary or None


def _clean_body_boundary(raw: str) -> str:
    value = raw.split("<", 1)[0]
    value = QP_ARTIFACT_PATTERN.sub("", value.strip())
    value = value.replace('"', "").strip()
    if value.endswith(";"):
        value = value[:-1].rstrip()
    return value


def scan_body_boundaries(body: str) -> List[str]:
    """
    Collect boundaries declared inside the body text.

    Everything from the first "<" is discarded (HTML remnants), quotes are
    removed and a "3D" quoted-printable artifact in front of the value is
    undone. Empty values are dropped.

    Args:
        body: Message body

    Returns:
        Boundaries in order of appearance (may contain duplicates)
    """
    boundaries = []
    for match in BODY_BOUNDARY_PATTERN.finditer(body):
        value = _clean_body_boundary(match.group(1))
        if value:
            boundaries.append(value)
    return boundaries


def resolve_boundaries(headers: Dict[str, str], body: str) -> List[str]:
    """
    Build the boundary set for a message: header boundary first, then those
    declared in the body.

    Args:
        headers: Top-level header mapping
        body: Message body

    Returns:
        Deduplicated, order-preserving list of boundaries (possibly empty)
    """
    candidates = []
    header_boundary = get_header_boundary(headers)
    if header_boundary:
        candidates.append(header_boundary)
    candidates.extend(scan_body_boundaries(body))
    return list(dict.fromkeys(candidates))
