# Message parsing module

from .boundaries import get_header_boundary, resolve_boundaries, scan_body_boundaries
from .content import flatten_html, html_to_text, transform_content
from .emlx_parser import (
    parse,
    parse_bytes,
    parse_file,
    parse_file_async,
    read_message_text,
)
from .headers import (
    HeaderSpan,
    decode_subject,
    parse_header_block,
    scan_header_keys,
    slice_header_values,
)
from .mime_utils import (
    decode_encoded_words,
    decode_quoted_printable,
    get_content_charset,
    get_header,
    get_mime_type,
)
from .normalizer import normalize_line_endings, split_header_body, strip_trailing_footer
from .parts import decode_part, parse_parts, split_parts

__all__ = [
    "parse",
    "parse_bytes",
    "parse_file",
    "parse_file_async",
    "read_message_text",
    "normalize_line_endings",
    "split_header_body",
    "strip_trailing_footer",
    "scan_header_keys",
    "slice_header_values",
    "parse_header_block",
    "decode_subject",
    "HeaderSpan",
    "get_header_boundary",
    "scan_body_boundaries",
    "resolve_boundaries",
    "split_parts",
    "decode_part",
    "parse_parts",
    "transform_content",
    "flatten_html",
    "html_to_text",
    "decode_encoded_words",
    "decode_quoted_printable",
    "get_content_charset",
    "get_header",
    "get_mime_type",
]
