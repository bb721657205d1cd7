"""
Message parse endpoint.
"""

from pathlib import PurePath
from fastapi import APIRouter, File, HTTPException, Query, UploadFile
import structlog

from ...config import settings
from ...models.api_models import ParseMessageResponse
from ...parsing import parse_bytes
from ...summary import summarize

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post("/message", response_model=ParseMessageResponse)
async def parse_message_file(
    file: UploadFile = File(..., description=".emlx or .eml file to parse"),
    include_summary: bool = Query(default=False, description="Whether to attach a summary"),
) -> ParseMessageResponse:
    """
    Parse an uploaded message file into headers and body parts.

    Args:
        file: Uploaded .emlx/.eml file
        include_summary: Whether to include a MessageSummary

    Returns:
        ParseMessageResponse with the parsed Message or an error
    """
    suffix = PurePath(file.filename or "").suffix.lower()
    if suffix not in settings.extension_list():
        raise HTTPException(
            status_code=400,
            detail=f"File must be one of: {settings.allowed_extensions}",
        )

    raw = await file.read()

    size_mb = len(raw) / (1024 * 1024)
    if size_mb > settings.max_message_size_mb:
        raise HTTPException(
            status_code=413,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum ({settings.max_message_size_mb}MB)",
        )

    logger.info("Parsing message", filename=file.filename, size_bytes=len(raw))

    try:
        message = parse_bytes(raw)
        summary = summarize(message) if include_summary else None
    except Exception as e:
        logger.error(
            "Message parsing failed",
            error=str(e),
            filename=file.filename,
            exc_info=True,
        )
        return ParseMessageResponse(success=False, error=f"Parsing failed: {str(e)}")

    logger.info(
        "Message parsed",
        filename=file.filename,
        headers_count=len(message.headers),
        parts_count=len(message.parts),
    )
    return ParseMessageResponse(success=True, message=message, summary=summary)
