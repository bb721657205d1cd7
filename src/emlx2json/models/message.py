"""
Message model - structured representation of a decomposed email message.

A Message is the output of the parser: the top-level header fields, exactly as
they appear in the source, plus the ordered list of body parts.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class MessagePart(BaseModel):
    """One body part with its local headers and decoded body."""

    headers: Dict[str, str] = Field(
        default_factory=dict, description="Part headers (Content-* fields)"
    )
    body: str = Field(default="", description="Decoded body text")

    model_config = {"frozen": True}

    def is_empty(self) -> bool:
        """True when the part carries neither headers nor body."""
        return not self.headers and not self.body


class Message(BaseModel):
    """
    Decomposed email message.

    Header names are case-sensitive and unique; a field repeated in the source
    keeps the name of its first occurrence.
    """

    headers: Dict[str, str] = Field(
        default_factory=dict, description="Top-level header fields"
    )
    parts: List[MessagePart] = Field(
        default_factory=list, description="Body parts in source order"
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "headers": {
                    "Subject": "Hi",
                    "Date": "Mon, 4 Mar 2013 10:12:01 +0100",
                    "Message-ID": "<1@example.com>",
                },
                "parts": [{"headers": {}, "body": "Body"}],
            }
        },
    }

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Look a top-level header up by its exact name."""
        return self.headers.get(name, default)

    def to_flat_dict(self) -> Dict[str, Any]:
        """
        Render the flat legacy shape: header fields at the top level next to a
        ``parts`` list.

        Returns:
            Dict with one entry per header plus ``parts``
        """
        flat: Dict[str, Any] = dict(self.headers)
        flat["parts"] = [part.model_dump() for part in self.parts]
        return flat


class MessageSummary(BaseModel):
    """Compact, display-oriented view of a Message."""

    uuid: str = Field(description="SHA-1 of Subject + Date + Message-ID")
    subject: str = Field(default="", description="Decoded subject")
    date_utc: Optional[str] = Field(None, description="Date header as UTC ISO-8601")
    from_name: str = Field(default="", description="Sender display name")
    from_email: str = Field(default="", description="Sender address(es)")
    to_emails: str = Field(default="", description="Recipient addresses")
    cc_emails: str = Field(default="", description="Carbon-copy addresses")
    preview: str = Field(default="", description="Plain-text preview of the body")
    part_count: int = Field(default=0, description="Number of decoded parts")
    mime_types: List[str] = Field(
        default_factory=list, description="Mime type of each part (empty if undeclared)"
    )

    model_config = {"frozen": True}
