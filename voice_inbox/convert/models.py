"""Pydantic models for transcription conversion.

Request, response and frontmatter shapes for the /convert endpoint and the
health check. Wire field names follow the iOS Shortcut client, which reads
`noteContent` in camelCase.
"""

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, JsonValue

DEFAULT_SOURCE = "superwhisper"
SERVICE_NAME = "voice-inbox-server"
TEMPLATE_VERSION = 1


class ConvertRequest(BaseModel):
    """A validated convert request.

    Attributes:
        text: Transcribed text, already trimmed and guaranteed non-empty
        source: Dictation source recorded in the frontmatter, kept as the client sent it
    """

    text: str = Field(..., min_length=1, description="Trimmed transcription text")
    source: JsonValue = Field(default=DEFAULT_SOURCE, description="Dictation app or device")


class NoteFrontmatter(BaseModel):
    """YAML frontmatter for a transcription note.

    Field order is the order the keys appear in the note.

    Example frontmatter:
        ---
        type: transcription
        created: 2026-01-28
        source: superwhisper
        template_version: 1
        areas: []
        projects: []
        summary: ""
        ---
    """

    type: Literal["transcription"] = "transcription"
    created: date
    source: JsonValue = DEFAULT_SOURCE
    template_version: int = TEMPLATE_VERSION
    areas: list[str] = Field(default_factory=list)
    projects: list[str] = Field(default_factory=list)
    summary: str = ""

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to an ordered dictionary suitable for YAML frontmatter.

        `created` stays a `date` so YAML writes it unquoted.
        """
        return self.model_dump()


class ConvertSuccess(BaseModel):
    """Successful conversion."""

    model_config = ConfigDict(populate_by_name=True)

    success: Literal[True] = True
    note_content: str = Field(..., alias="noteContent")
    filename: str


class ConvertFailure(BaseModel):
    """Rejected or failed conversion."""

    success: Literal[False] = False
    error: str


ConvertResult = ConvertSuccess | ConvertFailure


class NotFoundResponse(ConvertFailure):
    """Body returned for unknown routes."""

    error: str = "Not found"


class HealthResponse(BaseModel):
    """Health check body."""

    status: Literal["ok"] = "ok"
    service: str = SERVICE_NAME
    timestamp: str
