"""Pydantic schemas for backend responses."""

from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class StatusResponse(BaseModel):
    """Envelope every backend response carries."""
    model_config = ConfigDict(extra='allow')

    status_code: int
    status_msg: Optional[str] = None


class ChunkAck(StatusResponse):
    """Acknowledgement of a non-final chunk."""
    upload_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices('upload_id', '$id', 'uploadId')
    )
    chunks_uploaded: int = Field(
        validation_alias=AliasChoices('chunks_uploaded', 'chunksUploaded')
    )
    chunks_total: Optional[int] = Field(
        default=None, validation_alias=AliasChoices('chunks_total', 'chunksTotal')
    )
    size_uploaded: int = Field(
        validation_alias=AliasChoices('size_uploaded', 'sizeUploaded')
    )
