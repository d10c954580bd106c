# services/schemas/metadata.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ProjectionKeySchema(BaseModel):
    id: str = Field(..., description="ffprobe field name", examples=["bit_rate"])
    index: int = Field(..., ge=0, description="Declaration (display) order")
    label: str = Field(..., examples=["Bit rate"])


class ProjectionEntrySchema(ProjectionKeySchema):
    value: str = Field(..., examples=["198.1 KB"])


class EntityProjectionSchema(BaseModel):
    entries: List[ProjectionEntrySchema] = Field(default_factory=list)
    tags: Optional[List[ProjectionEntrySchema]] = None


class StreamProjectionSchema(EntityProjectionSchema):
    kind: Optional[str] = Field(None, examples=["video", "audio"])


class MediaMetadataProjection(BaseModel):
    file_name: Optional[str] = None
    format: EntityProjectionSchema
    streams: List[StreamProjectionSchema] = Field(default_factory=list)


class DecodeErrorDetail(BaseModel):
    message: str
    path: Optional[str] = Field(None, examples=["streams[0]"])


class DecodeErrorSchema(BaseModel):
    detail: DecodeErrorDetail
