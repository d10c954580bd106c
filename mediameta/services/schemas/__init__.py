from mediameta.services.schemas.metadata import (
    ProjectionKeySchema,
    ProjectionEntrySchema,
    EntityProjectionSchema,
    StreamProjectionSchema,
    MediaMetadataProjection,
    DecodeErrorDetail,
    DecodeErrorSchema,
)
__all__ = [
    "ProjectionKeySchema",
    "ProjectionEntrySchema",
    "EntityProjectionSchema",
    "StreamProjectionSchema",
    "MediaMetadataProjection",
    "DecodeErrorDetail",
    "DecodeErrorSchema",
]
