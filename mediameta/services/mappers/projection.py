# mediameta/services/mappers/projection.py
from __future__ import annotations

from typing import List, Optional, Type

from mediameta.common.localization import FormatContext
from mediameta.domain.entities.media_metadata import MediaMetadata
from mediameta.domain.entities.stream import StreamMetadata
from mediameta.domain.ports.projection import ProjectableMixin, ProjectionKey
from mediameta.services.schemas.metadata import (
    EntityProjectionSchema,
    MediaMetadataProjection,
    ProjectionEntrySchema,
    ProjectionKeySchema,
    StreamProjectionSchema,
)


def to_key_schemas(keys: Type[ProjectionKey], context: FormatContext) -> List[ProjectionKeySchema]:
    return [ProjectionKeySchema(id=k.id, index=k.index, label=k.describe(context)) for k in keys]


def to_entry_schemas(entity: Optional[ProjectableMixin], context: FormatContext) -> Optional[List[ProjectionEntrySchema]]:
    if entity is None:
        return None
    return [
        ProjectionEntrySchema(id=k.id, index=k.index, label=k.describe(context), value=v)
        for k, v in entity.as_dictionary(context).items()
    ]


def to_stream_projection(stream: StreamMetadata, context: FormatContext) -> StreamProjectionSchema:
    return StreamProjectionSchema(
        kind=stream.codec_type.value if stream.codec_type else None,
        entries=to_entry_schemas(stream, context) or [],
        tags=to_entry_schemas(stream.tags, context),
    )


def to_metadata_projection(metadata: MediaMetadata, context: FormatContext) -> MediaMetadataProjection:
    return MediaMetadataProjection(
        file_name=metadata.format.file_name,
        format=EntityProjectionSchema(
            entries=to_entry_schemas(metadata.format, context) or [],
            tags=to_entry_schemas(metadata.format.tags, context),
        ),
        streams=[to_stream_projection(s, context) for s in metadata.streams],
    )
