# mediameta/services/api/routers/metadata.py
from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict, List, Type

from fastapi import APIRouter, Body, Depends, HTTPException, Path

from mediameta.common.localization import FormatContext
from mediameta.common.settings import get_settings
from mediameta.domain.entities.format import FormatKey, FormatTagsKey
from mediameta.domain.entities.stream import StreamKey, StreamTagsKey
from mediameta.domain.errors import MetadataDecodeError
from mediameta.domain.ports.projection import ProjectionKey
from mediameta.services.api.deps import get_context
from mediameta.services.decoder import decode_media_metadata
from mediameta.services.mappers.projection import to_key_schemas, to_metadata_projection
from mediameta.services.schemas.metadata import (
    DecodeErrorSchema,
    MediaMetadataProjection,
    ProjectionKeySchema,
)

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/metadata", tags=["metadata"])

_KEY_SETS: Dict[str, Type[ProjectionKey]] = {
    "stream": StreamKey,
    "stream_tags": StreamTagsKey,
    "format": FormatKey,
    "format_tags": FormatTagsKey,
}


@router.post(
    "/decode",
    response_model=MediaMetadataProjection,
    responses={422: {"model": DecodeErrorSchema}},
)
def decode_metadata(
    document: Any = Body(..., description="ffprobe -show_streams -show_format JSON report"),
    context: FormatContext = Depends(get_context),
) -> MediaMetadataProjection:
    try:
        metadata = decode_media_metadata(document, context)
    except MetadataDecodeError as e:
        raise HTTPException(
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            detail={"message": e.message, "path": e.path},
        ) from e
    return to_metadata_projection(metadata, context)


@router.get("/keys/{entity}", response_model=List[ProjectionKeySchema])
def list_keys(
    entity: str = Path(..., description="stream | stream_tags | format | format_tags"),
    context: FormatContext = Depends(get_context),
) -> List[ProjectionKeySchema]:
    keys = _KEY_SETS.get(entity)
    if keys is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=f"Unknown entity: {entity}")
    return to_key_schemas(keys, context)
