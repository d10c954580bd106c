import pytest

from mediameta.common.localization import FormatContext, Localizer
from mediameta.domain.entities.format import FormatKey, FormatMetadata, FormatTags
from mediameta.domain.entities.stream import StreamKey, StreamMetadata, StreamTags
from mediameta.domain.enums.stream_kind import StreamKind
from mediameta.domain.ports.projection import Projectable


def test_key_index_is_declaration_order():
    assert [k.index for k in FormatKey] == list(range(len(FormatKey)))
    assert FormatKey.file_name.index == 0
    assert FormatKey.tags.index == 9


def test_key_id_and_label():
    assert StreamKey.pixel_format.id == "pix_fmt"
    assert StreamKey.pixel_format.label == "Pixel format"
    assert FormatKey.size.label == "File size"


def test_from_id_looks_up_wire_name():
    assert StreamKey.from_id("r_frame_rate") is StreamKey.frame_rate
    with pytest.raises(ValueError):
        StreamKey.from_id("no_such_field")


def test_describe_translates_label():
    ctx = FormatContext(localizer=Localizer({"Bit rate": "Débit"}))
    assert FormatKey.bit_rate.describe(ctx) == "Débit"
    assert FormatKey.duration.describe(ctx) == "Duration"
    assert FormatKey.duration.describe() == "Duration"


def test_value_for_unknown_id_raises():
    with pytest.raises(ValueError):
        FormatMetadata().value_for("nope")


@pytest.mark.parametrize("entity_cls", [StreamMetadata, StreamTags, FormatMetadata, FormatTags])
def test_entities_are_projectable(entity_cls):
    entity = entity_cls()
    assert isinstance(entity.keys(), type)
    assert entity.as_dictionary() == {}
    projectable: Projectable = entity
    assert projectable.as_labeled_dictionary() == {}


def test_stream_kind_labels():
    assert StreamKind.subtitle.label == "Subtitle"
    ctx = FormatContext(localizer=Localizer({"Audio": "Аудио"}))
    assert StreamKind.audio.describe(ctx) == "Аудио"
    assert StreamKind.video.describe(ctx) == "Video"
