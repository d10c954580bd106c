# tests/conftest.py
from __future__ import annotations

import copy
import json
from typing import Any, Dict

import pytest

from mediameta.common.localization import FormatContext

# Trimmed ffprobe -show_streams -show_format report of a 5 second clip:
# one h264 video stream, one 5.1 audio stream, one subtitle stream.
SAMPLE_REPORT: Dict[str, Any] = {
    "streams": [
        {
            "index": 0,
            "codec_name": "h264",
            "codec_long_name": "H.264 / AVC / MPEG-4 AVC / MPEG-4 part 10",
            "profile": "High",
            "codec_type": "video",
            "codec_tag_string": "avc1",
            "width": 1920,
            "height": 1080,
            "color_range": "tv",
            "color_space": "bt709",
            "field_order": "progressive",
            "display_aspect_ratio": "16:9",
            "pix_fmt": "yuv420p",
            "r_frame_rate": "24/1",
            "time_base": "1/12288",
            "start_time": "0.000000",
            "duration": "5.000000",
            "bit_rate": "1500000",
            "bits_per_raw_sample": "8",
            "nb_frames": "120",
            "tags": {
                "language": "und",
                "handler_name": "VideoHandler",
                "vendor_id": "[0][0][0][0]",
                "encoder": "Lavc60.3.100 libx264",
                "creation_time": "2023-11-29T14:41:04.000000Z",
                "NUMBER_OF_BYTES": "2404223327",
            },
        },
        {
            "index": 1,
            "codec_name": "aac",
            "codec_long_name": "AAC (Advanced Audio Coding)",
            "profile": "LC",
            "codec_type": "audio",
            "sample_rate": "48000",
            "channels": 6,
            "channel_layout": "5.1(side)",
            "bits_per_sample": 0,
            "time_base": "1/48000",
            "start_time": "0.000000",
            "duration": "5.000000",
            "bit_rate": "84375",
            "nb_frames": "236",
            "tags": {"language": "eng", "title": "Surround"},
        },
        {
            "index": 2,
            "codec_name": "mov_text",
            "codec_type": "subtitle",
            "duration": "4.500000",
            "tags": {"language": "eng"},
        },
    ],
    "format": {
        "filename": "/Users/me/Movies/Video.mp4",
        "nb_streams": "3",
        "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
        "format_long_name": "QuickTime / MOV",
        "start_time": "0.000000",
        "duration": "5.000000",
        "size": "990502",
        "bit_rate": "1584803",
        "probe_score": 100,
        "tags": {
            "title": "Sample",
            "encoder": "Lavf60.3.100",
            "creation_time": "2023-11-29T14:41:04.000000Z",
        },
    },
}


@pytest.fixture()
def report() -> Dict[str, Any]:
    """A fresh, mutable copy of the sample ffprobe report."""
    return copy.deepcopy(SAMPLE_REPORT)


@pytest.fixture()
def report_bytes(report) -> bytes:
    return json.dumps(report).encode("utf-8")


@pytest.fixture()
def ctx() -> FormatContext:
    """Pinned formatting: ',' grouping, '.' decimals, UTC, no translations."""
    return FormatContext()
