from __future__ import annotations


def _entries_by_id(entries):
    return {e["id"]: e for e in entries}


def test_healthz(api_client):
    r = api_client.get("/healthz")
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["app"]


def test_decode_projection(api_client, report):
    r = api_client.post("/api/metadata/decode", json=report)
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["file_name"] == "/Users/me/Movies/Video.mp4"

    fmt = _entries_by_id(body["format"]["entries"])
    assert fmt["size"]["label"] == "File size"
    assert fmt["size"]["value"] == "0.99 MB"
    assert fmt["bit_rate"]["value"] == "198.1 KB"
    assert "tags" not in fmt
    # entries arrive in declaration order
    indexes = [e["index"] for e in body["format"]["entries"]]
    assert indexes == sorted(indexes)

    assert [t["id"] for t in body["format"]["tags"]] == ["title", "encoder", "creation_time"]

    assert [s["kind"] for s in body["streams"]] == ["video", "audio", "subtitle"]
    video = _entries_by_id(body["streams"][0]["entries"])
    assert video["r_frame_rate"]["value"] == "24"
    assert video["r_frame_rate"]["label"] == "Frame rate"


def test_decode_stream_without_tags(api_client):
    r = api_client.post("/api/metadata/decode", json={"streams": [{"codec_type": "data"}], "format": {}})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["streams"][0]["tags"] is None
    assert body["format"]["entries"] == []


def test_decode_structural_error_is_422(api_client):
    r = api_client.post("/api/metadata/decode", json={"format": {}})
    assert r.status_code == 422
    assert r.json()["detail"]["path"] == "streams"


def test_decode_non_object_body_is_422(api_client):
    r = api_client.post("/api/metadata/decode", json=[1, 2, 3])
    assert r.status_code == 422
    assert r.json()["detail"]["path"] == "$"


def test_list_keys(api_client):
    r = api_client.get("/api/metadata/keys/format")
    assert r.status_code == 200
    keys = r.json()
    assert keys[0] == {"id": "filename", "index": 0, "label": "File name"}
    assert keys[-1]["id"] == "tags"
    assert len(keys) == 10

    r = api_client.get("/api/metadata/keys/stream_tags")
    assert [k["id"] for k in r.json()][:3] == ["language", "title", "DURATION"]


def test_list_keys_unknown_entity(api_client):
    r = api_client.get("/api/metadata/keys/chapters")
    assert r.status_code == 404
