"""
Bulk photo import script, run against a mocked API.
"""

import importlib.util
import io
import json
from pathlib import Path

import httpx
from PIL import Image

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "import_photos.py"
_spec = importlib.util.spec_from_file_location("import_photos", SCRIPT)
import_photos = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(import_photos)


def _write_png(path: Path) -> Path:
    buffer = io.BytesIO()
    Image.new("RGB", (40, 30), (10, 120, 200)).save(buffer, format="PNG")
    path.write_bytes(buffer.getvalue())
    return path


def _client(handler) -> httpx.Client:
    return httpx.Client(base_url="http://test/api", transport=httpx.MockTransport(handler))


def test_one_fiche_per_file_and_bad_file_reported(tmp_path):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(201, json={"id": 4, "number": 7})

    bad = tmp_path / "notes.jpg"
    bad.write_bytes(b"not an image")
    good = _write_png(tmp_path / "commode.png")

    with _client(handler) as client:
        created, failed = import_photos.import_files(client, 3, [bad, good])

    assert created == ["commode.png -> fiche #7"]
    assert len(failed) == 1 and failed[0].startswith("notes.jpg: ")

    # the unreadable file never reached the API
    assert len(requests) == 1
    assert requests[0].method == "POST"
    assert requests[0].url.path == "/api/items"
    assert requests[0].headers["X-User-Id"] == "3"
    assert json.loads(requests[0].content)["photo"].startswith("data:image/jpeg;base64,")


def test_item_mode_appends_photos_and_keeps_earlier_uploads(tmp_path):
    paths = [_write_png(tmp_path / f"{name}.png") for name in ("face", "dos", "tiroir")]
    posted = []

    def handler(request: httpx.Request) -> httpx.Response:
        posted.append(request.url.path)
        if len(posted) == 2:
            return httpx.Response(400, json={"detail": "Photo too large"})
        return httpx.Response(201, json={"id": len(posted), "itemId": 12, "position": len(posted) - 1})

    with _client(handler) as client:
        created, failed = import_photos.import_files(client, 1, paths, item_id=12)

    assert posted == ["/api/items/12/photos"] * 3
    assert created == ["face.png -> fiche 12, photo #0", "tiroir.png -> fiche 12, photo #2"]
    assert len(failed) == 1 and failed[0].startswith("dos.png: 400 ")
    assert "Photo too large" in failed[0]


def test_transport_error_does_not_stop_import(tmp_path):
    paths = [_write_png(tmp_path / "a.png"), _write_png(tmp_path / "b.png")]
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) == 1:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(201, json={"id": 9, "number": 2})

    with _client(handler) as client:
        created, failed = import_photos.import_files(client, 1, paths)

    assert created == ["b.png -> fiche #2"]
    assert failed == ["a.png: connection refused"]
