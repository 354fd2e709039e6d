from __future__ import annotations

import io
from dataclasses import replace

from PIL import Image


def _png(size=(2400, 1200)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color=(200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()


def _create_project(client, headers, **extra) -> dict:
    body = {"githubId": 555, "name": "portfolio", "category": "web", **extra}
    resp = client.post("/api/projects", json=body, headers=headers)
    assert resp.status_code == 200
    return resp.json()


def test_project_post_upserts_by_github_id(client, admin_headers):
    first = _create_project(client, admin_headers)
    second = _create_project(client, admin_headers, customDescription="Better words")
    assert first["id"] == second["id"]
    projects = client.get("/api/projects").json()
    assert len(projects) == 1
    assert projects[0]["customDescription"] == "Better words"
    assert projects[0]["category"] == "web"


def test_image_upload_is_resized_and_linked(client, admin_headers, settings_env):
    project = _create_project(client, admin_headers)
    resp = client.post(
        f"/api/projects/{project['id']}/upload",
        files={"file": ("shot.png", _png(), "image/png")},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    image_url = resp.json()["imageUrl"]
    assert image_url.startswith("/uploads/") and image_url.endswith(".jpg")

    stored = settings_env / "uploads" / image_url.rsplit("/", 1)[1]
    with Image.open(stored) as img:
        assert max(img.size) <= 1600
        assert img.format == "JPEG"

    served = client.get(image_url)
    assert served.status_code == 200


def test_non_image_upload_becomes_video_url(client, admin_headers):
    project = _create_project(client, admin_headers)
    resp = client.post(
        f"/api/projects/{project['id']}/upload",
        files={"file": ("demo.mp4", b"\x00\x00\x00\x18ftypmp42", "video/mp4")},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    assert resp.json()["videoUrl"].endswith(".mp4")
    assert resp.json()["imageUrl"] is None


def test_upload_errors(client, admin_headers):
    project = _create_project(client, admin_headers)
    url = f"/api/projects/{project['id']}/upload"
    assert client.post(url, headers=admin_headers).status_code == 400
    assert client.post(url, files={"file": ("x.png", b"garbage", "image/png")}, headers=admin_headers).status_code == 400
    assert client.post(url, files={"file": ("x.png", _png((4, 4)), "image/png")}).status_code == 401
    missing = client.post("/api/projects/99/upload", files={"file": ("x.png", _png((4, 4)), "image/png")}, headers=admin_headers)
    assert missing.status_code == 404
    assert missing.json() == {"error": "Project not found"}


def test_upload_size_limit(app, client, admin_headers):
    app.state.settings = replace(app.state.settings, max_upload_bytes=10)
    project = _create_project(client, admin_headers)
    resp = client.post(
        f"/api/projects/{project['id']}/upload",
        files={"file": ("clip.mp4", b"0123456789abcdef", "video/mp4")},
        headers=admin_headers,
    )
    assert resp.status_code == 413


def test_oversized_pixel_dimensions_are_rejected(client, admin_headers):
    buffer = io.BytesIO()
    Image.new("1", (14000, 14000)).save(buffer, format="PNG")
    project = _create_project(client, admin_headers)
    resp = client.post(
        f"/api/projects/{project['id']}/upload",
        files={"file": ("huge.png", buffer.getvalue(), "image/png")},
        headers=admin_headers,
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid image file"}
