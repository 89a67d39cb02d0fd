from __future__ import annotations

from pathlib import Path

from app.config import settings


def _upload(client, headers, name: str, data: bytes, content_type: str):
    return client.post("/api/admin/upload", files={"file": (name, data, content_type)}, headers=headers)


def test_plain_text_is_rejected(client, admin_headers) -> None:
    r = _upload(client, admin_headers, "notes.txt", b"hello", "text/plain")
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid file type"}


def test_four_megabyte_jpeg_is_stored_under_uploads(client, admin_headers) -> None:
    data = b"\xff\xd8\xff" + b"\x00" * (4 * 1024 * 1024 - 3)
    r = _upload(client, admin_headers, "Profile Photo.JPG", data, "image/jpeg")
    assert r.status_code == 200, r.text
    file_path = r.json()["filePath"]
    assert file_path.startswith("/uploads/")
    assert file_path.endswith(".jpg")

    stored = Path(settings.upload_dir) / file_path.rsplit("/", 1)[1]
    assert stored.read_bytes() == data

    served = client.get(file_path)
    assert served.status_code == 200
    assert served.content == data


def test_pdf_is_accepted(client, admin_headers) -> None:
    r = _upload(client, admin_headers, "cv.pdf", b"%PDF-1.7 minimal", "application/pdf")
    assert r.status_code == 200
    assert r.json()["filePath"].endswith(".pdf")


def test_oversized_file_is_rejected(client, admin_headers) -> None:
    data = b"\x00" * (5 * 1024 * 1024 + 1)
    r = _upload(client, admin_headers, "huge.png", data, "image/png")
    assert r.status_code == 400
    assert r.json() == {"message": "File too large"}


def test_exactly_five_megabytes_is_allowed(client, admin_headers) -> None:
    r = _upload(client, admin_headers, "edge.png", b"\x00" * (5 * 1024 * 1024), "image/png")
    assert r.status_code == 200
