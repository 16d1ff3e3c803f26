"""
Login, registration and media upload endpoints
"""
import io
import os
from datetime import datetime, timedelta, timezone

import pytest
from fastapi import UploadFile
from jose import jwt
from sqlalchemy.exc import OperationalError
from starlette.datastructures import Headers

from studentblog.core.config import settings
from studentblog.services.media_service import MediaService
from studentblog.utils.auth import create_access_token

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(path))
    return path


async def test_login_returns_usable_token(client, admin):
    response = await client.post("/api/login", json={"username": "profesora", "password": "secret123"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["user"] == {"id": admin.id, "username": "profesora", "isAdmin": True}

    me = await client.get("/api/user", headers={"Authorization": f"Bearer {data['token']}"})
    assert me.status_code == 200
    assert me.json()["data"]["username"] == "profesora"


async def test_login_rejects_bad_password(client, admin):
    response = await client.post("/api/login", json={"username": "profesora", "password": "wrong"})
    assert response.status_code == 401

    response = await client.post("/api/login", json={"username": "nobody", "password": "wrong"})
    assert response.status_code == 401


async def test_current_user_requires_token(client):
    assert (await client.get("/api/user")).status_code == 401
    assert (await client.get("/api/user", headers={"Authorization": "Basic abc"})).status_code == 401


async def test_logout(client):
    response = await client.post("/api/logout")
    assert response.status_code == 200


async def test_registration_is_off_by_default(client):
    response = await client.post("/api/register", json={"username": "nueva", "password": "secret123"})
    assert response.status_code == 403


async def test_registration_when_enabled(client, monkeypatch):
    monkeypatch.setattr(settings, "ALLOW_REGISTRATION", True)

    response = await client.post("/api/register", json={"username": "nueva", "password": "secret123"})
    assert response.status_code == 201
    assert response.json()["data"]["user"]["isAdmin"] is True

    response = await client.post("/api/register", json={"username": "nueva", "password": "secret123"})
    assert response.status_code == 400


async def test_upload_media(client, admin, admin_headers, upload_dir):
    response = await client.post(
        "/api/admin/media",
        files={"file": ("Portada Final.PNG", PNG, "image/png")},
        headers=admin_headers
    )
    assert response.status_code == 201

    media = response.json()["data"]
    assert media["originalFilename"] == "Portada Final.PNG"
    assert media["mimetype"] == "image/png"
    assert media["size"] == len(PNG)
    assert media["uploadedBy"] == admin.id
    assert media["filename"].endswith(".png")
    assert media["path"] == f"/uploads/{media['filename']}"
    with open(os.path.join(upload_dir, media["filename"]), "rb") as f:
        assert f.read() == PNG

    listing = await client.get("/api/admin/media", headers=admin_headers)
    assert [m["id"] for m in listing.json()["data"]] == [media["id"]]

    single = await client.get(f"/api/admin/media/{media['id']}", headers=admin_headers)
    assert single.json()["data"]["filename"] == media["filename"]
    assert (await client.get("/api/admin/media/999", headers=admin_headers)).status_code == 404


async def test_same_file_uploaded_twice_gets_distinct_names(client, admin_headers, upload_dir):
    names = set()
    for _ in range(2):
        response = await client.post(
            "/api/admin/media", files={"file": ("cover.png", PNG, "image/png")}, headers=admin_headers
        )
        names.add(response.json()["data"]["filename"])
    assert len(names) == 2


async def test_upload_rejects_unsupported_type(client, admin_headers, upload_dir):
    response = await client.post(
        "/api/admin/media",
        files={"file": ("script.sh", b"echo hi", "application/x-sh")},
        headers=admin_headers
    )
    assert response.status_code == 415
    assert list(upload_dir.glob("*")) == []


async def test_upload_rejects_large_and_empty_files(client, admin_headers, upload_dir, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE", 16)

    response = await client.post(
        "/api/admin/media", files={"file": ("big.png", PNG, "image/png")}, headers=admin_headers
    )
    assert response.status_code == 413

    response = await client.post(
        "/api/admin/media", files={"file": ("empty.png", b"", "image/png")}, headers=admin_headers
    )
    assert response.status_code == 400


async def test_upload_requires_admin(client, reader_headers):
    response = await client.post(
        "/api/admin/media", files={"file": ("cover.png", PNG, "image/png")}, headers=reader_headers
    )
    assert response.status_code == 403


async def test_failed_record_leaves_no_file_behind(db, admin, upload_dir, monkeypatch):
    async def unreachable():
        raise OperationalError("INSERT INTO media", {}, ConnectionRefusedError("connection refused"))

    monkeypatch.setattr(db, "commit", unreachable)
    upload = UploadFile(
        file=io.BytesIO(PNG), filename="cover.png", headers=Headers({"content-type": "image/png"})
    )

    with pytest.raises(OperationalError):
        await MediaService.store_upload(db, upload, admin.id)
    assert list(upload_dir.glob("*")) == []


def test_token_expiry_follows_settings():
    before = datetime.now(timezone.utc)
    token = create_access_token({"sub": "1"})
    claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])

    expires = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
    lifetime = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    assert before + lifetime - timedelta(seconds=5) <= expires <= before + lifetime + timedelta(seconds=5)
