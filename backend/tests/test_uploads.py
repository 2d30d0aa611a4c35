import hashlib

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


class TestImageUploads:
    def test_upload_and_fetch(self, client, signup, tmp_data):
        _, h = signup("client")
        r = client.post(
            "/api/v1/uploads/images",
            files={"file": ("site photo.png", PNG, "image/png")},
            headers=h,
        )
        assert r.status_code == 201
        data = r.json()
        assert data["file_hash"] == hashlib.sha256(PNG).hexdigest()
        assert data["file_size_bytes"] == len(PNG)
        assert data["url"] == f"/media/{data['file_hash'][:12]}_site_photo.png"
        assert (tmp_data / "media" / data["url"].split("/")[-1]).exists()

        r = client.get(data["url"])
        assert r.status_code == 200
        assert r.content == PNG

    def test_same_image_same_url(self, client, signup):
        _, h = signup("client")
        urls = {
            client.post(
                "/api/v1/uploads/images",
                files={"file": ("a.png", PNG, "image/png")},
                headers=h,
            ).json()["url"]
            for _ in range(2)
        }
        assert len(urls) == 1

    def test_rejects_non_image(self, client, signup):
        _, h = signup("client")
        r = client.post(
            "/api/v1/uploads/images",
            files={"file": ("notes.txt", b"hello", "text/plain")},
            headers=h,
        )
        assert r.status_code == 400

    def test_rejects_empty(self, client, signup):
        _, h = signup("client")
        r = client.post(
            "/api/v1/uploads/images",
            files={"file": ("empty.png", b"", "image/png")},
            headers=h,
        )
        assert r.status_code == 400

    def test_rejects_oversized(self, client, signup, monkeypatch):
        from tradeslink.config import settings

        _, h = signup("client")
        monkeypatch.setattr(settings, "max_upload_bytes", 16)
        r = client.post(
            "/api/v1/uploads/images",
            files={"file": ("big.png", PNG, "image/png")},
            headers=h,
        )
        assert r.status_code == 413

    def test_requires_session(self, client):
        r = client.post(
            "/api/v1/uploads/images",
            files={"file": ("a.png", PNG, "image/png")},
            headers={"Authorization": "Bearer bogus"},
        )
        assert r.status_code == 401

    def test_missing_media(self, client):
        assert client.get("/media/missing.png").status_code == 404

    def test_rejects_unsafe_media_name(self, client):
        assert client.get("/media/..%2Fdb.sqlite").status_code == 404


def test_safe_image_name():
    from tradeslink.services.image_service import get_image_path, safe_image_name

    assert safe_image_name("Baustelle Foto (1).jpg") == "Baustelle_Foto__1_.jpg"
    assert get_image_path("../db.sqlite") is None
