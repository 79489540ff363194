import io

from cloudinary.exceptions import AuthorizationRequired, GeneralError

UPLOAD = "mana.services.media_service.cloudinary.uploader.upload"


def _post_file(client, name="a.png", mimetype="image/png"):
    return client.post(
        "/api/upload",
        data={"file": (io.BytesIO(b"x"), name, mimetype)},
        content_type="multipart/form-data",
    )


class TestUploadProxy:
    def test_no_file(self, client):
        r = client.post("/api/upload", data={}, content_type="multipart/form-data")
        assert r.status_code == 400
        assert r.get_json() == {"error": "No file received."}

    def test_upload_goes_to_media_host(self, client, fake_media_host):
        r = client.post(
            "/api/upload",
            data={"file": (io.BytesIO(b"%PDF-1.4 drawing"), "drawing.pdf", "application/pdf")},
            content_type="multipart/form-data",
        )
        assert r.status_code == 200
        body = r.get_json()
        assert body["success"] is True
        assert body["url"].endswith("/drawing.pdf")
        assert body["publicId"] == "mana-uploads/drawing.pdf"

        call = fake_media_host[0]
        assert call["folder"] == "mana-uploads"
        assert call["resource_type"] == "auto"
        assert call["filename"] == "drawing.pdf"
        assert (call["cloud_name"], call["api_key"], call["api_secret"]) == ("demo-cloud", "key-123", "secret-456")

    def test_folder_follows_config(self, app, client, fake_media_host):
        app.config["CLOUDINARY_FOLDER"] = "mana-staging"
        assert _post_file(client).status_code == 200
        assert fake_media_host[0]["folder"] == "mana-staging"

    def test_host_error_message_is_passed_on(self, client, monkeypatch):
        def rejected(file, **options):
            raise AuthorizationRequired("Invalid Signature")

        monkeypatch.setattr(UPLOAD, rejected)
        r = _post_file(client)
        assert r.status_code == 500
        assert r.get_json() == {"error": "Invalid Signature"}

    def test_transport_failure(self, client, monkeypatch):
        def boom(file, **options):
            raise GeneralError("Unexpected error - unreachable")

        monkeypatch.setattr(UPLOAD, boom)
        r = _post_file(client)
        assert r.status_code == 500
        assert "unreachable" in r.get_json()["error"]

    def test_unconfigured_host(self, app, client, fake_media_host):
        app.config["CLOUDINARY_API_SECRET"] = None
        r = _post_file(client)
        assert r.status_code == 500
        assert r.get_json() == {"error": "Media host is not configured."}
        assert fake_media_host == []
