import pytest

from mana import create_app
from mana.config import TestConfig
from mana.extensions import db
from mana.models.user import User
from mana.services import page_cache

ADMIN_EMAIL = "admin@mana-industrial.com"
ADMIN_PASSWORD = "workshop-pass-123"


@pytest.fixture
def app(tmp_path):
    class Settings(TestConfig):
        LOG_DIR = str(tmp_path / "logs")

    app = create_app(Settings)
    with app.app_context():
        db.create_all()
        admin = User(name="Admin", email=ADMIN_EMAIL, role="ADMIN")
        admin.set_password(ADMIN_PASSWORD)
        db.session.add(admin)
        db.session.commit()
        page_cache.invalidate()
        yield app
        db.session.remove()
        db.drop_all()
    page_cache.invalidate()


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, email=ADMIN_EMAIL, password=ADMIN_PASSWORD):
    return client.post("/api/auth/login", json={"email": email, "password": password})


@pytest.fixture
def admin_client(client):
    r = login(client)
    assert r.status_code == 200
    return client


@pytest.fixture
def fake_media_host(monkeypatch):
    """Replace the media host with a recorder that answers with a hosted URL."""
    calls = []

    def fake_upload(file, **options):
        calls.append({"file": file, **options})
        filename = options["filename"]
        return {
            "secure_url": f"https://res.cloudinary.com/demo-cloud/raw/upload/{options['folder']}/{filename}",
            "public_id": f"{options['folder']}/{filename}",
            "resource_type": "raw",
        }

    monkeypatch.setattr("mana.services.media_service.cloudinary.uploader.upload", fake_upload)
    return calls
