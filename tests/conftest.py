import os
import tempfile

# configure before anything from portfolio is imported
_tmpdir = tempfile.mkdtemp(prefix="portfolio-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmpdir, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "test"
os.environ["SITE_URL"] = "https://portfolio.test"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from portfolio.auth.security import create_access_token  # noqa: E402
from portfolio.database import Base, SessionLocal, engine  # noqa: E402
from portfolio.image.image_router import get_storage  # noqa: E402
from portfolio.main import app  # noqa: E402
from portfolio.models.registry import create_all  # noqa: E402
from portfolio.scripts.create_admin import create_admin  # noqa: E402

ADMIN_EMAIL = "admin@portfolio.com"
ADMIN_PASSWORD = "admin123"


class FakeStorage:
    """In-memory stand-in for CloudinaryStorage."""

    def __init__(self):
        self.objects = {}
        self.calls = []
        self.fixed_public_id = None

    def upload(self, data, *, folder, public_id):
        self.calls.append(("upload", folder, public_id))
        full_id = self.fixed_public_id or f"{folder}/{public_id}"
        record = {
            "public_id": full_id,
            "secure_url": f"https://res.cloudinary.com/demo/image/upload/{full_id}.png",
            "width": 1200,
            "height": 800,
            "format": "png",
            "bytes": len(data),
        }
        self.objects[full_id] = record
        return dict(record)

    def destroy(self, public_id):
        self.calls.append(("destroy", public_id))
        if self.objects.pop(public_id, None) is None:
            return {"result": "not found"}
        return {"result": "ok"}

    def resource(self, public_id):
        self.calls.append(("resource", public_id))
        if public_id not in self.objects:
            raise RuntimeError(f"Resource not found - {public_id}")
        return dict(self.objects[public_id])

    def list_folder(self, folder, page_size=500):
        self.calls.append(("list_folder", folder))
        return [dict(r) for key, r in self.objects.items() if key.startswith(f"{folder}/")]


@pytest.fixture(autouse=True)
def fresh_database():
    Base.metadata.drop_all(bind=engine)
    create_all(engine)
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin_user(db_session):
    return create_admin(db_session, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def admin_headers(admin_user):
    token = create_access_token(admin_user.id, admin_user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def fake_storage():
    storage = FakeStorage()
    app.dependency_overrides[get_storage] = lambda: storage
    yield storage
    app.dependency_overrides.pop(get_storage, None)


@pytest.fixture
def project_payload():
    def build(**overrides):
        payload = {
            "title": "My App",
            "description": "A small app that does one thing well.",
            "imageUrl": "https://x.example/y.png",
            "technologies": ["a", "b"],
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def experience_payload():
    def build(**overrides):
        payload = {
            "company": "C",
            "role": "R",
            "startDate": "2024-01-01T00:00:00Z",
            "description": "d",
        }
        payload.update(overrides)
        return payload

    return build
