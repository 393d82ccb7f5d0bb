"""Pytest configuration and fixtures.

Each test gets its own SQLite file under tmp_path:
- `client`: a TestClient over a fully started app (tables created, content seeded)
- `db`: a bare AsyncSession for service-level tests
- `signup`: helper that creates a player through the API and returns its token
"""
import os

# Must be set before questkeeper reads its settings
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from questkeeper.core.config import get_settings  # noqa: E402
from questkeeper.db.base import Base  # noqa: E402
from questkeeper.db.session import make_engine, make_sessionmaker  # noqa: E402
from questkeeper.main import create_app  # noqa: E402


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def db_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
def client(db_url):
    engine = make_engine(db_url)
    app = create_app(get_settings(), engine, make_sessionmaker(engine))
    with TestClient(app) as c:
        yield c


@pytest.fixture
async def db(db_url, anyio_backend):
    engine = make_engine(db_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with make_sessionmaker(engine)() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def signup(client):
    """Create a player via /sign-up; returns (user dict, token)."""

    def _signup(username: str, password: str = "pw1", adventurer_name: str = "Zel"):
        res = client.post(
            "/sign-up",
            json={"username": username, "password": password, "adventurerName": adventurer_name},
        )
        assert res.status_code == 200, res.text
        body = res.json()
        return body["user"], body["token"]

    return _signup
