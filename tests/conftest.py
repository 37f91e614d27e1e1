import pytest
import pytest_asyncio

from fastapi.testclient import TestClient

from chatserver.config.settings import TestingConfig
from chatserver.fastapi_app import create_fastapi_app
from chatserver.infrastructure.persistence import (
    create_engine,
    create_session_factory,
    init_db,
)
from chatserver.infrastructure.security import (
    PasswordHasher,
    TokenService,
    generate_token_keys,
)
from chatserver.setup.ioc import create_container

PASSWORD = "hunter42"


@pytest.fixture(scope="session")
def token_keys():
    """One throwaway Ed25519 pair for the whole run."""
    return generate_token_keys()


@pytest.fixture(scope="session")
def password_hasher():
    return PasswordHasher()


@pytest.fixture()
def token_service(token_keys):
    return TokenService(token_keys, issuer="chat_server", audience="chat_web")


@pytest.fixture()
def test_config(tmp_path):
    class _Config(TestingConfig):
        DATABASE_URL = f"sqlite+aiosqlite:///{tmp_path / 'chat.db'}"
        DB_CREATE_TABLES = True
        LOG_PATH = ""

    return _Config


@pytest.fixture()
def app(test_config, token_keys):
    """Create a FastAPI app over a fresh SQLite file for each test."""
    return create_fastapi_app(test_config, create_container(test_config, token_keys))


@pytest.fixture()
def client(app):
    """A test client; entering it runs the lifespan, which creates the tables."""
    with TestClient(app) as client:
        yield client


def signup(client, workspace="acme", fullname="Luffy", email="luffy@acme.org", password=PASSWORD):
    res = client.post(
        "/api/signup",
        json={
            "workspace": workspace,
            "fullname": fullname,
            "email": email,
            "password": password,
        },
    )
    assert res.status_code == 201, f"signup failed: {res.status_code} {res.text}"
    return res.json()["token"]


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def auth_headers(client):
    """Headers of the first user of "acme", who therefore owns it."""
    return bearer(signup(client))


@pytest_asyncio.fixture()
async def session():
    """An AsyncSession over a private in-memory database."""
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await init_db(engine)
    factory = create_session_factory(engine)
    async with factory() as session:
        yield session
    await engine.dispose()
