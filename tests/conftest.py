"""Pytest configuration and fixtures."""

from collections.abc import AsyncIterator
from pathlib import Path
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from src.auth.context import SessionContext
from src.db.schema import init_schema
from src.db.turso import TursoClient
from src.events.bus import EventBus
from src.events.store import AuditLogStore
from src.main import app, build_services
from src.models.base import Language
from src.models.profile import AppRole
from src.repositories.profile_repo import RoleRepository
from src.storage.minutes_storage import MinutesStorage

PASSWORD = "rahsia123"

APP_STATE_KEYS = (
    "db",
    "audit_store",
    "event_bus",
    "minutes_storage",
    "auth_service",
    "meeting_service",
    "decision_service",
    "complaint_service",
    "announcement_service",
    "profile_service",
    "admin_service",
    "dashboard_service",
)


@pytest.fixture
async def db(tmp_path: Path) -> AsyncIterator[TursoClient]:
    """Temp file database with the portal schema."""
    client = TursoClient(url=f"file:{tmp_path / 'portal_test.db'}")
    await client.connect()
    await init_schema(client)
    yield client
    await client.close()


@pytest.fixture
def audit_store(db: TursoClient) -> AuditLogStore:
    """Audit store over the temp database."""
    return AuditLogStore(db)


@pytest.fixture
def event_bus(audit_store: AuditLogStore) -> EventBus:
    """Event bus persisting to the temp audit store."""
    return EventBus(store=audit_store)


@pytest.fixture
def storage(tmp_path: Path) -> MinutesStorage:
    """Minutes storage rooted in a temp directory."""
    return MinutesStorage(root=tmp_path / "storage", public_base_url="/storage")


@pytest.fixture
def make_ctx():
    """Build a SessionContext without going through sign-in."""

    def _make(
        roles: set[AppRole] | None = None,
        language: Language = Language.MS,
        user_id=None,
    ) -> SessionContext:
        return SessionContext(
            user_id=user_id or uuid4(),
            email="pegawai@jpj.gov.my",
            session_id=uuid4(),
            roles=roles if roles is not None else {AppRole.STAFF},
            language=language,
            ip_address="127.0.0.1",
            user_agent="pytest",
        )

    return _make


@pytest.fixture
async def client(
    db: TursoClient,
    storage: MinutesStorage,
) -> AsyncIterator[AsyncClient]:
    """Async test client for the app, wired to the temp database."""
    storage.bucket_dir.mkdir(parents=True, exist_ok=True)
    build_services(app, db, storage=storage, require_email_verification=False)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    for key in APP_STATE_KEYS:
        if hasattr(app.state, key):
            delattr(app.state, key)


async def _register_and_sign_in(
    client: AsyncClient,
    email: str,
    full_name: str = "Ahmad bin Ali",
) -> tuple[str, str]:
    response = await client.post(
        "/auth/sign-up",
        json={
            "email": email,
            "password": PASSWORD,
            "confirm_password": PASSWORD,
            "full_name": full_name,
        },
    )
    assert response.status_code == 201, response.text
    user_id = response.json()["data"]["user_id"]

    response = await client.post(
        "/auth/sign-in",
        json={"email": email, "password": PASSWORD},
    )
    assert response.status_code == 200, response.text
    return response.json()["access_token"], user_id


async def _promote(db: TursoClient, user_id: str, role: AppRole) -> None:
    roles = RoleRepository(db)
    rows = await roles.roles_for_user(user_id)
    await roles.update(rows[0].id, {"role": role})


@pytest.fixture
def sign_up_user(client: AsyncClient):
    """Create an account over the API; returns (token, user_id)."""

    async def _sign_up(email: str, full_name: str = "Ahmad bin Ali"):
        return await _register_and_sign_in(client, email, full_name)

    return _sign_up


@pytest.fixture
def promote_user(db: TursoClient):
    """Change an account's role directly in the database."""

    async def _promote_user(user_id: str, role: AppRole) -> None:
        await _promote(db, user_id, role)

    return _promote_user


@pytest.fixture
async def staff_token(client: AsyncClient) -> str:
    """Bearer token of a staff member."""
    token, _ = await _register_and_sign_in(client, "staf@jpj.gov.my", "Siti Aminah")
    return token


@pytest.fixture
async def admin_token(client: AsyncClient, db: TursoClient) -> str:
    """Bearer token of the chairman."""
    token, user_id = await _register_and_sign_in(
        client, "pengerusi@jpj.gov.my", "Dato' Pengerusi"
    )
    await _promote(db, user_id, AppRole.CHAIRMAN)
    return token
