"""Tests for sign-up, verification, sign-in and session loading."""

from datetime import UTC, datetime, timedelta

import pytest

from src.auth.passwords import hash_password, hash_token, new_token, verify_password
from src.auth.service import AuthService
from src.db.turso import TursoClient
from src.errors import AuthenticationError, DuplicateAccountError, NotFoundError
from src.events.bus import EventBus
from src.events.store import AuditLogStore
from src.models.account import Session
from src.models.audit import AuditAction
from src.models.base import Language
from src.models.profile import AppRole
from src.repositories.account_repo import AuthUserRepository, SessionRepository
from src.repositories.profile_repo import ProfileRepository, RoleRepository

PASSWORD = "rahsia123"


def _service(db: TursoClient, event_bus: EventBus, **kwargs) -> AuthService:
    return AuthService(
        AuthUserRepository(db),
        SessionRepository(db),
        ProfileRepository(db),
        RoleRepository(db),
        event_bus,
        **kwargs,
    )


@pytest.fixture
def auth(db: TursoClient, event_bus: EventBus) -> AuthService:
    return _service(
        db,
        event_bus,
        require_email_verification=True,
        initial_admin_emails=["Pengerusi@jpj.gov.my"],
    )


class TestPasswords:
    """Tests for hashing helpers."""

    def test_password_round_trip(self):
        """bcrypt hashes verify only the original password."""
        hashed = hash_password(PASSWORD)
        assert hashed != PASSWORD
        assert verify_password(PASSWORD, hashed)
        assert not verify_password("salah", hashed)

    def test_malformed_hash_does_not_verify(self):
        """A corrupt stored hash is a failed check, not a crash."""
        assert not verify_password(PASSWORD, "not-a-bcrypt-hash")

    def test_tokens(self):
        """Tokens are unique and their hashes deterministic."""
        token = new_token()
        assert token != new_token()
        assert hash_token(token) == hash_token(token)
        assert len(hash_token(token)) == 64


class TestSignUp:
    """Tests for account creation."""

    @pytest.mark.asyncio
    async def test_creates_profile_and_staff_role(
        self,
        auth: AuthService,
        db: TursoClient,
    ):
        """A new account gets a profile and the staff role."""
        user = await auth.sign_up("Aminah@JPJ.gov.my", PASSWORD, "Aminah Yusof")

        assert user.email == "aminah@jpj.gov.my"
        assert user.email_verified is False
        assert user.verification_token
        profile = await ProfileRepository(db).require_by_user_id(user.id)
        assert profile.full_name == "Aminah Yusof"
        assert await RoleRepository(db).role_set(user.id) == {AppRole.STAFF}

    @pytest.mark.asyncio
    async def test_initial_admin_gets_chairman(
        self,
        auth: AuthService,
        db: TursoClient,
    ):
        """Configured bootstrap e-mails start as chairman."""
        user = await auth.sign_up("pengerusi@jpj.gov.my", PASSWORD, "Pengerusi")
        assert await RoleRepository(db).role_set(user.id) == {AppRole.CHAIRMAN}

    @pytest.mark.asyncio
    async def test_duplicate_email(self, auth: AuthService):
        """The same e-mail cannot register twice."""
        await auth.sign_up("aminah@jpj.gov.my", PASSWORD, "Aminah")
        with pytest.raises(DuplicateAccountError):
            await auth.sign_up("AMINAH@jpj.gov.my", PASSWORD, "Aminah")

    @pytest.mark.asyncio
    async def test_sign_up_is_audited(
        self,
        auth: AuthService,
        audit_store: AuditLogStore,
    ):
        """Account creation leaves a profiles audit row."""
        await auth.sign_up("aminah@jpj.gov.my", PASSWORD, "Aminah")
        entries = await audit_store.list_recent()
        assert entries[0].entity_type == "profiles"
        assert entries[0].new_values["role"] == "staff"

    @pytest.mark.asyncio
    async def test_verification_disabled(self, db: TursoClient, event_bus: EventBus):
        """Without verification the account is usable at once."""
        service = _service(db, event_bus, require_email_verification=False)
        user = await service.sign_up("aminah@jpj.gov.my", PASSWORD, "Aminah")
        assert user.email_verified is True
        assert user.verification_token is None


class TestSignIn:
    """Tests for sign-in and verification."""

    @pytest.mark.asyncio
    async def test_unverified_refused_until_verified(self, auth: AuthService):
        """Sign-in waits for the verification token to be used."""
        user = await auth.sign_up("aminah@jpj.gov.my", PASSWORD, "Aminah")

        with pytest.raises(AuthenticationError) as exc_info:
            await auth.sign_in("aminah@jpj.gov.my", PASSWORD)
        assert exc_info.value.message_key == "auth.emailNotVerified"

        verified = await auth.verify_email(user.verification_token)
        assert verified.email_verified is True
        assert verified.verification_token is None

        result = await auth.sign_in("aminah@jpj.gov.my", PASSWORD)
        assert result.token
        assert result.session.user_id == user.id

    @pytest.mark.asyncio
    async def test_token_used_once(self, auth: AuthService):
        """A verification token cannot be reused."""
        user = await auth.sign_up("aminah@jpj.gov.my", PASSWORD, "Aminah")
        await auth.verify_email(user.verification_token)
        with pytest.raises(NotFoundError):
            await auth.verify_email(user.verification_token)

    @pytest.mark.asyncio
    async def test_wrong_password(self, auth: AuthService):
        """Bad credentials are refused with the same message as unknown e-mail."""
        await auth.sign_up("pengerusi@jpj.gov.my", PASSWORD, "Pengerusi")

        for email, password in [
            ("pengerusi@jpj.gov.my", "salah123"),
            ("tiada@jpj.gov.my", PASSWORD),
        ]:
            with pytest.raises(AuthenticationError) as exc_info:
                await auth.sign_in(email, password)
            assert exc_info.value.message_key == "auth.invalidCredentials"

    @pytest.mark.asyncio
    async def test_sign_in_audited_with_client_details(
        self,
        db: TursoClient,
        event_bus: EventBus,
        audit_store: AuditLogStore,
    ):
        """Sign-in records a login row with IP and user agent."""
        service = _service(db, event_bus, require_email_verification=False)
        await service.sign_up("aminah@jpj.gov.my", PASSWORD, "Aminah")
        await service.sign_in("aminah@jpj.gov.my", PASSWORD, "10.1.1.1", "Firefox")

        logins = [
            e for e in await audit_store.list_recent() if e.action == AuditAction.LOGIN
        ]
        assert len(logins) == 1
        assert logins[0].ip_address == "10.1.1.1"
        assert logins[0].user_agent == "Firefox"


class TestSessionContext:
    """Tests for loading and ending sessions."""

    @pytest.fixture
    def service(self, db: TursoClient, event_bus: EventBus) -> AuthService:
        return _service(
            db,
            event_bus,
            require_email_verification=False,
            initial_admin_emails=["pengerusi@jpj.gov.my"],
        )

    @pytest.mark.asyncio
    async def test_load_context(self, service: AuthService):
        """A valid token yields the caller's roles and profile language."""
        await service.sign_up("pengerusi@jpj.gov.my", PASSWORD, "Dato' Pengerusi")
        result = await service.sign_in("pengerusi@jpj.gov.my", PASSWORD)

        ctx = await service.load_context(result.token, "127.0.0.1", "pytest")
        assert ctx.user_id == result.user.id
        assert ctx.is_admin
        assert ctx.primary_role == AppRole.CHAIRMAN
        assert ctx.display_name == "Dato' Pengerusi"
        assert ctx.language == Language.MS
        assert ctx.audit_fields()["ip_address"] == "127.0.0.1"

    @pytest.mark.asyncio
    async def test_unknown_token(self, service: AuthService):
        """Unknown tokens are refused."""
        with pytest.raises(AuthenticationError):
            await service.load_context("tiada-token")

    @pytest.mark.asyncio
    async def test_expired_session_removed(
        self,
        service: AuthService,
        db: TursoClient,
    ):
        """Expired sessions are refused and deleted."""
        user = await service.sign_up("aminah@jpj.gov.my", PASSWORD, "Aminah")
        token = new_token()
        sessions = SessionRepository(db)
        session = Session(
            user_id=user.id,
            token_hash=hash_token(token),
            created_at=datetime.now(UTC) - timedelta(hours=13),
            expires_at=datetime.now(UTC) - timedelta(hours=1),
        )
        await sessions.insert(session)

        with pytest.raises(AuthenticationError) as exc_info:
            await service.load_context(token)
        assert exc_info.value.message_key == "auth.sessionExpired"
        assert await sessions.get(session.id) is None

    @pytest.mark.asyncio
    async def test_sign_in_purges_expired_sessions(
        self,
        service: AuthService,
        db: TursoClient,
    ):
        """Any sign-in clears stale sessions, whoever they belong to."""
        user = await service.sign_up("aminah@jpj.gov.my", PASSWORD, "Aminah")
        await service.sign_up("hafiz@jpj.gov.my", PASSWORD, "Hafiz")
        sessions = SessionRepository(db)
        stale = Session(
            user_id=user.id,
            token_hash=hash_token(new_token()),
            created_at=datetime.now(UTC) - timedelta(hours=13),
            expires_at=datetime.now(UTC) - timedelta(hours=1),
        )
        await sessions.insert(stale)

        result = await service.sign_in("hafiz@jpj.gov.my", PASSWORD)

        assert await sessions.get(stale.id) is None
        assert await sessions.get(result.session.id) is not None

    @pytest.mark.asyncio
    async def test_session_language_overrides_profile(self, service: AuthService):
        """A per-session language wins over the profile preference."""
        await service.sign_up("aminah@jpj.gov.my", PASSWORD, "Aminah")
        result = await service.sign_in("aminah@jpj.gov.my", PASSWORD)
        ctx = await service.load_context(result.token)

        await service.set_session_language(ctx, Language.EN)
        assert ctx.language == Language.EN

        reloaded = await service.load_context(result.token)
        assert reloaded.language == Language.EN

    @pytest.mark.asyncio
    async def test_sign_out(
        self,
        service: AuthService,
        audit_store: AuditLogStore,
    ):
        """Signing out invalidates the token and is audited."""
        await service.sign_up("aminah@jpj.gov.my", PASSWORD, "Aminah")
        result = await service.sign_in("aminah@jpj.gov.my", PASSWORD)
        ctx = await service.load_context(result.token)

        await service.sign_out(ctx)

        with pytest.raises(AuthenticationError):
            await service.load_context(result.token)
        actions = [e.action for e in await audit_store.list_recent()]
        assert actions.count(AuditAction.LOGOUT) == 1
