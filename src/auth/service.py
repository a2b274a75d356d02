"""Account sign-up, verification, sign-in and per-request session loading."""

from dataclasses import dataclass

import structlog

from src.auth.context import SessionContext
from src.auth.passwords import hash_password, hash_token, new_token, verify_password
from src.config import settings
from src.errors import AuthenticationError, DuplicateAccountError, NotFoundError
from src.events.bus import EventBus
from src.events.types import EntityCreated, UserSignedIn, UserSignedOut
from src.i18n.localize import parse_language
from src.models.account import AuthUser, Session
from src.models.base import Language
from src.models.profile import AppRole, Profile, UserRole
from src.repositories.account_repo import AuthUserRepository, SessionRepository
from src.repositories.profile_repo import ProfileRepository, RoleRepository

logger = structlog.get_logger()


@dataclass
class SignInResult:
    """A freshly opened session and the bearer token that unlocks it."""

    token: str
    session: Session
    user: AuthUser


class AuthService:
    """Owns the auth identity, profile and role rows of every account."""

    def __init__(
        self,
        users: AuthUserRepository,
        sessions: SessionRepository,
        profiles: ProfileRepository,
        roles: RoleRepository,
        event_bus: EventBus,
        require_email_verification: bool | None = None,
        initial_admin_emails: list[str] | None = None,
        session_ttl_hours: int | None = None,
        default_language: Language | None = None,
    ):
        self._users = users
        self._sessions = sessions
        self._profiles = profiles
        self._roles = roles
        self._bus = event_bus
        self.require_email_verification = (
            settings.require_email_verification
            if require_email_verification is None
            else require_email_verification
        )
        admins = (
            settings.initial_admin_emails
            if initial_admin_emails is None
            else initial_admin_emails
        )
        self._initial_admins = {email.strip().lower() for email in admins}
        self.session_ttl_hours = session_ttl_hours or settings.session_ttl_hours
        self.default_language = default_language or parse_language(
            settings.default_language
        )

    async def sign_up(self, email: str, password: str, full_name: str) -> AuthUser:
        """Create an account with its profile and initial role.

        The account starts unverified (unless verification is switched
        off); the verification token is logged for the operator to pass on.

        Raises:
            DuplicateAccountError: The e-mail already has an account
        """
        email = email.strip().lower()
        if await self._users.get_by_email(email):
            msg = f"Account already exists for {email}"
            raise DuplicateAccountError(msg)

        verified = not self.require_email_verification
        user = AuthUser(
            email=email,
            password_hash=hash_password(password),
            email_verified=verified,
            verification_token=None if verified else new_token(),
        )
        await self._users.insert(user)

        profile = Profile(user_id=user.id, full_name=full_name, email=email)
        await self._profiles.insert(profile)

        role = AppRole.CHAIRMAN if email in self._initial_admins else AppRole.STAFF
        await self._roles.insert(UserRole(user_id=user.id, role=role))

        await self._bus.publish_and_store(
            EntityCreated(
                actor_id=user.id,
                entity_type="profiles",
                entity_id=str(profile.id),
                new_values={
                    "full_name": full_name,
                    "email": email,
                    "role": role.value,
                },
            )
        )
        logger.info(
            "account_created",
            user_id=str(user.id),
            role=role.value,
            verification_token=user.verification_token,
        )
        return user

    async def verify_email(self, token: str) -> AuthUser:
        """Mark the account a verification token was issued to as verified.

        Raises:
            NotFoundError: Unknown or already used token
        """
        user = await self._users.get_by_verification_token(token)
        if user is None:
            raise NotFoundError("Unknown verification token")
        user = await self._users.update(
            user.id,
            {"email_verified": True, "verification_token": None},
        )
        logger.info("email_verified", user_id=str(user.id))
        return user

    async def sign_in(
        self,
        email: str,
        password: str,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> SignInResult:
        """Open a session for valid credentials.

        Raises:
            AuthenticationError: Wrong credentials or unverified e-mail
        """
        user = await self._users.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("sign_in_rejected", email=email.strip().lower())
            raise AuthenticationError(
                "Invalid credentials",
                message_key="auth.invalidCredentials",
            )
        if self.require_email_verification and not user.email_verified:
            raise AuthenticationError(
                "Email not verified",
                message_key="auth.emailNotVerified",
            )

        purged = await self._sessions.delete_expired()
        if purged:
            logger.info("expired_sessions_purged", count=purged)

        token = new_token()
        session = Session.open(user.id, hash_token(token), self.session_ttl_hours)
        await self._sessions.insert(session)

        await self._bus.publish_and_store(
            UserSignedIn(
                actor_id=user.id,
                entity_id=str(session.id),
                ip_address=ip_address,
                user_agent=user_agent,
            )
        )
        logger.info("signed_in", user_id=str(user.id), session_id=str(session.id))
        return SignInResult(token=token, session=session, user=user)

    async def load_context(
        self,
        token: str,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> SessionContext:
        """Build the request context for a bearer token.

        Raises:
            AuthenticationError: Unknown or expired token
        """
        session = await self._sessions.get_by_token_hash(hash_token(token))
        if session is None:
            raise AuthenticationError(
                "Unknown session",
                message_key="common.loginRequired",
            )
        if session.is_expired():
            await self._sessions.delete(session.id)
            raise AuthenticationError(
                "Session expired",
                message_key="auth.sessionExpired",
            )

        user = await self._users.get(session.user_id)
        if user is None:
            raise AuthenticationError(
                "Account no longer exists",
                message_key="common.loginRequired",
            )
        profile = await self._profiles.get_by_user_id(user.id)
        roles = await self._roles.role_set(user.id)

        language = session.language
        if language is None:
            language = profile.preferred_language if profile else self.default_language

        return SessionContext(
            user_id=user.id,
            email=user.email,
            session_id=session.id,
            profile=profile,
            roles=roles or {AppRole.STAFF},
            language=language,
            ip_address=ip_address,
            user_agent=user_agent,
        )

    async def sign_out(self, ctx: SessionContext) -> None:
        """Tear down the caller's session."""
        await self._sessions.delete(ctx.session_id)
        await self._bus.publish_and_store(
            UserSignedOut(entity_id=str(ctx.session_id), **ctx.audit_fields())
        )
        logger.info("signed_out", user_id=str(ctx.user_id))

    async def set_session_language(
        self,
        ctx: SessionContext,
        language: Language,
    ) -> SessionContext:
        """Switch the language of the caller's session only."""
        await self._sessions.set_language(ctx.session_id, language)
        ctx.language = language
        return ctx
