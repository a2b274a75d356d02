"""Repositories for auth identities and sign-in sessions."""

from datetime import datetime
from uuid import UUID

from src.models.account import AuthUser, Session
from src.models.base import Language, utc_now
from src.repositories.base import TableRepository, to_db_value


class AuthUserRepository(TableRepository[AuthUser]):
    """Credentials table. E-mails are stored lower-cased."""

    table = "auth_users"
    model = AuthUser
    columns = (
        "id",
        "email",
        "password_hash",
        "email_verified",
        "verification_token",
        "created_at",
    )

    async def get_by_email(self, email: str) -> AuthUser | None:
        """Look up an identity by e-mail, case-insensitively."""
        rows = await self.select({"email": email.strip().lower()}, limit=1)
        return rows[0] if rows else None

    async def get_by_verification_token(self, token: str) -> AuthUser | None:
        """Look up the identity a verification token was issued to."""
        rows = await self.select({"verification_token": token}, limit=1)
        return rows[0] if rows else None


class SessionRepository(TableRepository[Session]):
    """Sign-in sessions keyed by the hash of their bearer token."""

    table = "sessions"
    model = Session
    columns = ("id", "user_id", "token_hash", "language", "created_at", "expires_at")

    async def get_by_token_hash(self, token_hash: str) -> Session | None:
        """Fetch the session a bearer token belongs to."""
        rows = await self.select({"token_hash": token_hash}, limit=1)
        return rows[0] if rows else None

    async def set_language(
        self,
        session_id: UUID | str,
        language: Language,
    ) -> Session:
        """Switch the language of one session."""
        return await self.update(session_id, {"language": language})

    async def delete_expired(self, now: datetime | None = None) -> int:
        """Remove sessions past their expiry. Returns rows removed."""
        result = await self._db.execute(
            "DELETE FROM sessions WHERE expires_at <= ?",
            [to_db_value(now or utc_now())],
        )
        return result.rows_affected
