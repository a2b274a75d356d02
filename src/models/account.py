"""Auth identity and sign-in session models."""

from datetime import datetime, timedelta
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from src.models.base import Language, UTCDatetime, utc_now


class AuthUser(BaseModel):
    """Credentials for a portal account. Never returned over the API."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(default_factory=uuid4)
    email: str
    password_hash: str
    email_verified: bool = False
    verification_token: str | None = None
    created_at: UTCDatetime = Field(default_factory=utc_now)


class Session(BaseModel):
    """A signed-in session. Only the sha256 of the bearer token is stored."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(default_factory=uuid4)
    user_id: UUID
    token_hash: str
    language: Language | None = Field(
        default=None,
        description="Language switched for this session only",
    )
    created_at: UTCDatetime = Field(default_factory=utc_now)
    expires_at: UTCDatetime

    @classmethod
    def open(cls, user_id: UUID, token_hash: str, ttl_hours: int) -> "Session":
        """Create a session that expires ``ttl_hours`` from now."""
        now = utc_now()
        return cls(
            user_id=user_id,
            token_hash=token_hash,
            created_at=now,
            expires_at=now + timedelta(hours=ttl_hours),
        )

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the session is past its expiry."""
        return self.expires_at <= (now or utc_now())
