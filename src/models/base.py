"""Base entity class for all domain models."""

from datetime import UTC, date, datetime
from enum import Enum
from typing import Annotated
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from src.config import settings


class Language(str, Enum):
    """Interface languages. Malay is the primary language."""

    MS = "ms"
    EN = "en"


class Priority(str, Enum):
    """Priority shared by complaints and announcements."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def display_zone() -> ZoneInfo:
    """Zone dates are shown in and calendar days are counted in."""
    return ZoneInfo(settings.display_timezone)


def to_display_zone(value: datetime) -> datetime:
    return as_utc(value).astimezone(display_zone())


def local_today() -> date:
    """Today's date in the display zone."""
    return datetime.now(display_zone()).date()


UTCDatetime = Annotated[datetime, AfterValidator(as_utc)]


class BaseEntity(BaseModel):
    """Base class for all stored rows.

    Provides:
    - Unique ID (UUID)
    - Created/updated timestamps
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_default=True,
        from_attributes=True,
    )

    id: UUID = Field(default_factory=uuid4, description="Unique entity identifier")
    created_at: datetime = Field(
        default_factory=utc_now,
        description="When entity was created",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        description="When entity was last updated",
    )

