"""Input schemas for the create/edit forms.

Each schema validates required fields, length bounds and formats before a
service touches the database. Edit forms submit the whole form, so the same
schema serves create and update. Blank optional text is stored as NULL,
never as a copy of the primary field.
"""

from datetime import date
from typing import Annotated
from uuid import UUID

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    field_validator,
    model_validator,
)

from src.models.announcement import AnnouncementCategory
from src.models.base import Language, Priority, UTCDatetime
from src.models.complaint import ComplaintCategory, ComplaintStatus, ComplaintType
from src.models.decision import DecisionStatus
from src.models.meeting import MeetingStatus
from src.models.profile import AppRole

MAX_EMAIL_LENGTH = 255


def _check_email_length(value):
    if isinstance(value, str) and len(value.strip()) > MAX_EMAIL_LENGTH:
        msg = f"Email must be at most {MAX_EMAIL_LENGTH} characters"
        raise ValueError(msg)
    return value


Email = Annotated[EmailStr, BeforeValidator(_check_email_length)]


class FormInput(BaseModel):
    """Base for form payloads: trims text and turns blank optionals into None."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty strings as missing values."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class MeetingInput(FormInput):
    """Meeting form."""

    title: str = Field(min_length=1, max_length=500)
    title_en: str | None = Field(default=None, max_length=500)
    description: str | None = None
    description_en: str | None = None
    meeting_date: UTCDatetime
    location: str | None = Field(default=None, max_length=300)
    status: MeetingStatus = MeetingStatus.SCHEDULED


class DecisionInput(FormInput):
    """Decision form. ``overdue`` is not a status that can be submitted."""

    decision_number: str = Field(min_length=1, max_length=50)
    title: str = Field(min_length=1, max_length=500)
    title_en: str | None = Field(default=None, max_length=500)
    description: str = Field(min_length=1)
    description_en: str | None = None
    responsible_party: str | None = Field(default=None, max_length=200)
    due_date: date | None = None
    status: DecisionStatus = DecisionStatus.PENDING
    meeting_id: UUID | None = None


class ComplaintInput(FormInput):
    """New complaint or suggestion form."""

    type: ComplaintType = ComplaintType.COMPLAINT
    category: ComplaintCategory
    subject: str = Field(min_length=5, max_length=200)
    description: str = Field(min_length=10, max_length=5000)
    priority: Priority = Priority.NORMAL


class ComplaintStatusInput(FormInput):
    """Committee action on a complaint."""

    status: ComplaintStatus
    resolution: str | None = Field(default=None, max_length=5000)
    assigned_to: UUID | None = None


class AnnouncementInput(FormInput):
    """Announcement form."""

    title: str = Field(min_length=5, max_length=200)
    title_en: str | None = Field(default=None, max_length=200)
    content: str = Field(min_length=10, max_length=5000)
    content_en: str | None = Field(default=None, max_length=5000)
    category: AnnouncementCategory = AnnouncementCategory.GENERAL
    priority: Priority = Priority.NORMAL
    is_pinned: bool = False
    published_at: UTCDatetime | None = None
    expires_at: UTCDatetime | None = None


class ProfileInput(FormInput):
    """Profile form."""

    full_name: str = Field(min_length=2, max_length=100)
    email: Email
    phone: str | None = Field(default=None, max_length=20)
    department: str | None = Field(default=None, max_length=100)
    position: str | None = Field(default=None, max_length=100)


class LanguageInput(FormInput):
    """Language switch."""

    language: Language


class AccountInput(BaseModel):
    """Base for the account forms.

    Names and addresses are trimmed; passwords are kept exactly as typed.
    """

    model_config = ConfigDict(extra="forbid")

    @field_validator("email", "full_name", mode="before", check_fields=False)
    @classmethod
    def strip_text(cls, v):
        """Trim text fields, treating blank ones as missing."""
        if isinstance(v, str):
            return v.strip() or None
        return v


class SignUpInput(AccountInput):
    """Registration form."""

    email: Email
    password: str = Field(min_length=6, max_length=100)
    confirm_password: str
    full_name: str = Field(min_length=2, max_length=100)

    @model_validator(mode="after")
    def passwords_match(self) -> "SignUpInput":
        """Ensure the confirmation matches the password."""
        if self.password != self.confirm_password:
            msg = "Passwords do not match"
            raise ValueError(msg)
        return self


class SignInInput(AccountInput):
    """Login form."""

    email: Email
    password: str = Field(min_length=1, max_length=100)


class VerifyEmailInput(FormInput):
    """E-mail verification."""

    token: str = Field(min_length=1)


class RoleChangeInput(FormInput):
    """Role change from the admin user list.

    ``confirm`` stands for the confirmation dialog and must be true.
    """

    role: AppRole
    confirm: bool = False
