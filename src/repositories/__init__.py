"""Repository layer for data persistence.

Provides repository classes for persisting domain data to the database.
Every repository shares the ``TableRepository`` contract (fetch with
filters, insert, update by id, delete by id) and adds table-specific
lookups on top.
"""

from src.repositories.account_repo import AuthUserRepository, SessionRepository
from src.repositories.announcement_repo import AnnouncementRepository
from src.repositories.base import TableRepository
from src.repositories.complaint_repo import ComplaintRepository
from src.repositories.meeting_repo import DecisionRepository, MeetingRepository
from src.repositories.profile_repo import ProfileRepository, RoleRepository

__all__ = [
    "TableRepository",
    "AuthUserRepository",
    "SessionRepository",
    "ProfileRepository",
    "RoleRepository",
    "MeetingRepository",
    "DecisionRepository",
    "ComplaintRepository",
    "AnnouncementRepository",
]
