"""Canonical data models for the MBJ Digital Portal.

This module exports all domain models used throughout the application:
- BaseEntity: Base class with id, timestamps
- AuthUser / Session: Credentials and sign-in sessions
- Profile / UserRole: Identity details and role assignments
- Meeting: Council meetings with optional minutes
- Decision: Council decisions with derived overdue status
- Complaint: Complaints and suggestions with resolution tracking
- Announcement: Staff announcements with pinning and expiry
- AuditLogEntry: Append-only audit trail rows
"""

from src.models.account import AuthUser, Session
from src.models.announcement import Announcement, AnnouncementCategory
from src.models.audit import AuditAction, AuditLogEntry
from src.models.base import BaseEntity, Language, Priority
from src.models.complaint import (
    Complaint,
    ComplaintCategory,
    ComplaintStatus,
    ComplaintType,
)
from src.models.decision import Decision, DecisionDisplayStatus, DecisionStatus
from src.models.meeting import Meeting, MeetingStatus
from src.models.profile import AppRole, Profile, UserRole

__all__ = [
    # Base
    "BaseEntity",
    "Language",
    "Priority",
    # Identity
    "AuthUser",
    "Session",
    "AppRole",
    "Profile",
    "UserRole",
    # Meetings & decisions
    "Meeting",
    "MeetingStatus",
    "Decision",
    "DecisionStatus",
    "DecisionDisplayStatus",
    # Complaints
    "Complaint",
    "ComplaintCategory",
    "ComplaintStatus",
    "ComplaintType",
    # Announcements
    "Announcement",
    "AnnouncementCategory",
    # Audit
    "AuditAction",
    "AuditLogEntry",
]
