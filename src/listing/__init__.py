"""List/filter views over fetched rows.

Repositories fetch once per view with a row cap; everything here is a
pure function of those rows plus the search text and filter values.
"""

from src.listing.filters import ALL, empty_message, matches_filter, matches_search
from src.listing.schemas import AnnouncementStats, ComplaintStats, RoleStats, UserRow
from src.listing.views import (
    active_announcements,
    announcement_stats,
    complaint_stats,
    entity_types,
    filter_audit_log,
    filter_complaints,
    filter_decisions,
    filter_meetings,
    filter_users,
    role_stats,
    split_meetings,
)

__all__ = [
    "ALL",
    "empty_message",
    "matches_filter",
    "matches_search",
    "AnnouncementStats",
    "ComplaintStats",
    "RoleStats",
    "UserRow",
    "active_announcements",
    "announcement_stats",
    "complaint_stats",
    "entity_types",
    "filter_audit_log",
    "filter_complaints",
    "filter_decisions",
    "filter_meetings",
    "filter_users",
    "role_stats",
    "split_meetings",
]
