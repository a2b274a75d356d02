"""Repository for announcements."""

from src.models.announcement import Announcement
from src.repositories.base import TableRepository


class AnnouncementRepository(TableRepository[Announcement]):
    """Announcements. Expired rows are kept; listings filter them out."""

    table = "announcements"
    model = Announcement
    columns = (
        "id",
        "created_at",
        "updated_at",
        "title",
        "title_en",
        "content",
        "content_en",
        "category",
        "priority",
        "is_pinned",
        "published_at",
        "expires_at",
        "created_by",
    )
