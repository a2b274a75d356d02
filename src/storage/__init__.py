"""File storage for uploaded documents."""

from src.storage.minutes_storage import MINUTES_BUCKET, MinutesStorage

__all__ = ["MINUTES_BUCKET", "MinutesStorage"]
