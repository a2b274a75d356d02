"""Search and filter predicates shared by every list view.

Lists are fetched once per view (capped) and narrowed in memory, so
these are plain functions over already-loaded rows.
"""

from enum import Enum
from typing import Any

from src.i18n.localize import translate
from src.models.base import Language

# Filter value meaning "no filter"
ALL = "all"


def matches_search(query: str | None, *fields: str | None) -> bool:
    """Case-insensitive substring match against any of ``fields``.

    A blank query matches everything; None fields never match.
    """
    if not query or not query.strip():
        return True
    needle = query.strip().casefold()
    return any(field and needle in field.casefold() for field in fields)


def matches_filter(value: Any, wanted: str | None) -> bool:
    """Equality filter where None or ``"all"`` means no filter."""
    if wanted is None or wanted == ALL:
        return True
    if isinstance(value, Enum):
        value = value.value
    return str(value) == str(wanted)


def empty_message(items: list, language: Language | str) -> str | None:
    """Placeholder text for an empty list, None otherwise."""
    if items:
        return None
    return translate("common.noData", language)
