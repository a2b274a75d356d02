"""Bilingual (Malay / English) support.

Provides:
- translate: Static label lookup
- resolve_localized_text: The single bilingual fallback rule
- format_date / format_datetime: Localized date rendering
"""

from src.i18n.localize import (
    format_date,
    format_datetime,
    parse_language,
    resolve_localized_text,
    status_label,
    translate,
)
from src.i18n.translations import TRANSLATIONS

__all__ = [
    "TRANSLATIONS",
    "format_date",
    "format_datetime",
    "parse_language",
    "resolve_localized_text",
    "status_label",
    "translate",
]
