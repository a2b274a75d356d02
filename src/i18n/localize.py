"""Locale helpers: label lookup, bilingual fallback and date rendering.

Stored rows keep the primary (Malay) text and an optional English variant.
The fallback to the primary text happens here, at display time, and nowhere
else.
"""

from datetime import date, datetime

from src.i18n.translations import MONTH_ABBREVIATIONS, TRANSLATIONS
from src.models.base import Language, to_display_zone


def parse_language(
    value: str | Language | None,
    default: Language = Language.MS,
) -> Language:
    """Coerce a language code, falling back to ``default`` when unknown."""
    if isinstance(value, Language):
        return value
    if value:
        try:
            return Language(value.strip().lower())
        except ValueError:
            pass
    return default


def translate(key: str, language: Language | str) -> str:
    """Look up a label. Unknown keys render as the key itself."""
    lang = parse_language(language)
    return TRANSLATIONS[lang].get(key, key)


def resolve_localized_text(
    primary: str | None,
    translated: str | None,
    locale: Language | str,
) -> str:
    """Pick the text to display for a bilingual field.

    English is shown only when requested and actually filled in; in every
    other case the primary (Malay) text is returned.
    """
    if parse_language(locale) == Language.EN and translated and translated.strip():
        return translated
    return primary or ""


def _camel(value: str) -> str:
    head, *rest = value.split("_")
    return head + "".join(part.capitalize() for part in rest)


def status_label(area: str, status: str, language: Language | str) -> str:
    """Label for a status value.

    ``status_label("decisions", "in_progress", "en")`` -> "In Progress"
    """
    return translate(f"{area}.{_camel(status)}", language)


def format_date(value: date | datetime | None, language: Language | str) -> str:
    """Render ``dd MMM yyyy`` with localized month abbreviations.

    Datetimes are shown in the configured display zone; plain dates as is.
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        value = to_display_zone(value)
    months = MONTH_ABBREVIATIONS[parse_language(language)]
    return f"{value.day:02d} {months[value.month - 1]} {value.year}"


def format_datetime(value: datetime | None, language: Language | str) -> str:
    """Render ``dd MMM yyyy, HH:mm`` with localized month abbreviations."""
    if value is None:
        return ""
    value = to_display_zone(value)
    return f"{format_date(value, language)}, {value:%H:%M}"
