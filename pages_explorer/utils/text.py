# /utils/text.py
# Text helpers for the repository cards: description truncation, date formatting and search normalization.
from datetime import datetime, timezone


NO_DESCRIPTION = "No description available"

# en-US abbreviations, independent of the process locale
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def truncate_description(description: str | None, max_chars: int = 120) -> str:
    if not description:
        return NO_DESCRIPTION
    if len(description) <= max_chars:
        return description
    return description[:max_chars] + "..."


def format_updated_date(value: datetime) -> str:
    # e.g. "Oct 7, 2026"
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return f"{MONTHS[value.month - 1]} {value.day}, {value.year}"


def normalize_term(term: str | None) -> str:
    # no trimming: spaces are part of the substring being searched for
    return (term or "").lower()
