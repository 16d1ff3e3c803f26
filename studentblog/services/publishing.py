"""
Publish date handling
"""
from datetime import datetime, timezone
from typing import Optional, Union

from studentblog.core.exceptions import InvalidPublishDateError


def parse_published_at(value: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Parse a publishedAt input into a naive UTC datetime

    Args:
        value: None, an empty string, a datetime or an ISO-8601 string

    Returns:
        datetime or None

    Raises:
        InvalidPublishDateError: the value is not a recognizable timestamp
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidPublishDateError(f"Invalid publish date: {value!r}")
    else:
        raise InvalidPublishDateError(f"Invalid publish date: {value!r}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def normalize_published_at(
    is_draft: bool,
    published_at: Optional[datetime],
    now: Optional[datetime] = None
) -> Optional[datetime]:
    """
    Stamp a publish date on posts that go live without one

    A published post always carries published_at. Drafts keep whatever value
    they were given, including an earlier publish date.
    """
    if not is_draft and published_at is None:
        return now or utcnow()
    return published_at
