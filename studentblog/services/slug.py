"""
Slug helpers

`slugify` turns a title into a URL-safe candidate; `resolve_unique_slug`
makes a candidate unique against the posts table by appending -1, -2, ...
"""
import logging
import re
import unicodedata
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

SLUG_PATTERN = r"^[a-z0-9-]+$"
SLUG_MIN_LENGTH = 3
# leaves room in posts.slug (255) for a -N suffix
SLUG_MAX_LENGTH = 200

# (slug, exclude_id) -> does another post already use slug?
ExistsCheck = Callable[[str, Optional[int]], Awaitable[bool]]


def slugify(text: str) -> str:
    """
    Normalize a title into a slug candidate

    "Introducción a los Mercados!" -> "introduccion-a-los-mercados"
    """
    value = unicodedata.normalize("NFKD", text or "")
    value = value.encode("ascii", "ignore").decode("ascii").lower()
    value = re.sub(r"[^a-z0-9\s_-]", "", value)
    value = re.sub(r"[\s_]+", "-", value)
    value = re.sub(r"-{2,}", "-", value).strip("-")
    value = value[:SLUG_MAX_LENGTH].rstrip("-")
    return value or "post"


async def resolve_unique_slug(
    candidate: str,
    exists: ExistsCheck,
    exclude_id: Optional[int] = None
) -> str:
    """
    Return the first of candidate, candidate-1, candidate-2, ... that is free

    The candidate must already be normalized. Nothing is written here and
    errors raised by `exists` propagate to the caller untouched.

    Args:
        candidate: desired slug
        exists: async predicate, True when a post other than exclude_id uses the slug
        exclude_id: id of the post being updated, so it can keep its own slug

    Returns:
        str: a slug for which exists(slug, exclude_id) was False
    """
    resolved = candidate
    counter = 1

    while await exists(resolved, exclude_id):
        logger.debug("Slug '%s' is taken, trying suffix %d", resolved, counter)
        resolved = f"{candidate}-{counter}"
        counter += 1

    return resolved
