"""
Slug normalization and unique-slug resolution
"""
import pytest

from studentblog.services.slug import SLUG_MAX_LENGTH, resolve_unique_slug, slugify


def taken(*slugs):
    """Exists-check over a fixed set of slugs, recording every probe"""
    existing = set(slugs)
    probes = []

    async def exists(slug, exclude_id=None):
        probes.append(slug)
        return slug in existing

    exists.probes = probes
    return exists


def owned(records):
    """Exists-check over {slug: post_id}, honouring exclude_id"""
    async def exists(slug, exclude_id=None):
        return slug in records and records[slug] != exclude_id

    return exists


async def test_free_candidate_is_returned_unchanged():
    exists = taken("other-post")
    assert await resolve_unique_slug("intro-to-markets", exists) == "intro-to-markets"
    assert exists.probes == ["intro-to-markets"]


async def test_single_collision_gets_first_suffix():
    assert await resolve_unique_slug("intro", taken("intro")) == "intro-1"


async def test_double_collision_gets_second_suffix():
    assert await resolve_unique_slug("intro", taken("intro", "intro-1")) == "intro-2"


async def test_smallest_free_suffix_wins():
    assert await resolve_unique_slug("intro", taken("intro", "intro-1", "intro-3")) == "intro-2"


async def test_suffixes_are_appended_to_the_candidate_not_stacked():
    exists = taken("a", "a-1", "a-2")
    assert await resolve_unique_slug("a", exists) == "a-3"
    assert exists.probes == ["a", "a-1", "a-2", "a-3"]


async def test_existing_markets_scenario():
    exists = taken("intro-to-markets", "intro-to-markets-1")
    assert await resolve_unique_slug("intro-to-markets", exists) == "intro-to-markets-2"


async def test_post_keeps_its_own_slug_when_excluded():
    exists = owned({"intro": 7})
    assert await resolve_unique_slug("intro", exists, exclude_id=7) == "intro"


async def test_exclusion_does_not_hide_other_posts():
    exists = owned({"intro": 7, "intro-1": 8})
    assert await resolve_unique_slug("intro", exists, exclude_id=8) == "intro-1"
    assert await resolve_unique_slug("intro", exists, exclude_id=9) == "intro-2"


async def test_probes_are_bounded_by_largest_colliding_suffix():
    exists = taken("c", "c-1", "c-2", "c-3", "c-4")
    assert await resolve_unique_slug("c", exists) == "c-5"
    # five collisions plus the final free probe
    assert len(exists.probes) == 6
    assert len(set(exists.probes)) == len(exists.probes)


async def test_store_errors_propagate():
    async def unreachable(slug, exclude_id=None):
        raise ConnectionError("database is down")

    with pytest.raises(ConnectionError):
        await resolve_unique_slug("intro", unreachable)


@pytest.mark.parametrize("title, expected", [
    ("Intro to Markets", "intro-to-markets"),
    ("Introducción a los Mercados!", "introduccion-a-los-mercados"),
    ("Legislación Laboral", "legislacion-laboral"),
    ("  Hello   World  ", "hello-world"),
    ("C++ & Python 3", "c-python-3"),
    ("already--hyphenated--", "already-hyphenated"),
    ("snake_case_title", "snake-case-title"),
    ("!!!", "post"),
    ("", "post"),
])
def test_slugify(title, expected):
    assert slugify(title) == expected


def test_slugify_caps_long_titles():
    assert slugify("a" * 255) == "a" * SLUG_MAX_LENGTH
    # cut lands right after a word, so no dangling hyphen
    assert slugify("b" * (SLUG_MAX_LENGTH - 1) + " tail") == "b" * (SLUG_MAX_LENGTH - 1)
