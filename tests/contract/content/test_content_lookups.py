"""Contract tests for the content lookup collaborators."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest

from tests.fixtures.content import TAXONOMY_ALIAS, TAXONOMY_ID

if TYPE_CHECKING:
    from tests.contract.content.conftest import ContentLookups

# pylint: disable=magic-value-comparison


def ids(items) -> list[str]:
    """Content item ids of *items*, in order."""
    return [item.content_item_id for item in items]


# --- ContentManager ---


def test_get_returns_content_item(content_lookups: ContentLookups) -> None:
    """get() returns the stored content item."""
    item = asyncio.run(content_lookups.contents.get(TAXONOMY_ID))
    assert item is not None
    assert item.content_item_id == TAXONOMY_ID
    assert item.display_text == "Categories"


def test_get_unknown_returns_none(content_lookups: ContentLookups) -> None:
    """get() reports absence with None."""
    assert asyncio.run(content_lookups.contents.get("missing")) is None


# --- AliasManager ---


def test_alias_resolves_to_content_item_id(content_lookups: ContentLookups) -> None:
    """get_content_item_id() resolves a known alias."""
    resolved = asyncio.run(content_lookups.aliases.get_content_item_id(TAXONOMY_ALIAS))
    assert resolved == TAXONOMY_ID


def test_unknown_alias_returns_none(content_lookups: ContentLookups) -> None:
    """get_content_item_id() reports an unknown alias with None."""
    assert asyncio.run(content_lookups.aliases.get_content_item_id("nope")) is None


# --- TaxonomyTerms ---


@pytest.mark.parametrize("term_id", ["t-travel", "t-europe", "t-paris", "t-food"])
def test_get_term_at_any_depth(content_lookups: ContentLookups, term_id) -> None:
    """get_term() finds terms at any depth of the taxonomy."""
    term = asyncio.run(content_lookups.terms.get_term(TAXONOMY_ID, term_id))
    assert term is not None
    assert term.content_item_id == term_id


@pytest.mark.parametrize(
    "taxonomy_id, term_id",
    [(TAXONOMY_ID, "t-missing"), ("missing", "t-travel"), ("page-1", "t-travel")],
    ids=["unknown-term", "unknown-taxonomy", "not-a-taxonomy"],
)
def test_get_term_absent(content_lookups: ContentLookups, taxonomy_id, term_id) -> None:
    """get_term() reports absence with None."""
    assert asyncio.run(content_lookups.terms.get_term(taxonomy_id, term_id)) is None


@pytest.mark.parametrize(
    "term_id, expected",
    [
        ("t-travel", ["t-travel"]),
        ("t-asia", ["t-asia", "t-travel"]),
        ("t-paris", ["t-paris", "t-europe", "t-travel"]),
    ],
)
def test_inherited_terms_list_term_then_ancestors(
    content_lookups: ContentLookups, term_id, expected
) -> None:
    """get_inherited_terms() returns the term followed by its ancestors."""
    terms = asyncio.run(content_lookups.terms.get_inherited_terms(TAXONOMY_ID, term_id))
    assert terms is not None
    assert ids(terms) == expected


def test_inherited_terms_of_unknown_term_is_empty(
    content_lookups: ContentLookups,
) -> None:
    """An unknown term within a known taxonomy has no hierarchy."""
    terms = asyncio.run(
        content_lookups.terms.get_inherited_terms(TAXONOMY_ID, "t-missing")
    )
    assert not terms


def test_inherited_terms_of_unknown_taxonomy_is_none(
    content_lookups: ContentLookups,
) -> None:
    """get_inherited_terms() reports an unknown taxonomy with None."""
    assert (
        asyncio.run(content_lookups.terms.get_inherited_terms("missing", "t-travel"))
        is None
    )


def test_concurrent_lookups(content_lookups: ContentLookups) -> None:
    """Lookups may run concurrently on the same event loop."""

    async def lookup_all():
        return await asyncio.gather(
            content_lookups.contents.get(TAXONOMY_ID),
            content_lookups.aliases.get_content_item_id(TAXONOMY_ALIAS),
            content_lookups.terms.get_term(TAXONOMY_ID, "t-paris"),
            *(content_lookups.contents.get("page-1") for _ in range(10)),
        )

    taxonomy, resolved, paris, *pages = asyncio.run(lookup_all())
    assert taxonomy.content_item_id == TAXONOMY_ID
    assert resolved == TAXONOMY_ID
    assert paris.display_text == "Paris"
    assert {page.content_item_id for page in pages} == {"page-1"}
