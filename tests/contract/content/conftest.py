"""Fixtures for content lookup contract tests."""

from collections.abc import Iterable
from dataclasses import dataclass

import pytest

from termshapes.adapters.content import (
    InMemoryAliasManager,
    InMemoryContentData,
    InMemoryContentManager,
    InMemoryTaxonomyTerms,
    load_content_data,
)
from termshapes.interfaces.content import AliasManager, ContentManager, TaxonomyTerms


@dataclass(frozen=True)
class ContentLookups:
    """The three content collaborators of one backend."""

    contents: ContentManager
    aliases: AliasManager
    terms: TaxonomyTerms


def _lookups(data: InMemoryContentData) -> ContentLookups:
    return ContentLookups(
        contents=InMemoryContentManager(data),
        aliases=InMemoryAliasManager(data),
        terms=InMemoryTaxonomyTerms(data),
    )


@pytest.fixture(params=["memory", "json-file"])
def content_lookups(
    request: pytest.FixtureRequest, content_data, content_file
) -> Iterable[ContentLookups]:
    """Return the content collaborators for the requested backend.

    Supported params:
      - `"memory"` → collaborators over a store filled in code
      - `"json-file"` → collaborators over a store loaded from a JSON export

    Both hold the Categories document.
    """

    match request.param:
        case "memory":
            yield _lookups(content_data)
        case "json-file":
            yield _lookups(load_content_data(content_file))
        case _:
            raise ValueError(f"unknown content backend: {request.param}")
