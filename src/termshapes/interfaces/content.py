"""Interfaces for fetching externally owned content.

All lookups are asynchronous and report absence with ``None`` rather than
raising: a missing taxonomy, alias or term is not an error.
"""

import abc

from termshapes.domain.content import ContentItem

# pylint: disable=too-few-public-methods


class ContentManager(abc.ABC):
    """Contract for retrieving content items by id."""

    @abc.abstractmethod
    async def get(self, content_item_id: str) -> ContentItem | None:
        """Get the latest version of a content item.

        Args:
            content_item_id: The content item id.

        Returns:
            The content item if found, otherwise None.
        """


class AliasManager(abc.ABC):
    """Contract for resolving content aliases."""

    @abc.abstractmethod
    async def get_content_item_id(self, alias: str) -> str | None:
        """Resolve an alias to a content item id.

        Args:
            alias: A lookup alias, e.g. ``"alias:categories"``.

        Returns:
            The content item id if the alias is known, otherwise None.
        """


class TaxonomyTerms(abc.ABC):
    """Contract for looking up terms inside a taxonomy."""

    @abc.abstractmethod
    async def get_term(
        self, taxonomy_content_item_id: str, term_content_item_id: str
    ) -> ContentItem | None:
        """Find a term anywhere in a taxonomy's hierarchy.

        Returns:
            The term if found, otherwise None.
        """

    @abc.abstractmethod
    async def get_inherited_terms(
        self, taxonomy_content_item_id: str, term_content_item_id: str
    ) -> list[ContentItem] | None:
        """Get a term together with the terms it inherits from.

        Returns:
            The term followed by its parent, grandparent and so on up to the
            top level of the taxonomy; None if the taxonomy is not found.
        """
