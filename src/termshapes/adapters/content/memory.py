"""In-memory content collaborators for tests and the CLI."""

from termshapes.domain.content import ContentItem
from termshapes.interfaces.content import AliasManager, ContentManager, TaxonomyTerms

from .memory_store import InMemoryContentData


class InMemoryContentManager(ContentManager):
    """In-memory implementation of the ContentManager interface."""

    def __init__(self, data: InMemoryContentData) -> None:
        self._data = data

    async def get(self, content_item_id: str) -> ContentItem | None:
        return self._data.items.get(content_item_id)


class InMemoryAliasManager(AliasManager):
    """In-memory implementation of the AliasManager interface."""

    def __init__(self, data: InMemoryContentData) -> None:
        self._data = data

    async def get_content_item_id(self, alias: str) -> str | None:
        return self._data.aliases.get(alias)


class InMemoryTaxonomyTerms(TaxonomyTerms):
    """Term lookups that walk a stored taxonomy's nested terms."""

    def __init__(self, data: InMemoryContentData) -> None:
        self._data = data

    async def get_term(
        self, taxonomy_content_item_id: str, term_content_item_id: str
    ) -> ContentItem | None:
        chain = self._term_hierarchy(taxonomy_content_item_id, term_content_item_id)
        return chain[0] if chain else None

    async def get_inherited_terms(
        self, taxonomy_content_item_id: str, term_content_item_id: str
    ) -> list[ContentItem] | None:
        return self._term_hierarchy(taxonomy_content_item_id, term_content_item_id)

    def _term_hierarchy(
        self, taxonomy_content_item_id: str, term_content_item_id: str
    ) -> list[ContentItem] | None:
        taxonomy = self._data.items.get(taxonomy_content_item_id)
        if taxonomy is None or taxonomy.taxonomy_part is None:
            return None
        chain: list[ContentItem] = []
        _find_term_hierarchy(taxonomy.taxonomy_part.terms, term_content_item_id, chain)
        return chain


def _find_term_hierarchy(
    terms: tuple[ContentItem, ...], term_content_item_id: str, chain: list[ContentItem]
) -> bool:
    """Append the matching term, then each of its ancestors, to *chain*."""
    for term in terms:
        if term.content_item_id == term_content_item_id:
            chain.append(term)
            return True
        if _find_term_hierarchy(term.child_terms, term_content_item_id, chain):
            chain.append(term)
            return True
    return False
