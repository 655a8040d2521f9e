"""Content adapters: in-memory lookups and the JSON content loader."""

from .errors import ContentFileError, ContentFileNotFoundError, InvalidContentFileError
from .json_file import load_content_data
from .memory import InMemoryAliasManager, InMemoryContentManager, InMemoryTaxonomyTerms
from .memory_store import InMemoryContentData

__all__ = [
    "ContentFileError",
    "ContentFileNotFoundError",
    "InMemoryAliasManager",
    "InMemoryContentData",
    "InMemoryContentManager",
    "InMemoryTaxonomyTerms",
    "InvalidContentFileError",
    "load_content_data",
]
