"""Read-only JSON content loader.

Loads a content export into an :class:`InMemoryContentData` store. The file
holds a list of content items and an optional alias table:

```json
{
  "items": [{"content_item_id": "tax-1", "content_type": "Taxonomy", ...}],
  "aliases": {"alias:categories": "tax-1"}
}
```

Nothing is ever written back.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from termshapes.domain.content import ContentItem
from termshapes.domain.errors import InvalidContentItemError

from .errors import ContentFileNotFoundError, InvalidContentFileError
from .memory_store import InMemoryContentData

logger = logging.getLogger(__name__)


def load_content_data(path: Path) -> InMemoryContentData:
    """Load a JSON content export.

    Args:
        path: Path of the JSON file.

    Returns:
        InMemoryContentData: A store holding every item and alias of the file.

    Raises:
        ContentFileNotFoundError: If *path* does not exist.
        InvalidContentFileError: If the file is not JSON or does not follow
            the content document layout.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ContentFileNotFoundError(path) from e

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidContentFileError(path, f"not valid JSON ({e.msg})") from e

    if not isinstance(document, Mapping):
        raise InvalidContentFileError(path, "top level must be an object")

    items = document.get("items", [])
    aliases = document.get("aliases", {})
    if not isinstance(items, list):
        raise InvalidContentFileError(path, "'items' must be a list")
    if not isinstance(aliases, Mapping) or not all(
        isinstance(value, str) for value in aliases.values()
    ):
        raise InvalidContentFileError(path, "'aliases' must map aliases to ids")

    data = InMemoryContentData()
    for index, values in enumerate(items):
        if not isinstance(values, Mapping):
            raise InvalidContentFileError(path, f"item {index} is not an object")
        try:
            data.add(ContentItem.from_dict(values))
        except InvalidContentItemError as e:
            raise InvalidContentFileError(path, f"item {index}: {e}") from e
    data.aliases.update(aliases)

    logger.debug(
        "Loaded %d content items and %d aliases from %s",
        len(data.items),
        len(data.aliases),
        path,
    )
    return data
