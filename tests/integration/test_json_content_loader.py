"""Integration tests for the JSON content loader against real files."""

import pytest

from termshapes.adapters.content import (
    ContentFileError,
    ContentFileNotFoundError,
    InvalidContentFileError,
    load_content_data,
)
from tests.fixtures.content import TAXONOMY_ALIAS, TAXONOMY_ID

# pylint: disable=magic-value-comparison


def test_loads_items_and_aliases(content_file):
    """Every item and alias of the document is loaded."""
    data = load_content_data(content_file)

    assert set(data.items) == {TAXONOMY_ID, "page-1"}
    assert data.aliases[TAXONOMY_ALIAS] == TAXONOMY_ID
    taxonomy = data.items[TAXONOMY_ID]
    assert taxonomy.display_text == "Categories"
    assert taxonomy.taxonomy_part is not None
    assert taxonomy.taxonomy_part.term_content_type == "Category"


def test_accepts_string_paths(content_file):
    """Paths may be given as strings."""
    assert TAXONOMY_ID in load_content_data(str(content_file)).items


def test_aliases_are_optional(write_content_file):
    """A document without aliases loads with an empty alias table."""
    path = write_content_file(
        {"items": [{"content_item_id": "x", "content_type": "Page"}]}
    )
    data = load_content_data(path)
    assert list(data.items) == ["x"]
    assert data.aliases == {}


def test_empty_document(write_content_file):
    """An empty object is a valid, empty document."""
    data = load_content_data(write_content_file({}))
    assert data.items == {}
    assert data.aliases == {}


def test_logs_summary(content_file, caplog):
    """Loading logs how much content was read."""
    with caplog.at_level("DEBUG", logger="termshapes"):
        load_content_data(content_file)
    assert f"Loaded 2 content items and 2 aliases from {content_file}" in [
        rec.getMessage() for rec in caplog.records
    ]


def test_missing_file(tmp_path):
    """A missing file raises ContentFileNotFoundError."""
    path = tmp_path / "missing.json"
    with pytest.raises(ContentFileNotFoundError) as excinfo:
        load_content_data(path)
    assert excinfo.value.path == path
    assert str(excinfo.value) == f"Content file {path} not found"
    assert isinstance(excinfo.value, ContentFileError)


@pytest.mark.parametrize(
    "document, reason",
    [
        ("{not json", "not valid JSON"),
        ([], "top level must be an object"),
        ({"items": {}}, "'items' must be a list"),
        ({"aliases": ["a"]}, "'aliases' must map aliases to ids"),
        ({"aliases": {"a": 1}}, "'aliases' must map aliases to ids"),
        ({"items": ["x"]}, "item 0 is not an object"),
        (
            {"items": [{"content_item_id": "x"}]},
            "item 0: Content item record is missing required field 'content_type'",
        ),
    ],
    ids=[
        "bad-json",
        "top-level-list",
        "items-not-list",
        "aliases-not-mapping",
        "alias-not-string",
        "item-not-object",
        "item-missing-field",
    ],
)
def test_invalid_documents(write_content_file, document, reason):
    """Malformed documents raise InvalidContentFileError naming the problem."""
    path = write_content_file(document)
    with pytest.raises(InvalidContentFileError) as excinfo:
        load_content_data(path)
    assert reason in str(excinfo.value)
    assert str(excinfo.value).startswith(f"Invalid content file {path}: ")
