"""Shape commands: render a taxonomy, list alternates, format names.

Behavior
- Rendered output (Rich tree or ``--json``) goes to **stdout**; notices go to
  **stderr** so output stays pipeable.
- A taxonomy reference that does not resolve is not an error: ``render``
  prints a warning and exits 0, matching how a host renders nothing.

Requirements
- ``render`` reads a JSON content export, either given as an argument or
  through ``TERMSHAPES_CONTENT_PATH``.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import click
from rich.console import Console

from termshapes import config
from termshapes.adapters.content import ContentFileError
from termshapes.bootstrap import bootstrap_from_file
from termshapes.domain import alternates as alternate_names
from termshapes.domain.shapes import ShapeKind
from termshapes.utils.naming import to_pascal_identifier

from .helpers import warn
from .helpers.tree import shape_to_dict, shape_to_tree

MISSING_CONTENT_PATH_MSG = (
    "No content file given and TERMSHAPES_CONTENT_PATH is not set.\n\n"
    "Pass the file as an argument, or set it before running this command, e.g.:\n"
    "  export TERMSHAPES_CONTENT_PATH=./content.json"
)

REFERENCE_REQUIRED_MSG = "Provide exactly one of --taxonomy or --alias."

NOTHING_TO_RENDER_MSG = "Nothing to render for {reference}."


def _get_content_path(content_file: Path | None) -> Path:
    if content_file is not None:
        return content_file
    try:
        return config.get_content_path()
    except config.ContentPathNotSetError as e:
        raise click.ClickException(MISSING_CONTENT_PATH_MSG) from e


def _describe_reference(
    taxonomy_content_item_id: str | None,
    alias: str | None,
    term_content_item_id: str | None,
) -> str:
    reference = (
        f"alias '{alias}'"
        if alias is not None
        else f"taxonomy '{taxonomy_content_item_id}'"
    )
    if term_content_item_id:
        reference += f" (term '{term_content_item_id}')"
    return reference


@click.command()
@click.argument(
    "content_file",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
)
@click.option(
    "--taxonomy",
    "taxonomy_content_item_id",
    help="Content item id of the taxonomy to render.",
)
@click.option("--alias", help="Alias resolving to the taxonomy to render.")
@click.option(
    "--term",
    "term_content_item_id",
    help="Render the inherited hierarchy of this term instead of the whole taxonomy.",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=0),
    default=None,
    help="Number of term levels to render (deeper terms are never built).",
)
@click.option("--json", "as_json", is_flag=True, help="Print the shape tree as JSON.")
def render(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    content_file: Path | None,
    taxonomy_content_item_id: str | None,
    alias: str | None,
    term_content_item_id: str | None,
    max_depth: int | None,
    as_json: bool,
) -> None:
    """Render a taxonomy's term shapes with their alternates."""
    if (taxonomy_content_item_id is None) == (alias is None):
        raise click.UsageError(REFERENCE_REQUIRED_MSG)

    path = _get_content_path(content_file)
    try:
        container = bootstrap_from_file(path)
    except ContentFileError as e:
        raise click.ClickException(str(e)) from e

    shape = asyncio.run(
        container.display_manager.display_term(
            taxonomy_content_item_id=taxonomy_content_item_id,
            alias=alias,
            term_content_item_id=term_content_item_id,
            max_depth=max_depth,
        )
    )

    if not shape.items and not len(shape.alternates):
        warn(
            NOTHING_TO_RENDER_MSG.format(
                reference=_describe_reference(
                    taxonomy_content_item_id, alias, term_content_item_id
                )
            )
        )

    if as_json:
        click.echo(json.dumps(shape_to_dict(shape), indent=2))
    else:
        Console().print(shape_to_tree(shape))


@click.command()
@click.argument(
    "kind",
    type=click.Choice([kind.value for kind in ShapeKind], case_sensitive=False),
)
@click.option(
    "--content-type",
    required=True,
    help="Term content type, e.g. Category.",
)
@click.option(
    "--level",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Term level (TermItem and TermContentItem only).",
)
@click.option(
    "--name",
    help="Taxonomy display name the differentiator is derived from.",
)
@click.option(
    "--display-type",
    default=config.DEFAULT_DISPLAY_TYPE,
    show_default=True,
    help="Display type (TermPart only).",
)
@click.option("--json", "as_json", is_flag=True, help="Print the names as JSON.")
def alternates(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    kind: str,
    content_type: str,
    level: int,
    name: str | None,
    display_type: str,
    as_json: bool,
) -> None:
    """List the alternates of a single shape KIND, least specific first."""
    shape_kind = ShapeKind(kind)
    differentiator = to_pascal_identifier(name)

    if shape_kind is ShapeKind.TERM:
        names = alternate_names.build_term_alternates(content_type, differentiator)
    elif shape_kind is ShapeKind.TERM_PART:
        names = alternate_names.build_term_part_alternates(content_type, display_type)
    else:
        names = alternate_names.build_level_alternates(
            shape_kind, content_type, level, differentiator
        )

    if as_json:
        click.echo(json.dumps(names))
    else:
        for alternate in names:
            click.echo(alternate)


@click.command(name="format-name")
@click.argument("name")
def format_name(name: str) -> None:
    """Print NAME as a PascalCase alternate fragment ("foo-ba r" -> "FooBaR")."""
    click.echo(to_pascal_identifier(name) or "")
