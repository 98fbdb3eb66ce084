"""Codeflix category CLI: a development and inspection tool.

Builds a category from command-line options, runs it through the domain's
validation rules and prints the result. It is a convenience for checking
category data by hand and for exercising the wiring in `codeflix_catalog.bootstrap`;
it is not part of the Category contract. Nothing is stored and nothing is
looked up, so repeated runs are independent.

Output
- Field listing (or JSON with ``--json``) goes to **stdout**.
- Notices go to **stderr**.

Failure modes
- Invalid name/description → ``ClickException`` carrying the validation message.
- Unknown ``CODEFLIX_ID_GENERATOR`` → ``ClickException``.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import click

from codeflix_catalog import config
from codeflix_catalog.bootstrap import bootstrap
from codeflix_catalog.domain.aggregates import Category
from codeflix_catalog.domain.errors import EntityValidationError

from .helpers import success, warn

if TYPE_CHECKING:
    from codeflix_catalog.bootstrap import AppContainer

logger = logging.getLogger(__name__)


def category_to_dict(cat: Category) -> dict[str, Any]:
    """Return the category's fields as a JSON-friendly dict."""
    return {
        "id": cat.id,
        "name": cat.name,
        "description": cat.description,
        "is_active": cat.is_active,
        "created_at": cat.created_at.isoformat(),
    }


def _bootstrap(id_generator: str | None) -> AppContainer:
    try:
        return bootstrap(id_generator)
    except config.UnknownIdGeneratorError as e:
        raise click.ClickException(str(e)) from e


@click.group()
def category() -> None:
    """Inspect catalog categories (development tool; nothing is stored)."""


@category.command()
@click.option("--name", "-n", required=True, help="Category name (3-255 characters).")
@click.option(
    "--description",
    "-d",
    default="",
    show_default=True,
    help="Category description (at most 10,000 characters).",
)
@click.option(
    "--active/--inactive",
    "is_active",
    default=True,
    show_default=True,
    help="Initial activation state.",
)
@click.option(
    "--id-generator",
    type=click.Choice(config.SUPPORTED_ID_GENERATORS, case_sensitive=False),
    default=None,
    help=f"Id generator to use (default: ${config.ID_GENERATOR_ENV_VAR} or uuid4).",
)
@click.option("--json", "as_json", is_flag=True, help="Print the category as JSON.")
def create(
    name: str,
    description: str,
    is_active: bool,
    id_generator: str | None,
    as_json: bool,
) -> None:
    """Build a new category and print its fields."""
    container = _bootstrap(id_generator.lower() if id_generator else None)
    logger.info(
        "Wired id generator %s and clock %s",
        type(container.id_generator).__name__,
        type(container.clock).__name__,
    )
    if id_generator == "simple":
        warn("The simple id generator is meant for tests and demos.")

    try:
        cat = Category.create(
            name,
            description,
            is_active,
            id_generator=container.id_generator,
            clock=container.clock,
        )
    except EntityValidationError as e:
        logger.info("Rejected category %r: %s", name, e)
        raise click.ClickException(str(e)) from e

    data = category_to_dict(cat)
    if as_json:
        click.echo(json.dumps(data, indent=2))
        return
    for key, value in data.items():
        click.echo(f"{key}: {value}")
    success("Category is valid.")
