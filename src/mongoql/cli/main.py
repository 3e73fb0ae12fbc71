#!/usr/bin/env python3
"""
mongoql CLI - run and inspect the Food/User demo schema
"""

import logging

import click
from graphql import print_schema
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from mongoql.executor import to_json
from mongoql.settings import settings

console = Console()


def _configure_logging() -> None:
    level = (settings.log_level or "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def get_demo_app():
    """Build a fresh demo app with its own model registry"""
    from mongoql.demo import build_demo

    return build_demo()


@click.group()
def cli():
    """mongoql - GraphQL types and mongoengine documents from one field map"""
    _configure_logging()


@cli.command()
def version():
    """Print the package version"""
    from mongoql import __version__

    click.echo(__version__)


@cli.command()
@click.option("--query", "query_text", default=None, help="GraphQL query (defaults to the demo query)")
@click.option("--username", default=None, help="Value for the $username variable")
def demo(query_text, username):
    """Run a query against the seeded demo schema"""
    from mongoql.demo import DEMO_QUERY

    app = get_demo_app()
    result = app.run_sync(query_text or DEMO_QUERY, username=username or settings.demo_username)

    console.print_json(to_json(result, indent=None), indent=settings.json_indent or None)
    if result.errors:
        raise SystemExit(1)


@cli.command()
def schema():
    """Print the demo schema in SDL"""
    app = get_demo_app()
    click.echo(print_schema(app.schema))


@cli.command()
def types():
    """Show how each demo type's fields split between GraphQL and storage"""
    app = get_demo_app()

    table = Table(title="Demo Types")
    table.add_column("Type", style="cyan")
    table.add_column("GraphQL fields", style="green")
    table.add_column("Stored fields", style="blue")
    table.add_column("Methods", style="magenta")
    table.add_column("Collection", style="white")

    for defined in (app.food, app.user):
        storage = defined.storage_types()
        model = storage.model
        table.add_row(
            defined.name,
            ", ".join(defined.object_type.fields),
            ", ".join(storage.schema.field_names) if storage.schema else "-",
            ", ".join(storage.schema.method_names) if storage.schema else "-",
            model._get_collection_name() if model is not None else "-",
        )

    console.print(Panel.fit(f"[bold cyan]Registered models: {len(app.registry)}[/bold cyan]"))
    console.print(table)


def app() -> None:
    cli()


if __name__ == "__main__":
    cli()
