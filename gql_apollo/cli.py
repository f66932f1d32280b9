"""Command-line interface for gql-apollo."""

import json
import logging
from pathlib import Path

import click
from graphql import GraphQLError
from pydantic import ValidationError

from . import __version__
from .core.config import ApolloPluginConfig, load_config
from .core.hooks import AddHeaderHook, FilterOperationsHook, HookRunner
from .core.loader import load_documents, load_schema
from .core.plugin import InvalidOutputFileError, plugin, validate


@click.group()
@click.version_option(version=__version__)
def main():
    """Typed Apollo client SDK generator.

    Generate a getSdk() TypeScript wrapper from GraphQL operation documents.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file or directory (.graphql, .graphqls).",
)
@click.option(
    "--documents",
    "-d",
    required=True,
    multiple=True,
    type=click.Path(exists=True),
    help="Operation document file or directory (.graphql, .gql). Repeatable.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output TypeScript file for the generated SDK (e.g., sdk.ts).",
)
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True),
    help="JSON file with plugin settings (e.g., {\"useTypeImports\": true}).",
)
@click.option(
    "--use-type-imports",
    is_flag=True,
    help="Use `import type` for the Apollo imports.",
)
@click.option(
    "--header",
    help="Text to put at the top of the generated file.",
)
@click.option(
    "--exclude-prefix",
    help="Skip operations whose name starts with this prefix.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    documents: tuple[str, ...],
    output: str,
    config_file: str | None,
    use_type_imports: bool,
    header: str | None,
    exclude_prefix: str | None,
    verbose: bool,
):
    """Generate a typed Apollo SDK from GraphQL operations.

    Examples:

        gql-apollo generate -s ./schema.graphql -d ./operations -o ./src/sdk.ts

        gql-apollo generate -s ./schema -d ./a.graphql -d ./b.graphql -o sdk.ts --use-type-imports
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    output_path = Path(output).resolve()

    try:
        validate(str(output_path))

        config = load_config(config_file) if config_file else ApolloPluginConfig()
        if use_type_imports:
            config = config.model_copy(update={"use_type_imports": True})
    except (InvalidOutputFileError, ValidationError, json.JSONDecodeError) as e:
        raise click.ClickException(str(e))

    hooks = HookRunner()
    if exclude_prefix:
        hooks.add_pre_hook(FilterOperationsHook(exclude_prefix=exclude_prefix))
    if header:
        hooks.add_post_hook(AddHeaderHook(header))

    if verbose:
        click.echo(f"Schema: {Path(schema).resolve()}")
        click.echo(f"Output: {output_path}")

    try:
        click.echo("Loading schema and documents...")
        graphql_schema = load_schema(schema)
        docs = hooks.run_pre_hooks(load_documents(list(documents)))
    except (GraphQLError, FileNotFoundError) as e:
        raise click.ClickException(str(e))

    if verbose:
        click.echo(f"  Documents: {len(docs)}")

    click.echo("Generating SDK...")
    result = plugin(graphql_schema, docs, config)
    code = hooks.run_post_hooks(output_path.name, result.render())

    if verbose:
        click.echo(f"  Imports: {len(result.prepend)}")
        click.echo(f"  Lines: {len(code.splitlines())}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    click.echo(f"Writing to {output_path}...")
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(code)

    click.echo(f"Done! Generated SDK with {result.operation_count} methods.")


if __name__ == "__main__":
    main()
