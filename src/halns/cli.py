"""Command line interface for :mod:`halns`."""

import json
import logging
from typing import Optional

import click
import yaml

from .config import Config, NamespaceConfigError, registry_from_config
from .models import NamespaceDocument, to_curies

__all__ = [
    "main",
]


def _parse_namespace(value: str) -> tuple[str, str]:
    name, sep, template = value.partition("=")
    if not sep or not name:
        raise click.BadParameter(
            f"expected NAME=TEMPLATE, got {value!r}", param_hint="--namespace"
        )
    return name, template


def _validate_log_level(ctx: click.Context, param: click.Parameter, value: str) -> str:
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise click.BadParameter(f"unknown log level {value!r}", ctx=ctx, param=param)
    return level


@click.group()
@click.version_option(package_name="halns")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML name-space file (default: $HALNS_NAMESPACES_FILE)",
)
@click.option(
    "--namespace",
    "-n",
    multiple=True,
    metavar="NAME=TEMPLATE",
    help="Register a name-space, e.g. ex=http://example.com/rels/{rel}",
)
@click.option(
    "--log-level",
    envvar="HALNS_LOG_LEVEL",
    default=Config.LOG_LEVEL,
    show_default=True,
    callback=_validate_log_level,
    help="Log level when not verbose (env: HALNS_LOG_LEVEL)",
)
@click.pass_context
def main(
    ctx: click.Context,
    verbose: bool,
    config_file: Optional[str],
    namespace: tuple[str, ...],
    log_level: str,
) -> None:
    r"""halns - compact and expand HAL link relation CURIEs.

    Name-spaces come from a YAML file and/or --namespace options;
    options are registered after the file, in the order given.


    Example:
      halns -n ex=http://example.com/rels/{rel} compact http://example.com/rels/next
    """
    ctx.ensure_object(dict)

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            force=True,
        )
        logging.getLogger("halns").setLevel(logging.DEBUG)
    else:
        logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s", force=True)

    pairs = [_parse_namespace(value) for value in namespace]

    try:
        registry = registry_from_config(path=config_file)
    except NamespaceConfigError as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()

    for name, template in pairs:
        registry.add(name, template)

    ctx.obj["registry"] = registry


@main.command()
@click.argument("uri")
@click.pass_context
def compact(ctx: click.Context, uri: str) -> None:
    """Print the CURIE for URI.

    Exits with status 1 when no name-space matches.
    """
    curie = ctx.obj["registry"].compact(uri)
    if curie is None:
        click.echo(f"No CURIE for {uri}", err=True)
        ctx.exit(1)
    click.echo(curie)


@main.command()
@click.argument("curie")
@click.pass_context
def expand(ctx: click.Context, curie: str) -> None:
    """Print the URI for CURIE.

    Exits with status 1 when the CURIE cannot be resolved.
    """
    href = ctx.obj["registry"].expand(curie)
    if href is None:
        click.echo(f"Cannot expand {curie}", err=True)
        ctx.exit(1)
    click.echo(href)


@main.command(name="list")
@click.option(
    "--format",
    type=click.Choice(["text", "json", "yaml"]),
    default="text",
    help="Output format (default: text)",
)
@click.pass_context
def list_namespaces(ctx: click.Context, format: str) -> None:
    """List registered name-spaces in lookup order."""
    registry = ctx.obj["registry"]

    if format == "json":
        click.echo(json.dumps(to_curies(registry), indent=2))
    elif format == "yaml":
        document = NamespaceDocument.from_registry(registry)
        click.echo(yaml.safe_dump({"namespaces": document.to_dict()}, sort_keys=False), nl=False)
    else:
        for name, template in registry.namespaces.items():
            click.echo(f"{name}  {template}")


if __name__ == "__main__":
    main()
