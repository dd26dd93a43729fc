"""CLI commands for checking and querying configuration files.

Every command accepts the same override arguments a host program would:
``--use-config PATH``, ``--add-config PATH`` and ``-DNAME TYPE VALUE``.
They are passed through untouched and scanned by the config module.
"""

import logging
import sys
from pathlib import Path

import click
import structlog

from typedconf import __version__
from typedconf.config.arguments import scan_arguments
from typedconf.config.constants import COMPONENT_CLI
from typedconf.config.error_hints import format_config_error
from typedconf.config.errors import ConfigError
from typedconf.config.store import ConfigStore, build_store
from typedconf.config.values import ValueKind
from typedconf.observability.logging import bind_config_context, configure_logging
from typedconf.settings import AppSettings, get_settings


logger = structlog.get_logger()

# Let -D/--use-config/--add-config reach the override scanner.
PASSTHROUGH_SETTINGS = {"ignore_unknown_options": True, "allow_extra_args": True}


def _setup_logging(
    settings: AppSettings, json_logs: bool | None, verbose: bool
) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    use_json = settings.json_logs if json_logs is None else json_logs
    configure_logging(level=level, json_format=use_json)


def _load_store(default_path: Path, args: tuple[str, ...]) -> ConfigStore:
    sources = scan_arguments(args, default_path)
    bind_config_context(str(sources.primary_path))
    logger.debug(
        "cli_sources_scanned",
        component=COMPONENT_CLI,
        primary_path=str(sources.primary_path),
        extra_files=[str(p) for p in sources.extra_files],
        definitions=[d.name for d in sources.definitions],
    )
    return build_store(sources.primary_path, sources.overrides)


def _fail(error: ConfigError) -> None:
    click.echo(format_config_error(error), err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Typed configuration file loader."""


@cli.command(context_settings=PASSTHROUGH_SETTINGS)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Default primary configuration file (env: TYPEDCONF_CONFIG).",
)
@click.option(
    "--json-logs/--no-json-logs",
    default=None,
    help="Use JSON format for logs (env: TYPEDCONF_JSON_LOGS).",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging.")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def validate(
    config_path: Path | None,
    json_logs: bool | None,
    verbose: bool,
    args: tuple[str, ...],
) -> None:
    """Load the configuration and report what was found.

    Exits with status 1 on the first load error.
    """
    settings = get_settings()
    _setup_logging(settings, json_logs, verbose)

    try:
        store = _load_store(config_path or settings.config, args)
    except ConfigError as e:
        click.echo("Configuration is invalid:", err=True)
        _fail(e)
        return

    click.echo("Configuration is valid!")
    click.echo(f"  Variables: {len(store)}")
    click.echo(f"  Files: {len(store.table.file_checksums)}")
    click.echo(f"  Warnings: {len(store.warnings)}")
    click.echo(f"  Checksum: {store.table.compute_checksum()}")


@cli.command(context_settings=PASSTHROUGH_SETTINGS)
@click.argument("name")
@click.option(
    "--type",
    "kind",
    type=click.Choice([kind.value for kind in ValueKind]),
    default=None,
    help="Expected kind; defaults to the stored kind.",
)
@click.option(
    "--raw", is_flag=True, help="Print a string without expanding $NAME references."
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Default primary configuration file (env: TYPEDCONF_CONFIG).",
)
@click.option(
    "--json-logs/--no-json-logs",
    default=None,
    help="Use JSON format for logs (env: TYPEDCONF_JSON_LOGS).",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging.")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def get(  # noqa: PLR0913
    name: str,
    kind: str | None,
    raw: bool,
    config_path: Path | None,
    json_logs: bool | None,
    verbose: bool,
    args: tuple[str, ...],
) -> None:
    """Print the value of NAME (strings are expanded unless --raw is given)."""
    settings = get_settings()
    _setup_logging(settings, json_logs, verbose)

    value: bool | int | float | str
    try:
        store = _load_store(config_path or settings.config, args)
        if raw:
            value = store.get_raw_string(name)
        else:
            value_kind = ValueKind(kind) if kind else store.kind_of(name)
            value = store.get(name, value_kind)
    except ConfigError as e:
        _fail(e)
        return

    if isinstance(value, bool):
        click.echo("true" if value else "false")
    else:
        click.echo(value)


if __name__ == "__main__":
    cli()
