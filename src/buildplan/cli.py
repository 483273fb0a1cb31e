"""Command-line interface for buildplan."""

import json
from dataclasses import replace
from pathlib import Path

import click
import yaml

from buildplan.config import ServerConfig
from buildplan.context import ServerContext
from buildplan.errors import RegistrationError, ResolveError
from buildplan.main import run
from buildplan.models.entry import Summary
from buildplan.models.payload import parse_entry
from buildplan.services.registry_service import RegistryService
from buildplan.services.resolver import SummaryService
from buildplan.slugs import slug_to_title

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def load_entry_payloads(path: Path) -> list[object]:
    """Read entry payloads from a JSON or YAML file.

    The file holds either a list of entries or a mapping with an
    ``entries`` list. YAML is a superset of JSON, so one loader covers both.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise click.ClickException(f"Could not parse {path}: {e}") from e

    if isinstance(data, dict) and "entries" in data:
        data = data["entries"]
    if not isinstance(data, list):
        raise click.ClickException(f"{path} must contain a list of entries")
    return data


def format_summary(summary: Summary) -> str:
    lines = [f"{summary.name}: build time {summary.build_time}"]
    for line in summary.resources:
        lines.append(f"  {line.name} x{line.quantity}")
    return "\n".join(lines)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="buildplan")
def cli() -> None:
    """Register resources and projects and summarize their build plans."""


@cli.command("serve")
@click.option("--host", default=None, help="Listen address (default: $BUILDPLAN_HOST or 127.0.0.1).")
@click.option("--port", type=int, default=None, help="Listen port (default: $BUILDPLAN_PORT or 8080).")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Root log level (default: $BUILDPLAN_LOG_LEVEL or INFO).",
)
def serve_cmd(host: str | None, port: int | None, log_level: str | None) -> None:
    """Run the HTTP API."""
    config = ServerConfig.from_env()
    if host is not None:
        config = replace(config, host=host)
    if port is not None:
        config = replace(config, port=port)
    if log_level is not None:
        config = replace(config, log_level=log_level.upper())
    run(config)


@cli.command("summarize")
@click.argument("entries_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON.")
def summarize_cmd(entries_file: Path, name: str, as_json: bool) -> None:
    """Summarize project NAME from the entries in ENTRIES_FILE.

    Entries are registered in file order with the same validation as the
    HTTP API; the first rejected entry aborts the command.
    """
    ctx = ServerContext.create()
    registry = RegistryService(ctx)

    try:
        for index, payload in enumerate(load_entry_payloads(entries_file)):
            try:
                registry.register(parse_entry(payload))
            except RegistrationError as e:
                raise click.ClickException(f"entry #{index + 1}: {e.message}") from e
        summary = SummaryService(ctx).summarize(name)
    except ResolveError as e:
        raise click.ClickException(e.message) from e

    if as_json:
        click.echo(json.dumps(summary.to_dict(), indent=2))
    else:
        click.echo(format_summary(summary))


@cli.command("title")
@click.argument("slug", required=False, default="")
def title_cmd(slug: str) -> None:
    """Print SLUG converted to a title."""
    click.echo(slug_to_title(slug))


def main() -> None:
    """CLI entry point used by the `buildplan` console script."""
    cli()
