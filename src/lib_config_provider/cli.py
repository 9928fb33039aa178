"""CLI adapter for ``lib_config_provider`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let operators see what a provider would resolve on this machine, and from
which source, without writing Python code.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata.
* :func:`cli_providers` – lists registered provider names.
* :func:`cli_external_path` – shows which external properties file is in use.
* :func:`cli_resolve` – resolves one provider and prints it as JSON.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
Outermost layer. Commands call the composition root in
:mod:`lib_config_provider.core`; ``-D key=value`` options populate the
process-wide system property table for the duration of a command.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from pathlib import Path
from typing import Callable, Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .adapters.environment.default import (
    clear_system_property,
    get_system_property,
    parse_property_assignment,
    set_system_property,
)
from .adapters.external.default import ExternalConfigProvider
from .core import resolve_provider
from .providers import PROVIDERS

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000
_DISTRIBUTION: Final[str] = "lib_config_provider"


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` when not installed."""

    try:
        return metadata.version(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Per-field configuration resolution with provenance",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name=_DISTRIBUTION,
    message="lib_config_provider version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        click.echo(f"{_DISTRIBUTION} (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', _DISTRIBUTION)}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("providers", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_providers() -> None:
    """List the provider names accepted by ``resolve``.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["providers"])
    >>> "zookeeper" in result.output.split()
    True
    """

    for name in sorted(PROVIDERS):
        click.echo(name)


@cli.command("external-path", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--path",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Explicit external properties file (system property and env overrides still win)",
)
@click.option(
    "-D",
    "assignments",
    multiple=True,
    metavar="KEY=VALUE",
    help="Set a system property for this command (repeatable)",
)
def cli_external_path(config_path: Optional[Path], assignments: Sequence[str]) -> None:
    """Show the external properties file in use and whether it can provide."""

    def show() -> None:
        external = ExternalConfigProvider(explicit_path=config_path)
        payload = {
            "path": str(external.properties_path),
            "can_provide": external.can_provide(),
            "keys": len(external.entries()),
        }
        click.echo(json.dumps(payload, indent=2))

    _with_system_properties(assignments, show)


@cli.command("resolve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("provider", type=click.Choice(sorted(PROVIDERS), case_sensitive=False))
@click.option(
    "--path",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Explicit external properties file (system property and env overrides still win)",
)
@click.option(
    "-D",
    "assignments",
    multiple=True,
    metavar="KEY=VALUE",
    help="Set a system property for this command (repeatable)",
)
@click.option(
    "--indent",
    type=int,
    default=None,
    help="Pretty-print JSON output with the provided indent size",
)
def cli_resolve(provider: str, config_path: Optional[Path], assignments: Sequence[str], indent: Optional[int]) -> None:
    """Resolve PROVIDER and print its values and provenance as JSON.

    Secret fields such as passwords are masked in the output.
    """

    def show() -> None:
        description = resolve_provider(provider.lower(), config_path=config_path)
        click.echo(json.dumps(description, indent=indent, sort_keys=True))

    _with_system_properties(assignments, show)


def _with_system_properties(assignments: Sequence[str], action: Callable[[], None]) -> None:
    """Run *action* with ``-D`` assignments applied, restoring previous values afterwards."""

    parsed: list[tuple[str, str]] = []
    for assignment in assignments:
        try:
            parsed.append(parse_property_assignment(assignment))
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="-D") from exc
    previous = {key: get_system_property(key) for key, _ in parsed}
    try:
        for key, value in parsed:
            set_system_property(key, value)
        action()
    finally:
        for key, value in previous.items():
            if value is None:
                clear_system_property(key)
            else:
                set_system_property(key, value)


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name=_DISTRIBUTION,
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
