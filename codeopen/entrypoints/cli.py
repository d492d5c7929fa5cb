"""codeopen CLI entrypoint.

Command-line interface for discovering installed editors and opening
files in them at a line and column.
"""

from __future__ import annotations

import functools
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from codeopen.core.discovery.registry import DiscoveryRegistry
    from codeopen.domain.config import CodeOpenConfig

from codeopen.core.errors import (
    CodeOpenCliError,
    editor_not_found_error,
    file_not_found_error,
)
from codeopen.domain.exceptions import CodeOpenDomainError
from codeopen.version import __version__

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def handle_cli_errors(command_name: str):
    """Decorator to handle common CLI errors.

    CodeOpenCliError exceptions are re-raised to use their built-in
    formatting; domain errors and unexpected exceptions are converted.

    Args:
        command_name: Name of the command for error messages.

    Returns:
        Decorated function with error handling.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except CodeOpenCliError:
                raise
            except CodeOpenDomainError as e:
                raise CodeOpenCliError(e.message, hint=e.hint) from e
            except (RuntimeError, ValueError) as e:
                raise CodeOpenCliError(
                    str(e),
                    hint="Run with --verbose for more details",
                ) from e
            except Exception as e:
                ctx = click.get_current_context()
                if ctx.obj and ctx.obj.get("verbose", False):
                    import traceback

                    traceback.print_exc()
                raise CodeOpenCliError(
                    f"Unexpected error in {command_name}: {e}",
                    hint="Run with --verbose for more details",
                ) from e

        return wrapper

    return decorator


def _configure_logging(verbose: bool, quiet: bool) -> None:
    """Send log records to stderr at a level matching the CLI flags."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _load_config(project_dir: Path | None = None) -> CodeOpenConfig:
    """Load merged global/local configuration."""
    from codeopen.adapters.factory import ConfigFactory

    return ConfigFactory().create_config_provider().load(project_dir)


def _create_registry(config: CodeOpenConfig) -> DiscoveryRegistry:
    from codeopen.adapters.factory import DiscoveryFactory

    return DiscoveryFactory(config).create_registry()


@click.group()
@click.version_option(version=__version__, prog_name="codeopen")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress non-essential output.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """codeopen - find installed code editors and open files in them."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    _configure_logging(verbose, quiet)


@cli.command(name="list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
@handle_cli_errors("list")
def list_editors(ctx: click.Context, as_json: bool) -> None:
    """List installed editors in discovery priority order."""
    from codeopen.core.progress import progress_context

    config = _load_config(Path.cwd())
    registry = _create_registry(config)

    quiet = ctx.obj.get("quiet", False) or as_json
    with progress_context(quiet_mode=quiet) as progress:
        registry.initialize(progress=progress)

    installations = list(registry.list_installations())

    if as_json:
        click.echo(json.dumps([i.to_dict() for i in installations], indent=2))
        return

    if not installations:
        click.echo("No editors found")
        return

    for installation in installations:
        version = "unknown version" if installation.version.is_unknown else str(
            installation.version
        )
        click.echo(
            f"✓ {installation.display_name} ({installation.command}, {version})"
        )


@cli.command()
@click.argument("path_or_command", type=str)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@handle_cli_errors("find")
def find(path_or_command: str, as_json: bool) -> None:
    """Check whether PATH_OR_COMMAND is a supported, working editor.

    PATH_OR_COMMAND is either a bare command name (e.g. 'codium') or an
    absolute path to the editor executable.
    """
    config = _load_config(Path.cwd())
    registry = _create_registry(config)

    installation = registry.try_discover(path_or_command)
    if installation is None:
        editor_not_found_error(path_or_command)

    if as_json:
        click.echo(json.dumps(installation.to_dict(), indent=2))
    else:
        click.echo(f"{installation.display_name}")
        click.echo(f"  Command: {installation.command}")
        click.echo(f"  Version: {installation.version}")
        if installation.is_prerelease:
            click.echo("  Prerelease: yes")


@cli.command(name="open")
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("--line", "-l", type=int, default=0, show_default=True, help="Line to jump to.")
@click.option("--column", "-c", type=int, default=0, show_default=True, help="Column to jump to.")
@click.option(
    "--project",
    "-p",
    type=click.Path(file_okay=False),
    default=None,
    help="Project folder to open alongside the file.",
)
@click.option(
    "--editor",
    "-e",
    type=str,
    default=None,
    help="Editor command or absolute path (default: $CODEOPEN_EDITOR or first found).",
)
@click.pass_context
@handle_cli_errors("open")
def open_file(
    ctx: click.Context,
    file: str,
    line: int,
    column: int,
    project: str | None,
    editor: str | None,
) -> None:
    """Open FILE in the editor, optionally at --line and --column."""
    from codeopen.adapters.editor import get_preferred_editor
    from codeopen.adapters.factory import DiscoveryFactory
    from codeopen.core.open_usecase import OpenFileUseCase, OpenRequest

    file_path = Path(file).resolve()
    if not file_path.exists():
        file_not_found_error(file)

    project_dir = Path(project).resolve() if project else None
    config = _load_config(project_dir or Path.cwd())
    factory = DiscoveryFactory(config)
    usecase = OpenFileUseCase(factory.create_registry(), factory.create_launcher())

    response = usecase.execute(
        OpenRequest(
            file_path=str(file_path),
            line=line,
            column=column,
            project_folder=str(project_dir) if project_dir else None,
            editor=editor or get_preferred_editor(),
        )
    )
    if not response.success:
        raise CodeOpenCliError(response.error or "Failed to open file", hint=response.hint)

    if not ctx.obj.get("quiet", False):
        click.echo(f"Opened {file_path} in {response.installation.display_name}")


@cli.group()
def config() -> None:
    """Manage codeopen configuration.

    Config is loaded from the global file and then from
    .codeopen/config.toml in the current project; local values win.
    """
    pass


@config.command(name="path")
@click.option(
    "--global", "-g", "show_global", is_flag=True, help="Show only global config path"
)
@click.option(
    "--local", "-l", "show_local", is_flag=True, help="Show only local config path"
)
@handle_cli_errors("config path")
def config_path(show_global: bool, show_local: bool) -> None:
    """Print config file path(s) for use in scripts."""
    from codeopen.shared.config_io import get_global_config_path, get_local_config_path

    global_path = get_global_config_path()
    local_path = get_local_config_path(Path.cwd())

    if show_global:
        click.echo(global_path)
        return
    if show_local:
        click.echo(local_path)
        return

    click.echo(f"global:{global_path}")
    click.echo(f"local:{local_path}")


@config.command(name="show")
@handle_cli_errors("config show")
def config_show() -> None:
    """Show the effective configuration as TOML."""
    import tomli_w

    from codeopen.shared.config_io import config_to_data

    effective = _load_config(Path.cwd())
    click.echo(tomli_w.dumps(config_to_data(effective)), nl=False)


@config.command(name="init")
@click.option(
    "--global", "-g", "init_global", is_flag=True, help="Write the global config file"
)
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config file")
@handle_cli_errors("config init")
def config_init(init_global: bool, force: bool) -> None:
    """Write a config file containing the default settings."""
    from codeopen.domain.config import CodeOpenConfig
    from codeopen.shared.config_io import (
        get_global_config_path,
        get_local_config_path,
        save_config,
    )

    path = get_global_config_path() if init_global else get_local_config_path(Path.cwd())
    if path.exists() and not force:
        raise CodeOpenCliError(
            f"Config already exists at {path}",
            hint="Use --force to overwrite it",
        )

    save_config(CodeOpenConfig.default(), path)
    click.echo(f"✓ Wrote {path}")


def main() -> int:
    """Main entrypoint for the CLI."""
    try:
        cli(obj={})
        return 0
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
