"""Tweak CLI entrypoint.

Command-line interface for the tweak version-control engine.
"""

from __future__ import annotations

import functools
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from tweak.core.repository import Repository

from tweak.core.errors import TweakCliError, repo_not_found_error
from tweak.core.presentation import (
    JsonFormatter,
    TweakColors,
    render_commit_diff,
    render_log_entry,
    render_oneline,
    resolve_color_mode,
)
from tweak.domain.config import TweakConfig
from tweak.domain.exceptions import TweakDomainError
from tweak.version import __version__

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def handle_cli_errors(command_name: str):
    """Decorator to handle common CLI errors.

    Converts domain errors into TweakCliError so they print with their hint
    and exit non-zero. Unexpected errors show a traceback in verbose mode.

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
            except click.ClickException:
                raise
            except TweakDomainError as e:
                raise TweakCliError(e.message, hint=e.hint) from e
            except OSError as e:
                raise TweakCliError(
                    f"I/O error in {command_name}: {e}",
                    hint="Check file permissions, disk space, and filesystem access",
                ) from e
            except Exception as e:
                ctx = click.get_current_context()
                if ctx.obj.get("verbose", False):
                    import traceback

                    traceback.print_exc()
                raise TweakCliError(
                    f"Unexpected error in {command_name}: {e}",
                    hint="Run with --verbose for more details",
                ) from e

        return wrapper

    return decorator


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG with --verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _load_config(tweak_dir: Path) -> TweakConfig:
    """Load configuration for the given tweak directory.

    Args:
        tweak_dir: Path to the .tweak directory.

    Returns:
        TweakConfig with merged global and local settings.
    """
    from tweak.adapters.factory import ConfigFactory

    config_factory = ConfigFactory()
    return config_factory.create_config_provider().load(tweak_dir)


def get_tweak_repo_root() -> tuple[Path, Path]:
    """Get tweak repository root or exit with error.

    Returns:
        Tuple of (repo_root, tweak_dir).

    Raises:
        TweakCliError: If not in a tweak repository.
    """
    from tweak.core.repo_utils import find_repo_root

    try:
        return find_repo_root()
    except RuntimeError:
        repo_not_found_error()


def _open_repository(ctx: click.Context) -> Repository:
    """Open the repository containing the CWD.

    Also records the configured color mode on the click context.
    """
    from tweak.adapters.factory import RepositoryFactory

    repo_root, tweak_dir = get_tweak_repo_root()
    config = _load_config(tweak_dir)
    ctx.obj["color"] = resolve_color_mode(config.display.color_scheme)
    return RepositoryFactory().open(repo_root, config)


@click.group()
@click.version_option(version=__version__, prog_name="tweak")
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
    """Tweak - a minimal content-addressable version control engine.

    Snapshots files into an immutable object store and keeps a linear
    commit history you can log and diff.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    _configure_logging(verbose)


@cli.command()
@click.argument(
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
)
@click.option(
    "--hash-algorithm",
    type=click.Choice(["blake3", "sha1"]),
    default="blake3",
    show_default=True,
    help="Digest used to address objects in the new repository.",
)
@click.pass_context
@handle_cli_errors("init")
def init(ctx: click.Context, directory: Path, hash_algorithm: str) -> None:
    """Initialize a tweak repository in DIRECTORY (default: current directory).

    Running init again is safe: existing HEAD, index and config are kept.
    """
    from tweak.core.init_usecase import InitRequest, InitUseCase

    request = InitRequest(repo_root=directory.resolve(), hash_algorithm=hash_algorithm)
    response = InitUseCase().execute(request)
    if not response.success:
        raise TweakCliError(
            response.error or "Unknown error",
            hint="Check permissions and try again",
        )

    if response.already_initialized:
        click.echo("Tweak already initialized")
        return

    click.echo(f"Initialized empty tweak repository in {response.tweak_dir}")
    if not ctx.obj.get("quiet", False):
        for name in response.created:
            click.echo(f"  {click.style('✓', fg=TweakColors.SUCCESS_FG)} Created {name}")


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.pass_context
@handle_cli_errors("add")
def add(ctx: click.Context, paths: tuple[Path, ...]) -> None:
    """Stage file contents for the next commit.

    Prints the content hash of each staged file.
    """
    repo = _open_repository(ctx)
    quiet = ctx.obj.get("quiet", False)
    for path in paths:
        entry = repo.add(path)
        click.echo(entry.hash.value)
        if not quiet:
            click.echo(f"{entry.path} added successfully")


@cli.command()
@click.argument("message")
@click.pass_context
@handle_cli_errors("commit")
def commit(ctx: click.Context, message: str) -> None:
    """Record the staged files as a new commit with MESSAGE."""
    repo = _open_repository(ctx)
    if not repo.staged() and not ctx.obj.get("quiet", False):
        click.secho("Warning: nothing staged, creating an empty commit", fg=TweakColors.WARNING_FG, err=True)
    commit_hash = repo.commit(message)
    click.echo(f"Commit {commit_hash.value} created successfully")


@cli.command()
@click.option(
    "--max-count",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Limit the number of commits shown.",
)
@click.option("--oneline", is_flag=True, help="Show each commit on a single line.")
@click.option("--json", "json_output", is_flag=True, help="Output history as JSON.")
@click.pass_context
@handle_cli_errors("log")
def log(ctx: click.Context, max_count: int | None, oneline: bool, json_output: bool) -> None:
    """Show commit history, newest first."""
    repo = _open_repository(ctx)

    if json_output:
        click.echo(JsonFormatter().format_log(list(repo.log(max_count))))
        return

    if repo.head() is None:
        click.echo("No commits yet")
        return

    color = ctx.obj.get("color")
    render = render_oneline if oneline else render_log_entry
    for record in repo.log(max_count):
        click.echo(render(record), nl=False, color=color)


@cli.command()
@click.argument("commit_ref", metavar="COMMIT")
@click.option("--json", "json_output", is_flag=True, help="Output the diff as JSON.")
@click.pass_context
@handle_cli_errors("show")
def show(ctx: click.Context, commit_ref: str, json_output: bool) -> None:
    """Show how each file in COMMIT differs from the parent commit.

    COMMIT is a full hash or a unique prefix of at least 4 characters.
    """
    repo = _open_repository(ctx)
    commit_diff = repo.show(commit_ref)

    if json_output:
        click.echo(JsonFormatter().format_commit_diff(commit_diff))
        return

    click.echo(render_commit_diff(commit_diff), nl=False, color=ctx.obj.get("color"))


# Configuration management commands
@cli.group()
def config() -> None:
    """Manage tweak configuration files.

    Tweak uses a two-tier configuration system:
    - Local: .tweak/config.toml (repo-specific settings)
    - Global: ~/.config/tweak/config.toml (user defaults)

    Local settings override global settings. Missing values use built-in defaults.
    """
    pass


def _local_config_path() -> Path | None:
    """Get the local config path if in a repository, or None otherwise."""
    from tweak.core.repo_utils import TWEAK_DIR_NAME, find_tweak_root

    repo_root = find_tweak_root()
    if repo_root is None:
        return None
    return repo_root / TWEAK_DIR_NAME / "config.toml"


def _display_config_summary(config: TweakConfig) -> None:
    """Display every setting grouped by section."""
    click.echo("  [objects]")
    click.echo(f"    hash_algorithm = {config.objects.hash_algorithm}")
    click.echo("  [index]")
    click.echo(f"    dedupe_paths = {str(config.index.dedupe_paths).lower()}")
    click.echo("  [core]")
    click.echo(f"    locking = {str(config.core.locking).lower()}")
    click.echo("  [display]")
    click.echo(f"    color_scheme = {config.display.color_scheme}")


@config.command(name="show")
@click.option("--global", "-g", "show_global", is_flag=True, help="Show only the global config.")
@handle_cli_errors("config show")
def config_show(show_global: bool) -> None:
    """Show configuration file locations and current settings.

    Inside a repository the merged (global + local) settings are shown.
    """
    from tweak.shared.config_io import get_global_config_path, load_config

    global_path = get_global_config_path()
    local_path = None if show_global else _local_config_path()

    click.echo(f"Global config: {global_path}")
    if local_path is not None:
        click.echo(f"Local config:  {local_path}")
        click.echo("\nEffective configuration (merged global + local):")
        _display_config_summary(_load_config(local_path.parent))
    elif global_path.exists():
        click.echo("\nGlobal configuration:")
        _display_config_summary(load_config(global_path))
    else:
        click.echo("\nDefault configuration:")
        _display_config_summary(TweakConfig.default())


@config.command(name="path")
@click.option("--global", "-g", "show_global", is_flag=True, help="Print only the global path.")
@handle_cli_errors("config path")
def config_path(show_global: bool) -> None:
    """Print config file path(s) for use in scripts."""
    from tweak.shared.config_io import get_global_config_path

    global_path = get_global_config_path()
    if show_global:
        click.echo(global_path)
        return

    click.echo(f"global:{global_path}")
    local_path = _local_config_path()
    if local_path is not None:
        click.echo(f"local:{local_path}")


@config.command(name="set")
@click.argument("key")
@click.argument("value")
@click.option("--global", "-g", "set_global", is_flag=True, help="Write the global config.")
@handle_cli_errors("config set")
def config_set(key: str, value: str, set_global: bool) -> None:
    """Set KEY (e.g. index.dedupe_paths) to VALUE in a config file.

    Writes the local config by default. Use --global for user defaults.
    """
    from tweak.shared.config_io import get_global_config_path, set_config_value

    if set_global:
        path = get_global_config_path()
    else:
        local_path = _local_config_path()
        if local_path is None:
            raise TweakCliError(
                "Not in a tweak repository",
                hint="Use 'tweak config set --global' to change user defaults",
            )
        path = local_path

    try:
        set_config_value(path, key, value)
    except ValueError as e:
        raise TweakCliError(str(e), hint="Run 'tweak config show' to list current settings") from e
    click.echo(f"Set {key} = {value} in {path}")


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
