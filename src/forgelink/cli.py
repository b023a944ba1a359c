"""CLI for forgelink."""

import sys
import webbrowser

import click
import pyperclip
import structlog
from pydantic_settings import SettingsError

from forgelink.config.logging import configure_logging
from forgelink.config.settings import get_settings
from forgelink.core.exceptions import ForgeLinkError
from forgelink.core.models.link import Selection

logger = structlog.get_logger(__name__)


def _parse_selection(line: int | None, line_range: str | None) -> Selection | None:
    if line is not None and line_range is not None:
        raise click.UsageError("--line and --range are mutually exclusive")
    if line is not None:
        if line < 1:
            raise click.BadParameter("line numbers start at 1", param_hint="--line")
        return Selection(start=line)
    if line_range is not None:
        try:
            return Selection.parse(line_range)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--range") from e
    return None


def _copy_to_clipboard(url: str) -> None:
    try:
        pyperclip.copy(url)
    except pyperclip.PyperclipException as e:
        logger.warning("Clipboard unavailable", error=str(e))
        return
    click.echo("Copied to clipboard", err=True)


def _copy_default() -> bool:
    # Broken settings are reported by the command itself
    try:
        return get_settings().copy_to_clipboard
    except (SettingsError, ValueError):
        return False


def _list_forges() -> None:
    from forgelink.forges.registry import get_registry

    for rule in get_registry():
        click.echo(f"{rule.host_domain:<28} {rule.kind.value:<10} {rule.protocol}")


@click.command()
@click.argument("path", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--line", "-l", type=int, default=None, help="Link to a single line")
@click.option("--range", "-r", "line_range", default=None, help="Link to lines N:M")
@click.option("--remote", default=None, help="Remote name (default: upstream, then the default remote)")
@click.option(
    "--copy/--no-copy",
    default=_copy_default,
    help="Copy the link to the clipboard",
)
@click.option("--open", "open_browser", is_flag=True, help="Open the link in a web browser")
@click.option("--list-forges", is_flag=True, help="List the supported forge hosts and exit")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(
    path: str | None,
    line: int | None,
    line_range: str | None,
    remote: str | None,
    copy: bool,
    open_browser: bool,
    list_forges: bool,
    verbose: bool,
) -> None:
    """Print a permalink to PATH on its hosting forge.

    The link points at the current revision and, with --line or --range,
    at the selected lines.
    """
    from forgelink.services.linking import LinkService

    try:
        settings = get_settings()
    except (SettingsError, ValueError) as e:
        click.echo(f"Error: Invalid settings: {e}", err=True)
        sys.exit(1)

    configure_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        json_logs=settings.json_logs,
    )

    try:
        if list_forges:
            _list_forges()
            return

        if path is None:
            raise click.UsageError("Missing argument 'PATH'.")
        selection = _parse_selection(line, line_range)

        service = LinkService(remote_candidates=settings.remote_candidates)
        url = service.link_for_path(path, selection, remote=remote)
    except ForgeLinkError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    click.echo(url)

    if copy:
        _copy_to_clipboard(url)
    if open_browser:
        webbrowser.open(url)


if __name__ == "__main__":
    cli()
