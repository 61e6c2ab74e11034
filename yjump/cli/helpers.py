from __future__ import annotations
import logging
from typing import Any, Dict, IO, List

import click

from ..config import load_typed_config
from ..version import __version__
from ..windows import WindowInfo, WindowSourceError, load_windows

logger = logging.getLogger(__name__)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-v", "--version", prog_name="yjump")
@click.option('--config-file', type=click.Path(exists=True, dir_okay=False), default=None,
              help='Read this yjump.conf instead of the XDG/home locations')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Override configured log level')
@click.pass_context
def cli(ctx: click.Context, config_file: str | None, log_level: str | None):
    """Fast window switcher with fuzzy search.

    Windows are supplied as JSON by a platform enumerator (a file or stdin);
    yjump ranks them against your query.

    \b
    TYPICAL WORKFLOWS:

    \b
    One-shot ranking:
      enumerate-windows | yjump rank chr        # Best matches for "chr"
      yjump rank --windows wins.json --scores term

    \b
    Interactive switching:
      yjump pick --windows wins.json            # Type, pick a number, Enter

    \b
    Troubleshooting:
      yjump explain chr "Google Chrome: Inbox"  # Which tier matched and why
      yjump config                              # Effective configuration

    \b
    CONFIGURATION:
      ~/.config/yjump/yjump.conf (key = value), .env, or YJUMP__SECTION__KEY
    """
    if isinstance(ctx.obj, dict):
        return
    overrides: Dict[str, Any] = {}
    if log_level:
        overrides['log_level'] = log_level.upper()
    try:
        ctx.obj = load_typed_config(config_file, overrides or None).to_dict()
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e


def matching_options(cfg: Dict[str, Any], case_sensitive: bool | None, max_results: int | None) -> tuple[bool, int]:
    """Resolve CLI flags against configured matching defaults."""
    matching = cfg.get('matching', {})
    resolved_case = matching.get('case_sensitive', False) if case_sensitive is None else case_sensitive
    resolved_max = matching.get('max_results', 10) if max_results is None else max_results
    return resolved_case, resolved_max


def read_windows(source: str | IO[str]) -> List[WindowInfo]:
    """Load windows for a command, turning source errors into CLI errors."""
    try:
        return load_windows(source)
    except WindowSourceError as e:
        raise click.ClickException(str(e)) from e


__all__ = ["cli", "matching_options", "read_windows"]
