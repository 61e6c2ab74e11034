"""Interactive window picker."""

from __future__ import annotations
import json as _json
import logging

import click

from .helpers import cli, matching_options, read_windows
from ..windows import WindowListCache, rank_windows
from ..utils.output import result_line, warning

logger = logging.getLogger(__name__)


@cli.command()
@click.option("--windows", "windows_path", type=click.Path(exists=True, dir_okay=False), required=True,
              help="JSON window list, re-read when the cache expires")
@click.option("--case-sensitive/--ignore-case", default=None, help="Override configured case sensitivity")
@click.option("--max-results", "-n", type=int, default=None, help="Maximum number of results (overrides config)")
@click.pass_context
def pick(ctx: click.Context, windows_path: str, case_sensitive: bool | None, max_results: int | None):
    """Search windows interactively and print the chosen one as JSON.

    \b
    Type a query and press Enter to see ranked results.
    Enter a result number to select it (Enter alone picks the first),
    0 to search again. An empty query quits without selecting.
    """
    cfg = ctx.obj
    case_sensitive, max_results = matching_options(cfg, case_sensitive, max_results)
    cache_cfg = cfg.get('cache', {})
    cache = WindowListCache(
        timeout_seconds=cache_cfg.get('timeout_seconds', 2.0),
        enabled=cache_cfg.get('enabled', True),
    )

    while True:
        query = click.prompt("Search windows", default="", show_default=False)
        if not query:
            return
        windows = cache.get(lambda: read_windows(windows_path))
        ranked = rank_windows(query, windows, case_sensitive, max_results)
        if not ranked:
            click.echo(warning(f"No windows match {query!r}"))
            continue

        for position, window in enumerate(ranked, start=1):
            click.echo(result_line(position, window.display_text, selected=position == 1))
        choice = click.prompt("Select", type=click.IntRange(0, len(ranked)), default=1)
        if choice == 0:
            continue

        chosen = ranked[choice - 1]
        # The list is stale once the user switches windows
        cache.invalidate()
        logger.debug(f"Selected window {chosen.window_number} ({chosen.display_text})")
        click.echo(_json.dumps(chosen.to_dict()))
        return


__all__ = ["pick"]
