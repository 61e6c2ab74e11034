"""Ranking and match diagnostic commands."""

from __future__ import annotations
import json as _json
import logging
from typing import IO

import click

from .helpers import cli, matching_options, read_windows
from ..match import explain_match
from ..windows import rank_windows_scored
from ..utils.output import count_badge, info, result_line, section_header, warning

logger = logging.getLogger(__name__)


@cli.command()
@click.argument("pattern")
@click.option("--windows", "windows_file", type=click.File("r", encoding="utf-8"), default="-",
              help="JSON window list (default: stdin)")
@click.option("--case-sensitive/--ignore-case", default=None, help="Override configured case sensitivity")
@click.option("--max-results", "-n", type=int, default=None, help="Maximum number of results (overrides config)")
@click.option("--scores", is_flag=True, help="Show the score next to each result")
@click.option("--json", "as_json", is_flag=True, help="Emit results as a JSON array")
@click.pass_context
def rank(ctx: click.Context, pattern: str, windows_file: IO[str], case_sensitive: bool | None,
         max_results: int | None, scores: bool, as_json: bool):
    """Rank windows against PATTERN and print the best matches.

    Results are ordered by score; windows with equal scores keep the order
    in which the enumerator listed them.

    \b
    Example:
        yjump rank --windows wins.json --scores code
    """
    case_sensitive, max_results = matching_options(ctx.obj, case_sensitive, max_results)
    windows = read_windows(windows_file)
    logger.debug(f"Ranking {len(windows)} windows (case_sensitive={case_sensitive}, max_results={max_results})")
    ranked = rank_windows_scored(pattern, windows, case_sensitive, max_results)

    if as_json:
        payload = [dict(window.to_dict(), score=score) for window, score in ranked]
        click.echo(_json.dumps(payload, indent=2))
        return

    for position, (window, score) in enumerate(ranked, start=1):
        click.echo(result_line(position, window.display_text, score if scores else None))
    if not ranked:
        click.echo(warning(f"No windows match {pattern!r} ({count_badge(len(windows), 'windows searched')})"), err=True)


@cli.command()
@click.argument("pattern")
@click.argument("text")
@click.option("--case-sensitive/--ignore-case", default=None, help="Override configured case sensitivity")
@click.pass_context
def explain(ctx: click.Context, pattern: str, text: str, case_sensitive: bool | None):
    """Show how PATTERN scores against TEXT.

    Prints the matching tier, the offset or word index that produced the
    hit, and the resulting score.

    \b
    Example:
        yjump explain fox "the quick brown fox"
    """
    case_sensitive, _ = matching_options(ctx.obj, case_sensitive, None)
    breakdown = explain_match(pattern, text, case_sensitive)

    click.echo(section_header(f"{pattern!r} vs {text!r}"))
    click.echo(info(f"Matches: {'yes' if breakdown.matches else 'no'}"))
    click.echo(info(f"Tier: {breakdown.tier.value}"))
    click.echo(info(f"Score: {breakdown.score}"))
    if breakdown.position is not None:
        click.echo(info(f"Offset: {breakdown.position}"))
    if breakdown.word_index is not None:
        click.echo(info(f"Word index: {breakdown.word_index}"))
    click.echo(info(f"Notes: {', '.join(breakdown.notes)}"))


__all__ = ["rank", "explain"]
