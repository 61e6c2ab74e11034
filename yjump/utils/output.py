"""Output formatting utilities for consistent CLI reporting."""

from __future__ import annotations

import click


def section_header(text: str) -> str:
    """Format a section header with color.

    Args:
        text: Header text

    Returns:
        Formatted header string
    """
    return click.style(f"▶ {text}", fg='cyan', bold=True)


def warning(text: str, prefix: str = "⚠") -> str:
    return f"{click.style(prefix, fg='yellow')} {text}"


def info(text: str) -> str:
    return f"  {click.style('•', fg='blue')} {text}"


def result_line(position: int, text: str, score: int | None = None, selected: bool = False) -> str:
    """Format one ranked result row.

    Args:
        position: 1-based row number shown to the user
        text: Display text of the window
        score: Optional score appended in dim style
        selected: Highlight the row (first row is pre-selected in the picker)

    Returns:
        Formatted row string
    """
    number = click.style(f"{position:>2}.", fg='cyan')
    body = click.style(text, bold=True) if selected else text
    if score is None:
        return f"{number} {body}"
    return f"{number} {body} {click.style(f'({score})', fg='bright_black')}"


def count_badge(count: int, label: str, color: str = 'cyan') -> str:
    return f"{click.style(str(count), fg=color, bold=True)} {label}"


__all__ = [
    "section_header",
    "warning",
    "info",
    "result_line",
    "count_badge",
]
