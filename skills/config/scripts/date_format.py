"""
Date Format Translation for Daily Notes

Obsidian's daily notes use moment.js style formats ("YYYY-MM-DD"). Journals
store their filename pattern with placeholders instead ("{YYYY}-{MM}-{DD}").
This module converts between the two and renders patterns for a given day.

Usage:
    from skills.config.scripts.date_format import (
        apply_filename_pattern,
        translate_date_format,
    )

    pattern = translate_date_format("[Week] YYYY-MM-DD")  # "Week {YYYY}-{MM}-{DD}"
    apply_filename_pattern(pattern, "2025-01-15")          # "Week 2025-01-15"
"""

from __future__ import annotations

from datetime import date

DEFAULT_FILENAME_PATTERN = "{YYYY}-{MM}-{DD}"

YEAR = "{YYYY}"
MONTH = "{MM}"
DAY = "{DD}"

TOKEN_LETTERS = frozenset("YyMDd")

# Only these exact runs are supported; anything else ("Y", "MMM", "ddd") is not
SUPPORTED_TOKENS: dict[str, str] = {
    "YYYY": YEAR,
    "yyyy": YEAR,
    "MM": MONTH,
    "DD": DAY,
    "dd": DAY,
}


def translate_date_format(fmt: str | None) -> str:
    """
    Translate a moment.js style date format into a placeholder pattern.

    Text inside square brackets is literal: the brackets are removed and the
    text is copied as is. An unmatched "]" is ignored.

    Args:
        fmt: Date format such as "YYYY-MM-DD" or "[Week] YYYY/MM/DD"

    Returns:
        Pattern with {YYYY}, {MM} and {DD} placeholders, or "" when the format
        uses an unsupported token or lacks a year, month or day
    """
    if not fmt or not fmt.strip():
        return ""

    out: list[str] = []
    produced: set[str] = set()
    depth = 0
    i = 0
    n = len(fmt)

    while i < n:
        ch = fmt[i]

        if ch == "[":
            depth += 1
            i += 1
            continue
        if ch == "]":
            depth = max(depth - 1, 0)
            i += 1
            continue

        if depth > 0 or ch not in TOKEN_LETTERS:
            out.append(ch)
            i += 1
            continue

        end = i
        while end < n and fmt[end] == ch:
            end += 1
        placeholder = SUPPORTED_TOKENS.get(fmt[i:end])
        if placeholder is None:
            return ""

        out.append(placeholder)
        produced.add(placeholder)
        i = end

    if produced != {YEAR, MONTH, DAY}:
        return ""
    return "".join(out)


def apply_filename_pattern(pattern: str, day: date | str) -> str:
    """
    Render a placeholder pattern for a concrete day.

    Args:
        pattern: Pattern such as "{YYYY}/{MM}/{YYYY}-{MM}-{DD}" (empty uses the default)
        day: Date object or ISO date string ("2025-01-15")

    Returns:
        Rendered filename stem

    Raises:
        ValueError: If day is a string that is not an ISO date
    """
    if isinstance(day, str):
        day = date.fromisoformat(day)

    return (
        (pattern or DEFAULT_FILENAME_PATTERN)
        .replace(YEAR, f"{day.year:04d}")
        .replace(MONTH, f"{day.month:02d}")
        .replace(DAY, f"{day.day:02d}")
    )
