"""Detection of dates embedded in file names."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple

MAX_FUTURE_YEAR = 10
DATE_FORMAT = "{:04d}-{:02d}-{:02d}"

# Month names, one column per language: English, English short,
# Italian, Italian short.
MONTHS = (
    ("january", "jan", "gennaio", "gen"),
    ("february", "feb", "febbraio", "feb"),
    ("march", "mar", "marzo", "mar"),
    ("april", "apr", "aprile", "apr"),
    ("may", "may", "maggio", "mag"),
    ("june", "jun", "giugno", "giu"),
    ("july", "jul", "luglio", "lug"),
    ("august", "aug", "agosto", "ago"),
    ("september", "sep", "settembre", "set"),
    ("october", "oct", "ottobre", "ott"),
    ("november", "nov", "novembre", "nov"),
    ("december", "dec", "dicembre", "dic"),
)
MONTH_LANGS = len(MONTHS[0])

_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class Outcome(IntEnum):
    """Result of looking for a date in a name."""

    FOUND = 0
    UNSURE = 1
    UNKNOWN = 2
    UNCHANGED = 3
    FAILURE = 4


@dataclass(frozen=True)
class Date:
    """A calendar date as read from a name."""

    year: int
    month: int
    day: int


def this_year() -> int:
    """Return the current local year."""
    return time.localtime().tm_year


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def check_date(date: Date) -> bool:
    """Tell whether the date exists and is not too far in the future."""
    if date.year == 0 or date.month == 0 or date.day == 0:
        return False
    if date.year > this_year() + MAX_FUTURE_YEAR or date.month > 12 or date.day > 31:
        return False
    if date.month == 2 and _is_leap(date.year) and date.day <= 29:
        return True
    return date.day <= _DAYS_IN_MONTH[date.month]


def _group_value(groups: tuple[str | None, ...], position: int) -> int | None:
    text = groups[position]
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def extract_date(
    source: str,
    pattern: str | re.Pattern[str],
    year_pos: int | None,
    month_pos: int | None,
    day_pos: int,
    month_value: int | None = None,
) -> str | None:
    """Search the pattern in source and return the date it captures.

    Positions index the capturing groups from 0; a year position of None
    means the current year, a month position of None means month_value.
    Returns the date as YYYY-MM-DD, or None if nothing valid matched.
    """
    if month_pos is None and month_value is None:
        raise ValueError("month_value is required when month_pos is None")
    regex = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern, re.ASCII)
    match = regex.search(source)
    if match is None:
        return None
    groups = match.groups()

    year = this_year() if year_pos is None else _group_value(groups, year_pos)
    month = month_value if month_pos is None else _group_value(groups, month_pos)
    day = _group_value(groups, day_pos)
    if year is None or month is None or day is None:
        return None

    # Two-digit years are read as near-future or past-century years.
    if year < 100:
        year += 2000 if year <= this_year() - 2000 + MAX_FUTURE_YEAR else 1900

    date = Date(year=year, month=month, day=day)
    if not check_date(date):
        return None
    return DATE_FORMAT.format(date.year, date.month, date.day)


class _Rule(NamedTuple):
    pattern: re.Pattern[str]
    year_pos: int | None
    month_pos: int | None
    day_pos: int
    month_value: int | None = None


def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.ASCII)


def _month_rules(
    language: int, prefix: str, suffix: str, year_pos: int | None, day_pos: int
) -> list[_Rule]:
    return [
        _Rule(_compile(prefix + "(?i:" + names[language] + ")" + suffix), year_pos, None, day_pos, number)
        for number, names in enumerate(MONTHS, start=1)
    ]


def _build_stages() -> list[list[_Rule]]:
    stages: list[list[_Rule]] = []

    # Worded month with year; separators optional.
    for language in range(MONTH_LANGS):
        stages.append(
            _month_rules(language, r"(?:\D|^)(\d{4}|\d{2})[- _]?", r"[- _]?(\d{2}|\d{1})(?:\D|$)", 0, 1)
            + _month_rules(language, r"(?:\D|^)(\d{2}|\d{1})[- _]?", r"[- _]?(\d{4}|\d{2})(?:\D|$)", 1, 0)
        )

    # Worded month without year; separators optional.
    for language in range(MONTH_LANGS):
        stages.append(
            _month_rules(language, "", r"[- _]?(\d{2}|\d{1})(?:\D|$)", None, 0)
            + _month_rules(language, r"(?:\D|^)(\d{2}|\d{1})[- _]?", "", None, 0)
        )

    # Numerical month with year.
    stages.append(
        [
            _Rule(_compile(r"(?:\D|^)(\d{4}|\d{2})[- _](\d{2}|\d{1})[- _](\d{2}|\d{1})(?:\D|$)"), 0, 1, 2),
            _Rule(_compile(r"(?:\D|^)(\d{2}|\d{1})[- _](\d{2}|\d{1})[- _](\d{4}|\d{2})(?:\D|$)"), 2, 1, 0),
            _Rule(_compile(r"(?:\D|^)(\d{4}|\d{2})(\d{2})(\d{2})(?:\D|$)"), 0, 1, 2),
            _Rule(_compile(r"(?:\D|^)(\d{2})(\d{2})(\d{4}|\d{2})(?:\D|$)"), 2, 1, 0),
        ]
    )

    # Numerical month without year.
    separated = _compile(r"(?:\D|^)(\d{2}|\d{1})[- _](\d{2}|\d{1})(?:\D|$)")
    joined = _compile(r"(?:\D|^)(\d{2})(\d{2})(?:\D|$)")
    stages.append(
        [
            _Rule(separated, None, 0, 1),
            _Rule(separated, None, 1, 0),
            _Rule(joined, None, 0, 1),
            _Rule(joined, None, 1, 0),
        ]
    )
    return stages


_STAGES = _build_stages()


def find_date(source: str) -> tuple[Outcome, str]:
    """Look for a date in source and return the outcome with the date found.

    The date is formatted YYYY-MM-DD; it is empty when the outcome is UNKNOWN.
    When more than one pattern matches, the first date is returned as UNSURE.
    """
    first: str | None = None
    for stage in _STAGES:
        for rule in stage:
            result = extract_date(source, *rule)
            if result is None:
                continue
            if first is not None:
                return Outcome.UNSURE, first
            first = result
        if first is not None:
            break

    if first is None:
        return Outcome.UNKNOWN, ""
    if first == source:
        return Outcome.UNCHANGED, first
    return Outcome.FOUND, first