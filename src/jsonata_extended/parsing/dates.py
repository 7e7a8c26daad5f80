"""Date/time and duration parsing.

Implements the moment() and momentDuration() host functions on top of
pendulum. Both return pendulum objects (DateTime, Duration) so expressions
can extract fields, do arithmetic and format with locale-aware tokens.

Supported moment() call shapes:
    - ``moment()``: current time
    - ``moment(text)``: ISO-8601 or other common textual forms
    - ``moment(text, fmt)``: token format, e.g. "MM-DD-YYYY"; fmt may be a
      list of candidate formats tried in order
    - ``moment(text, fmt, locale)`` and ``moment(text, fmt, strict)`` and
      ``moment(text, fmt, locale, strict)``
    - ``moment(number)``: milliseconds since the Unix epoch
    - ``moment([year, month, day, ...])``: components, month is zero-based

Unlike the other functions, neither falls back to None for a missing first
argument: with no input they describe "now" and a zero-length duration.

Python 3.13+. Uses pendulum.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence

import pendulum

from jsonata_extended.diagnostics import DelegateFailureError, ErrorTemplate, OptionTypeError

__all__ = ["moment", "moment_duration", "normalize_duration_unit"]

logger = logging.getLogger(__name__)

# Unit aliases accepted in expressions -> pendulum.duration() keyword.
_DURATION_UNITS: dict[str, str] = {
    "y": "years",
    "year": "years",
    "years": "years",
    "M": "months",
    "month": "months",
    "months": "months",
    "w": "weeks",
    "week": "weeks",
    "weeks": "weeks",
    "d": "days",
    "day": "days",
    "days": "days",
    "h": "hours",
    "hour": "hours",
    "hours": "hours",
    "m": "minutes",
    "minute": "minutes",
    "minutes": "minutes",
    "s": "seconds",
    "second": "seconds",
    "seconds": "seconds",
    "ms": "milliseconds",
    "millisecond": "milliseconds",
    "milliseconds": "milliseconds",
}

# [-][d.]hh:mm[:ss[.fff]]
_CLOCK_DURATION = re.compile(
    r"(?P<sign>-)?(?:(?P<days>\d+)\.)?(?P<hours>\d+):(?P<minutes>\d\d)"
    r"(?::(?P<seconds>\d\d)(?:\.(?P<fraction>\d{1,3}))?)?"
)

# Component names for moment([...]) in positional order.
_COMPONENTS = ("year", "month", "day", "hour", "minute", "second", "millisecond")


def normalize_duration_unit(unit: str) -> str:
    """Map a unit alias to its pendulum keyword.

    Raises:
        OptionTypeError: If unit is not a known alias

    Example:
        >>> normalize_duration_unit("h")
        'hours'
        >>> normalize_duration_unit("Minutes")
        'minutes'
    """
    if not isinstance(unit, str):
        raise OptionTypeError(ErrorTemplate.invalid_duration_unit(str(unit)))
    # "M" (months) and "m" (minutes) are case-sensitive; everything else is not
    normalized = _DURATION_UNITS.get(unit) or _DURATION_UNITS.get(unit.lower())
    if normalized is None:
        raise OptionTypeError(ErrorTemplate.invalid_duration_unit(unit))
    return normalized


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _from_components(parts: Sequence[object]) -> pendulum.DateTime:
    if not parts or len(parts) > len(_COMPONENTS) or not all(_is_number(p) for p in parts):
        raise DelegateFailureError(ErrorTemplate.invalid_date(list(parts)))
    values = dict(zip(_COMPONENTS, (int(p) for p in parts), strict=False))  # type: ignore[arg-type]
    try:
        return pendulum.datetime(
            values["year"],
            values.get("month", 0) + 1,
            values.get("day", 1),
            values.get("hour", 0),
            values.get("minute", 0),
            values.get("second", 0),
            values.get("millisecond", 0) * 1000,
        )
    except ValueError as e:
        raise DelegateFailureError(ErrorTemplate.invalid_date(list(parts))) from e


def _parse_flexible(text: str) -> pendulum.DateTime:
    try:
        parsed = pendulum.parse(text, strict=False)
    except ValueError as e:
        raise DelegateFailureError(ErrorTemplate.invalid_date(text)) from e
    # DateTime subclasses Date, so test it first
    if isinstance(parsed, pendulum.DateTime):
        return parsed
    if isinstance(parsed, pendulum.Date):
        return pendulum.datetime(parsed.year, parsed.month, parsed.day)
    raise DelegateFailureError(ErrorTemplate.invalid_date(text))


def _parse_formatted(
    text: str,
    formats: str | Sequence[str],
    locale: str | None,
    strict: bool,
) -> pendulum.DateTime:
    candidates = [formats] if isinstance(formats, str) else list(formats)
    for fmt in candidates:
        try:
            return pendulum.from_format(text, fmt, locale=locale)
        except ValueError:
            logger.debug("Date '%s' does not match format '%s'", text, fmt)
    if strict:
        raise DelegateFailureError(ErrorTemplate.invalid_date(text))
    return _parse_flexible(text)


def moment(
    value: str | int | float | Sequence[int] | None = None,
    formats: str | Sequence[str] | None = None,
    locale: str | bool | None = None,
    strict: bool | None = None,
) -> pendulum.DateTime:
    """Create a pendulum DateTime from flexible input.

    Args:
        value: Text, epoch milliseconds, component list, or None for now
        formats: Token format or list of formats for text input
        locale: Locale for month/day names in formats; a bool here is
            taken as ``strict`` (three-argument strict form)
        strict: If True, text must match one of the formats exactly;
            otherwise a flexible parse is attempted after all formats fail

    Returns:
        pendulum.DateTime

    Raises:
        DelegateFailureError: If the input cannot be interpreted as a date

    Example:
        >>> moment("2017-02-02T15:49:06Z").year
        2017
        >>> moment("12-12-1995", "MM-DD-YYYY").format("MMMM", locale="it")
        'dicembre'
    """
    if isinstance(locale, bool):
        locale, strict = None, locale

    if value is None:
        return pendulum.now()
    if _is_number(value):
        return pendulum.from_timestamp(value / 1000)  # type: ignore[operator]
    if isinstance(value, str):
        if formats is None:
            return _parse_flexible(value)
        return _parse_formatted(value, formats, locale, bool(strict))
    if isinstance(value, Sequence):
        return _from_components(value)
    raise DelegateFailureError(ErrorTemplate.invalid_date(value))


def _parse_duration_text(text: str) -> pendulum.Duration:
    match = _CLOCK_DURATION.fullmatch(text.strip())
    if match is not None:
        sign = -1 if match["sign"] else 1
        fraction = (match["fraction"] or "0").ljust(3, "0")
        return pendulum.duration(
            days=sign * int(match["days"] or 0),
            hours=sign * int(match["hours"]),
            minutes=sign * int(match["minutes"]),
            seconds=sign * int(match["seconds"] or 0),
            milliseconds=sign * int(fraction),
        )
    try:
        parsed = pendulum.parse(text)
    except ValueError as e:
        raise DelegateFailureError(ErrorTemplate.invalid_duration(text)) from e
    if not isinstance(parsed, pendulum.Duration):
        raise DelegateFailureError(ErrorTemplate.invalid_duration(text))
    return parsed


def moment_duration(
    value: str | int | float | Mapping[str, int | float] | None = None,
    unit: str | None = None,
) -> pendulum.Duration:
    """Create a pendulum Duration from flexible input.

    Args:
        value: ISO-8601 duration ("PT1H2M10S"), clock text ("1.02:03:04"),
            a number, a mapping of unit -> amount, or None for zero
        unit: Unit for a numeric value (default: milliseconds)

    Returns:
        pendulum.Duration

    Raises:
        DelegateFailureError: If text cannot be parsed as a duration
        OptionTypeError: If a unit name is unknown

    Example:
        >>> moment_duration("PT1H2M10S").in_seconds()
        3730
        >>> moment_duration(2, "hours").in_minutes()
        120
    """
    if value is None:
        return pendulum.duration()
    if _is_number(value):
        keyword = normalize_duration_unit(unit) if unit is not None else "milliseconds"
        return pendulum.duration(**{keyword: value})
    if isinstance(value, str):
        return _parse_duration_text(value)
    if isinstance(value, Mapping):
        amounts = {normalize_duration_unit(key): amount for key, amount in value.items()}
        try:
            return pendulum.duration(**amounts)
        except TypeError as e:
            raise DelegateFailureError(ErrorTemplate.invalid_duration(dict(value))) from e
    raise DelegateFailureError(ErrorTemplate.invalid_duration(value))
