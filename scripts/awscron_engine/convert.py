#
# Unix -> EventBridge Cron: Converts 5-field crontab schedules to the
# 6-field cron(...) form used by AWS EventBridge Scheduler
#
# EventBridge differences handled here:
#   - day-of-week is numbered 1-7 starting at Sunday (Unix: 0-7, 0 and 7 = Sunday)
#   - day-of-month and day-of-week cannot both be set; the unused one is "?"
#   - a trailing year field is required (1970-2199 or "*")
#

import logging
import re
from collections.abc import Mapping
from typing import Any, Callable, Optional, Tuple, Union

from .errors import InvalidInputTypeError, InvalidYearTypeError, YearRangeError
from .fields import (
    WILDCARD,
    CronFields,
    fields_from_record,
    parse_expression,
    type_label,
)


log = logging.getLogger("awscron.convert")

PLACEHOLDER = "?"

YEAR_MIN = 1970
YEAR_MAX = 2199

YEAR_CONFLICT_NOTICE = (
    "Year specified in both record and year argument. Using record value."
)
DAY_CONFLICT_NOTICE = (
    "Both day-of-month and day-of-week specified. "
    'Using day-of-week and setting day-of-month to "?"'
)

# A lone weekday digit, not part of a longer number
_DOW_DIGIT = re.compile(r"\b([0-7])\b")

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

Notify = Callable[[str], Any]
Year = Union[str, int]


def _default_notify(message: str) -> None:
    log.warning(message)


def convert(
    value: Union[str, Mapping],
    year: Optional[Year] = WILDCARD,
    notify: Optional[Notify] = None,
) -> str:
    """
    Converts a Unix crontab schedule into an EventBridge cron expression.

    Args:
        value: A 5-field expression like "30 9 * * 1-5", or a mapping with
            minute, hour, dayOfMonth, month, dayOfWeek and optional year keys.
        year: Year field for the output, "*" for every year. A year key in
            the mapping takes precedence.
        notify: Receives advisory notices. Defaults to the module logger.

    Returns:
        The expression, e.g. "cron(30 9 ? * 2-6 *)".

    Raises:
        CronConversionError: One of its subclasses, on invalid input.
    """
    if notify is None:
        notify = _default_notify
    if year is None:
        year = WILDCARD

    if isinstance(value, str):
        expression = value
    elif isinstance(value, Mapping):
        expression, year = _normalize_record(value, year, notify)
    else:
        raise InvalidInputTypeError(type_label(value))

    fields = parse_expression(expression)
    day_of_week = map_day_of_week(fields.day_of_week)
    day_of_month, day_of_week = resolve_day_fields(
        fields.day_of_month, day_of_week, notify
    )
    aws_year = validate_year(year)

    result = assemble(fields, day_of_month, day_of_week, aws_year)
    log.debug("Converted %r -> %s", expression, result)
    return result


def _normalize_record(record: Mapping, year: Year, notify: Notify) -> Tuple[str, Year]:
    """Validates a record and returns its canonical expression and effective year."""
    fields = fields_from_record(record)

    if "year" not in record:
        return fields.to_expression(), year

    record_year = record["year"]
    if not isinstance(record_year, str):
        raise InvalidYearTypeError(type_label(record_year))

    if year != WILDCARD and record_year != str(year):
        notify(YEAR_CONFLICT_NOTICE)

    return fields.to_expression(), record_year


def map_day_of_week(day_of_week: str) -> str:
    """
    Renumbers Unix weekday digits to EventBridge numbering.

    0 and 7 (Sunday) become 1, 1-6 shift up by one. Ranges, lists and steps
    keep their separators: "1-5" -> "2-6", "0,6" -> "1,7".
    """
    if day_of_week == WILDCARD:
        return WILDCARD

    def _shift(match):
        day = int(match.group(1))
        if day in (0, 7):
            return "1"
        return str(day + 1)

    return _DOW_DIGIT.sub(_shift, day_of_week)


def resolve_day_fields(
    day_of_month: str,
    day_of_week: str,
    notify: Optional[Notify] = None,
) -> Tuple[str, str]:
    """
    Returns (day_of_month, day_of_week) with at most one of them set.

    When both are set, day-of-week wins. Any field left at "*" becomes "?",
    so two wildcards yield ("?", "?").
    """
    month_set = day_of_month != WILDCARD
    week_set = day_of_week != WILDCARD

    if month_set and week_set:
        (notify or _default_notify)(DAY_CONFLICT_NOTICE)
        return PLACEHOLDER, day_of_week

    return (
        day_of_month if month_set else PLACEHOLDER,
        day_of_week if week_set else PLACEHOLDER,
    )


def validate_year(year: Year) -> str:
    """
    Checks the year field and returns its text form.

    Only the leading integer is range-checked, so "2024-2026" is accepted
    and returned unchanged.

    Raises:
        YearRangeError: If the year is not "*" and not within 1970-2199.
    """
    if year == WILDCARD:
        return WILDCARD
    if isinstance(year, bool):
        raise YearRangeError(year)

    text = str(year)
    match = _LEADING_INT.match(text)
    if not match or not YEAR_MIN <= int(match.group(1)) <= YEAR_MAX:
        raise YearRangeError(year)

    return text


def assemble(fields: CronFields, day_of_month: str, day_of_week: str, year: str) -> str:
    """Formats the final cron(...) expression."""
    return "cron({} {} {} {} {} {})".format(
        fields.minute,
        fields.hour,
        day_of_month,
        fields.month,
        day_of_week,
        year,
    )
