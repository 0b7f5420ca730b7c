#
# Cron Fields: canonical five-field representation of a Unix crontab schedule
# Both the textual and the mapping input shapes are reduced to CronFields
#

import logging
from collections.abc import Mapping
from typing import Any, NamedTuple

from .errors import FieldCountError, InvalidFieldTypeError, MissingFieldsError


log = logging.getLogger("awscron.fields")

# Record keys, in positional order
RECORD_FIELDS = ("minute", "hour", "dayOfMonth", "month", "dayOfWeek")

WILDCARD = "*"


class CronFields(NamedTuple):
    minute: str
    hour: str
    day_of_month: str
    month: str
    day_of_week: str

    def to_expression(self) -> str:
        """Returns the space-joined Unix form, e.g. "0 9 * * 1-5"."""
        return " ".join(self)


def type_label(value: Any) -> str:
    """Names the type of a value for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    if callable(value):
        return "function"
    return type(value).__name__


def parse_expression(expression: str) -> CronFields:
    """
    Splits a 5-field Unix cron expression into CronFields.

    Tokens are not interpreted; "*/15", "1-5" and "0,30" pass through as-is.

    Raises:
        FieldCountError: If the expression does not have exactly 5 fields.
    """
    parts = expression.strip().split()
    if len(parts) != 5:
        raise FieldCountError(len(parts))

    log.debug("Parsed fields: %s", parts)
    return CronFields(*parts)


def fields_from_record(record: Mapping) -> CronFields:
    """
    Builds CronFields from a mapping keyed by RECORD_FIELDS.

    Unknown keys are ignored. Presence is checked before types, so a record
    with missing keys never reports type errors in the same call.

    Raises:
        MissingFieldsError: Lists every absent key.
        InvalidFieldTypeError: Lists every key whose value is not a str.
    """
    missing = [name for name in RECORD_FIELDS if name not in record]
    if missing:
        raise MissingFieldsError(missing)

    invalid = [
        (name, type_label(record[name]))
        for name in RECORD_FIELDS
        if not isinstance(record[name], str)
    ]
    if invalid:
        raise InvalidFieldTypeError(invalid)

    return CronFields(*(record[name] for name in RECORD_FIELDS))
