"""Exceptions raised by the cron converter."""

from typing import List, Tuple


class CronConversionError(ValueError):
    """Base class for every conversion failure."""


class InvalidInputTypeError(CronConversionError, TypeError):
    def __init__(self, received: str):
        self.received = received
        super().__init__(
            "Input must be a string or mapping, received: {}".format(received)
        )


class MissingFieldsError(CronConversionError):
    def __init__(self, fields: List[str]):
        self.fields = list(fields)
        super().__init__(
            "Missing required cron fields: {}".format(", ".join(self.fields))
        )


class InvalidFieldTypeError(CronConversionError, TypeError):
    def __init__(self, fields: List[Tuple[str, str]]):
        # (field name, received type label) pairs
        self.fields = list(fields)
        details = ", ".join(
            "{} (received {})".format(name, label) for name, label in self.fields
        )
        super().__init__(
            "All cron fields must be strings. Invalid fields: {}".format(details)
        )


class InvalidYearTypeError(CronConversionError, TypeError):
    def __init__(self, received: str):
        self.received = received
        super().__init__(
            "Year field must be a string if provided (received {})".format(received)
        )


class FieldCountError(CronConversionError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(
            "Unix cron expression must have exactly 5 fields "
            "(minute hour day-of-month month day-of-week), got {}".format(count)
        )


class YearRangeError(CronConversionError):
    def __init__(self, year):
        self.year = year
        super().__init__('Year must be between 1970-2199 or "*"')
