"""Label data model, date normalization and timestamp capture."""

import re
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Default format for the "Date:" line on the label
DEFAULT_TIMESTAMP_FORMAT = "%d/%m/%Y,%H:%M"

# Stored in barcode_value when no barcode was requested; never rendered
BARCODE_SENTINEL = "0"

_NON_DIGITS = re.compile(r"[^0-9]")


class InvalidDateError(ValueError):
    """Raised when a date of birth cannot be normalized."""

    pass


class InvalidCopiesError(ValueError):
    """Raised when the requested number of labels is not a positive integer."""

    pass


def normalize_dob(value: str) -> str:
    """Normalize a date of birth to DD/MM/YYYY.

    Accepts either 8 bare digits (DDMMYYYY) or any string with separators
    around 8 digits (e.g. 05/08/1990, 05-08-1990). All non-digit characters
    are dropped before parsing.

    Args:
        value: Raw operator input.

    Returns:
        The date formatted as DD/MM/YYYY.

    Raises:
        InvalidDateError: If there are not exactly 8 digits or the digits do
            not form a real calendar date.
    """
    digits = _NON_DIGITS.sub("", value)
    if len(digits) != 8:
        raise InvalidDateError(f"Expected 8 digits (DDMMYYYY), got {len(digits)}: {value!r}")

    day, month, year = digits[0:2], digits[2:4], digits[4:8]
    try:
        date(int(year), int(month), int(day))
    except ValueError as e:
        raise InvalidDateError(f"Not a valid calendar date: {value!r}") from e

    return f"{day}/{month}/{year}"


def parse_copies(value: str) -> int:
    """Parse the number of labels to print.

    Raises:
        InvalidCopiesError: If the value is not a positive integer.
    """
    try:
        copies = int(value.strip())
    except ValueError as e:
        raise InvalidCopiesError(f"Please enter a valid integer, got {value!r}") from e
    if copies < 1:
        raise InvalidCopiesError(f"Number of labels must be at least 1, got {copies}")
    return copies


def capture_timestamp(fmt: str = DEFAULT_TIMESTAMP_FORMAT, now: datetime | None = None) -> str:
    """Format the current local date and time for the label."""
    return (now or datetime.now()).strftime(fmt)


class LabelData(BaseModel):
    """Validated label fields, immutable once built."""

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    dob: str
    gender: str
    current_datetime: str = Field(default_factory=capture_timestamp)
    barcode_enabled: bool = False
    barcode_value: str = BARCODE_SENTINEL

    @field_validator("dob")
    @classmethod
    def _normalize_dob(cls, v: str) -> str:
        return normalize_dob(v)

    @model_validator(mode="after")
    def _check_barcode(self) -> "LabelData":
        if not self.barcode_enabled and self.barcode_value != BARCODE_SENTINEL:
            raise ValueError("barcode_value given but barcode_enabled is false")
        return self

    def template_context(self) -> dict[str, object]:
        """Variables exposed to the ZPL template."""
        return {
            "first_name": self.first_name.upper(),
            "last_name": self.last_name.upper(),
            "dob": self.dob,
            "gender": self.gender.upper(),
            "current_datetime": self.current_datetime,
            "barcode_enabled": self.barcode_enabled,
            "barcode_value": self.barcode_value,
        }
