"""Pydantic models for Labelprint."""

from labelprint.models.label import InvalidCopiesError, InvalidDateError, LabelData
from labelprint.models.printer import PrinterDevice, UsbIdentity
from labelprint.models.session import AttemptState, SessionOutcome

__all__ = [
    "AttemptState",
    "InvalidCopiesError",
    "InvalidDateError",
    "LabelData",
    "PrinterDevice",
    "SessionOutcome",
    "UsbIdentity",
]
