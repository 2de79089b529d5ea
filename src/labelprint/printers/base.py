"""Abstract base class for printer implementations."""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class BasePrinter(ABC):
    """A destination that accepts raw printer command data."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def print_raw(self, data: bytes) -> None:
        """Send raw data to the printer.

        Each call is one complete label copy.

        Args:
            data: Raw printer command data (ZPL).

        Raises:
            PrinterError: If the data could not be written.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class PrinterError(Exception):
    """Exception raised for printer-related errors."""

    pass
