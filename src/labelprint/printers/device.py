"""Printer backed by a USB line-printer character device."""

import logging
import os
from pathlib import Path

from labelprint.printers.base import BasePrinter, PrinterError

logger = logging.getLogger(__name__)


def _open_write_only(path, flags):
    # Drop the O_CREAT|O_TRUNC that "wb" asks for
    return os.open(path, os.O_WRONLY)


class DevicePrinter(BasePrinter):
    """Writes ZPL directly to a device node such as /dev/usb/lp0.

    The node is opened, written, flushed and closed for every copy. It is
    opened write-only without O_CREAT, so a missing device is an error rather
    than a new regular file.
    """

    def __init__(self, device_path: Path | str) -> None:
        self.device_path = Path(device_path)
        super().__init__(str(self.device_path))

    def print_raw(self, data: bytes) -> None:
        """Write one copy of the document to the device."""
        try:
            f = open(self.device_path, "wb", opener=_open_write_only)
        except OSError as e:
            raise PrinterError(f"Cannot open printer at {self.device_path}: {e}") from e

        try:
            with f:
                f.write(data)
                f.flush()
        except OSError as e:
            raise PrinterError(f"Failed writing to printer at {self.device_path}: {e}") from e

        logger.debug(f"Wrote {len(data)} bytes to {self.device_path}")
