"""Locate an attached label printer by USB vendor id."""

import logging
from pathlib import Path

from labelprint.models.printer import PrinterDevice
from labelprint.printers.sysfs import SysfsLinkResolver

logger = logging.getLogger(__name__)

# Zebra Technologies
ZEBRA_VENDOR_ID = "0a5f"
DEFAULT_DEVICE_PREFIX = "lp"
DEFAULT_DEVICE_DIR = Path("/dev/usb")


class PrinterLocator:
    """Finds line-printer device nodes and the vendor behind each."""

    def __init__(
        self,
        resolver: SysfsLinkResolver | None = None,
        device_prefix: str = DEFAULT_DEVICE_PREFIX,
        device_dir: Path | str = DEFAULT_DEVICE_DIR,
    ) -> None:
        self.resolver = resolver or SysfsLinkResolver()
        self.device_prefix = device_prefix
        self.device_dir = Path(device_dir)

    def scan(self) -> list[PrinterDevice]:
        """Return every class entry that resolves to a USB identity."""
        printers = []
        for entry in self.resolver.entries(self.device_prefix):
            identity = self.resolver.identity(entry)
            if identity is None:
                continue
            printers.append(
                PrinterDevice(
                    device_path=self.device_dir / entry.name,
                    vendor_id=identity.vendor_id,
                    product_id=identity.product_id,
                )
            )
        logger.debug(f"Discovery scan found {len(printers)} USB printer device(s)")
        return printers

    def locate(self, vendor_id: str) -> Path | None:
        """Return the device path of the first printer from ``vendor_id``.

        Vendor ids are compared case-insensitively since sysfs reports them in
        lower-case hex.
        """
        wanted = vendor_id.lower()
        for printer in self.scan():
            if printer.vendor_id.lower() == wanted:
                logger.debug(f"Found printer {printer.vendor_id}:{printer.product_id} at {printer.device_path}")
                return printer.device_path
        logger.debug(f"No printer with vendor id {vendor_id} found")
        return None
