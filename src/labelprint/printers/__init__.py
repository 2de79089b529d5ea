"""Printer discovery and output for Labelprint."""

from labelprint.printers.base import BasePrinter, PrinterError
from labelprint.printers.device import DevicePrinter
from labelprint.printers.locator import ZEBRA_VENDOR_ID, PrinterLocator
from labelprint.printers.sysfs import SysfsLinkResolver

__all__ = [
    "BasePrinter",
    "DevicePrinter",
    "PrinterError",
    "PrinterLocator",
    "SysfsLinkResolver",
    "ZEBRA_VENDOR_ID",
]
