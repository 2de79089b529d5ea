"""Resolve sysfs device-class entries to their owning USB device."""

import logging
import os
from pathlib import Path

from labelprint.models.printer import UsbIdentity

logger = logging.getLogger(__name__)

# Class directory holding usblp character devices (lp0, lp1, ...)
DEFAULT_CLASS_ROOT = Path("/sys/class/usbmisc")


def read_sysfs_attr(path: Path) -> str | None:
    """Read a flat sysfs attribute file, stripped of whitespace.

    Returns:
        The attribute value, or None if the file is missing or unreadable.
    """
    try:
        return path.read_text().strip()
    except (OSError, UnicodeDecodeError):
        return None


class SysfsLinkResolver:
    """Maps a class entry (e.g. /sys/class/usbmisc/lp0) to a USB identity.

    The entry's ``device`` symlink points at the USB *interface* directory,
    relative to the entry. The idVendor/idProduct attributes live on the
    parent USB *device* directory, so the link target is joined onto the
    entry, followed by ``..``, and the whole path canonicalized.

    Every step returns None on failure; nothing here raises for a bad entry.
    """

    def __init__(self, class_root: Path | str = DEFAULT_CLASS_ROOT) -> None:
        self.class_root = Path(class_root)

    def entries(self, prefix: str) -> list[Path]:
        """List class entries whose name starts with ``prefix``.

        Order is whatever the OS yields. A missing root gives an empty list.
        """
        if not self.class_root.is_dir():
            logger.debug(f"Device class root {self.class_root} does not exist")
            return []
        try:
            names = os.listdir(self.class_root)
        except OSError as e:
            logger.debug(f"Cannot list {self.class_root}: {e}")
            return []
        return [self.class_root / name for name in names if name.startswith(prefix)]

    def usb_device_dir(self, entry: Path) -> Path | None:
        """Resolve an entry to the canonical path of its USB device directory."""
        try:
            interface = os.readlink(entry / "device")
        except OSError:
            logger.debug(f"{entry.name}: no device link")
            return None

        try:
            return (entry / interface / "..").resolve(strict=True)
        except (OSError, RuntimeError):
            logger.debug(f"{entry.name}: device link {interface} does not resolve")
            return None

    def identity(self, entry: Path) -> UsbIdentity | None:
        """Read the vendor and product id of the USB device behind ``entry``."""
        device_dir = self.usb_device_dir(entry)
        if device_dir is None:
            return None

        vendor_id = read_sysfs_attr(device_dir / "idVendor")
        product_id = read_sysfs_attr(device_dir / "idProduct")
        if vendor_id is None or product_id is None:
            logger.debug(f"{entry.name}: no idVendor/idProduct under {device_dir}")
            return None

        return UsbIdentity(vendor_id=vendor_id, product_id=product_id)
