"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest


def _make_usb_entry(
    sys_root: Path,
    name: str,
    vendor_id: str | None = "0a5f",
    product_id: str | None = "0100",
    bus_path: str | None = None,
) -> Path:
    """Create a sysfs-like usbmisc entry linked to a fake USB device.

    Layout mirrors the kernel's:
        <sys>/devices/pci0000:00/usb1/<bus>/<bus>:1.0/        (interface)
        <sys>/devices/pci0000:00/usb1/<bus>/idVendor          (device attrs)
        <sys>/class/usbmisc/<name>/device -> ../../../devices/.../<bus>:1.0

    A None vendor_id or product_id leaves that attribute file out.
    """
    bus = bus_path or f"1-{name[-1]}"
    device_dir = sys_root / "devices" / "pci0000:00" / "usb1" / bus
    interface_dir = device_dir / f"{bus}:1.0"
    interface_dir.mkdir(parents=True, exist_ok=True)
    if vendor_id is not None:
        (device_dir / "idVendor").write_text(f"{vendor_id}\n")
    if product_id is not None:
        (device_dir / "idProduct").write_text(f"{product_id}\n")

    entry = sys_root / "class" / "usbmisc" / name
    entry.mkdir(parents=True, exist_ok=True)
    os.symlink(f"../../../devices/pci0000:00/usb1/{bus}/{bus}:1.0", entry / "device")
    return entry


@pytest.fixture
def sys_root(tmp_path: Path) -> Path:
    """An empty fake /sys with a usbmisc class directory."""
    root = tmp_path / "sys"
    (root / "class" / "usbmisc").mkdir(parents=True)
    return root


@pytest.fixture
def class_root(sys_root: Path) -> Path:
    return sys_root / "class" / "usbmisc"


@pytest.fixture
def usb_entry(sys_root: Path):
    """Factory creating usbmisc entries under the fake /sys."""

    def factory(name: str, **kwargs) -> Path:
        return _make_usb_entry(sys_root, name, **kwargs)

    return factory
