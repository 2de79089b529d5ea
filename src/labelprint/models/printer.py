"""Printer discovery models."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class UsbIdentity(BaseModel):
    """Vendor/product identity read from a USB device's sysfs attributes."""

    model_config = ConfigDict(frozen=True)

    vendor_id: str
    product_id: str


class PrinterDevice(BaseModel):
    """A character device found during a discovery scan."""

    model_config = ConfigDict(frozen=True)

    device_path: Path
    vendor_id: str
    product_id: str
