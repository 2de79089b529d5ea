"""Configuration management for Labelprint."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from labelprint.models.label import DEFAULT_TIMESTAMP_FORMAT
from labelprint.printers.locator import DEFAULT_DEVICE_DIR, DEFAULT_DEVICE_PREFIX, ZEBRA_VENDOR_ID
from labelprint.printers.sysfs import DEFAULT_CLASS_ROOT

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised when the config file cannot be loaded."""

    pass


class DiscoveryConfig(BaseModel):
    """Where to look for the printer and which vendor to match."""

    class_root: Path = DEFAULT_CLASS_ROOT
    device_prefix: str = DEFAULT_DEVICE_PREFIX
    device_dir: Path = DEFAULT_DEVICE_DIR
    vendor_id: str = ZEBRA_VENDOR_ID
    # Used when no printer from vendor_id is found
    fallback_device: Path = Path("/dev/usb/lp0")


class LabelConfig(BaseModel):
    """Label rendering options."""

    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    # Custom Jinja2 ZPL template; the built-in one is used when unset
    template_file: Path | None = None


class AppConfig(BaseModel):
    """Application configuration loaded from labelprint.yaml."""

    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    label: LabelConfig = Field(default_factory=LabelConfig)


class Settings(BaseSettings):
    """Environment-based settings."""

    model_config = SettingsConfigDict(
        env_prefix="LABELPRINT_",
        env_file=".env",
        extra="ignore",
    )

    config_file: Path = Path("labelprint.yaml")
    debug: bool = False


def load_config(config_path: Path) -> AppConfig:
    """Load application configuration from a YAML file.

    A missing file gives the defaults. Relative template paths are resolved
    against the config file's directory.

    Raises:
        ConfigError: If the file is unreadable, not valid YAML, or fails validation.
    """
    if not config_path.exists():
        logger.debug(f"No config file at {config_path}, using defaults")
        return AppConfig()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must be a mapping, got {type(data).__name__}")

    # YAML returns None for empty sections
    for section in ("discovery", "label"):
        if data.get(section) is None:
            data.pop(section, None)

    try:
        config = AppConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e

    template_file = config.label.template_file
    if template_file is not None and not template_file.is_absolute():
        config.label.template_file = config_path.parent / template_file

    return config


# Global settings instance
settings = Settings()
