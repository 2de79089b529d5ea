"""Entry point for running Labelprint as a module."""

import argparse
import logging
import sys
from pathlib import Path

from labelprint.config import AppConfig, ConfigError, load_config, settings
from labelprint.console import Console
from labelprint.models.label import InvalidCopiesError
from labelprint.printers import DevicePrinter, PrinterLocator, SysfsLinkResolver
from labelprint.session import PrintSession
from labelprint.templates import TemplateError, ZPLTemplateEngine

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print a patient label on a USB-attached Zebra printer.",
        prog="labelprint",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to YAML config file (default: $LABELPRINT_CONFIG_FILE or labelprint.yaml)",
    )
    parser.add_argument(
        "--device",
        type=Path,
        default=None,
        help="Printer device node to use, skipping discovery",
    )
    parser.add_argument(
        "--vendor-id",
        default=None,
        help="USB vendor id of the printer to look for (default: 0a5f)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def resolve_printer_path(config: AppConfig, console: Console, vendor_id: str | None = None) -> Path:
    """Find the printer, falling back to the configured default path."""
    discovery = config.discovery
    locator = PrinterLocator(
        resolver=SysfsLinkResolver(discovery.class_root),
        device_prefix=discovery.device_prefix,
        device_dir=discovery.device_dir,
    )
    path = locator.locate(vendor_id or discovery.vendor_id)
    if path is not None:
        console.say(f"✓ Detected Zebra printer at: {path}")
        return path

    console.say(f"⚠ No Zebra printer detected, using default path {discovery.fallback_device}")
    return discovery.fallback_device


def build_engine(config: AppConfig) -> ZPLTemplateEngine:
    """Create the ZPL engine, using the configured template file if any."""
    if config.label.template_file is not None:
        return ZPLTemplateEngine.from_file(config.label.template_file)
    return ZPLTemplateEngine()


def run(args: argparse.Namespace, console: Console) -> int:
    """Discover, collect, render and print one label. Returns the exit code."""
    config_file = args.config or settings.config_file
    try:
        config = load_config(config_file)
        engine = build_engine(config)
    except (ConfigError, TemplateError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    console.say("=== Label Printer ===")
    if args.device is not None:
        printer_path = args.device
        console.say(f"Using printer at: {printer_path}")
    else:
        printer_path = resolve_printer_path(config, console, args.vendor_id)

    console.say("\n--- New Label ---")
    label = console.collect_label(config.label.timestamp_format)
    try:
        copies = console.ask_copies()
    except InvalidCopiesError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        document = engine.render(label)
    except TemplateError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    session = PrintSession(
        DevicePrinter(printer_path),
        confirm_retry=console.confirm_retry,
        on_copy_printed=console.report_copy_printed,
    )
    outcome = session.run(document, copies)
    if not outcome.succeeded:
        console.say(f"Make sure the printer is connected at: {printer_path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the Labelprint console."""
    args = _build_parser().parse_args(argv)

    # Operator messages go to the console; logs stay quiet unless debugging
    log_level = logging.DEBUG if (args.debug or settings.debug) else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        return run(args, Console())
    except (KeyboardInterrupt, EOFError):
        print("\nAborted.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
