"""
HoopCount - Two-team score counter

Entry point for the application.
"""

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from config import (
    init_config, load_user_settings, APP_NAME, APP_AUTHOR, APP_VERSION,
    PATHS, UI_SETTINGS,
)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line options."""
    parser = argparse.ArgumentParser(prog="hoopcount", description="Two-team score counter")
    parser.add_argument(
        "--device", choices=sorted(UI_SETTINGS.device_presets),
        help="Window size preset (overrides settings.json)",
    )
    parser.add_argument(
        "--preview", action="store_true",
        help="Show the layout with crown input disabled",
    )
    parser.add_argument(
        "--settings", type=Path, default=None,
        help=f"Preferences file (default: {PATHS.settings})",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    """Log to the console and to the per-user log file."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(PATHS.log_file, encoding="utf-8"),
        ],
    )


def main(argv=None) -> int:
    """Main entry point for HoopCount."""
    args = parse_args(argv)

    # Initialize configuration and directories
    init_config()
    setup_logging(args.log_level)

    settings = load_user_settings(args.settings)
    if args.device:
        settings = settings.model_copy(update={"device": args.device})

    # High DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    # Create application
    app = QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setOrganizationName(APP_AUTHOR)

    # Create and show main window
    from app import HoopCountApp
    hoop_app = HoopCountApp(settings, preview=args.preview)
    hoop_app.show()

    logging.getLogger(__name__).info(f"{APP_NAME} {APP_VERSION} started ({settings.device})")

    # Run event loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
