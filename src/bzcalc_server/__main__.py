"""Main entry point for the BZCalc calculation server."""

import argparse
from datetime import datetime, timezone
import glob
import json
import logging
from logging.handlers import RotatingFileHandler
import os
import sys
from types import TracebackType
from typing import List

from bzcalc_server.bzcalc_server import BZCalcServer
from bzcalc_server.bzcalc_server_settings import BZCalcServerSettings, BZCalcSettingsError


def setup_logging(level: str, log_dir: str = "~/.bzcalc/logs") -> None:
    """Configure server logging with timestamped files and rotation."""
    log_dir = os.path.expanduser(log_dir)
    os.makedirs(log_dir, exist_ok=True)

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d-%H-%M-%S-%f")[:23]
    log_file = os.path.join(log_dir, f"{timestamp}.log")

    # Keep up to 50 log files, max 1MB each
    handler = RotatingFileHandler(
        log_file,
        maxBytes=1024*1024,
        backupCount=49,
        encoding='utf-8'
    )

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler, logging.StreamHandler()]
    )

    cleanup_old_logs(log_dir, max_logs=50)


def cleanup_old_logs(log_dir: str, max_logs: int) -> None:
    """Remove oldest log files if we exceed maximum count."""
    log_files = glob.glob(os.path.join(log_dir, "*.log*"))
    log_files.sort(key=os.path.getctime)

    while len(log_files) > max_logs:
        try:
            os.remove(log_files.pop(0))

        except OSError:
            pass  # Another server may have removed it already


def install_global_exception_handler() -> None:
    """Install a global exception handler for uncaught exceptions."""
    logger = logging.getLogger('GlobalExceptionHandler')

    def handle_exception(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: TracebackType | None) -> None:
        """Handle uncaught exceptions and log them."""
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logger.critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback),
            stack_info=True
        )

    sys.excepthook = handle_exception


def build_settings(args: argparse.Namespace) -> BZCalcServerSettings:
    """
    Load settings from the config file, if any, and apply command line overrides.

    Raises:
        BZCalcSettingsError: If the resulting settings are invalid
        json.JSONDecodeError: If the config file is not valid JSON
        OSError: If the config file cannot be read
    """
    settings = BZCalcServerSettings.load(args.config) if args.config else BZCalcServerSettings.create_default()

    if args.host is not None:
        settings.host = args.host

    if args.port is not None:
        settings.port = args.port

    if args.resource_path is not None:
        settings.resource_path = args.resource_path

    if args.dispatch is not None:
        settings.dispatch_mode = BZCalcServerSettings.parse_dispatch_mode(args.dispatch)

    if args.workers is not None:
        settings.max_workers = args.workers

    settings.validate()
    return settings


def parse_args(argv: List[str] | None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Serve the BZCalc calculator over HTTP")
    parser.add_argument('--config', help='JSON settings file')
    parser.add_argument('--host', help='Address to listen on')
    parser.add_argument('--port', type=int, help='Port to listen on')
    parser.add_argument('--resource-path', help='Directory holding static pages')
    parser.add_argument('--dispatch', choices=['pool', 'thread'], help='Evaluation dispatch mode')
    parser.add_argument('--workers', type=int, help='Thread pool size')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: %(default)s)'
    )
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    """Main function to run the server."""
    args = parse_args(argv)

    try:
        settings = build_settings(args)

    except (BZCalcSettingsError, json.JSONDecodeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    setup_logging(args.log_level)
    install_global_exception_handler()

    BZCalcServer(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
