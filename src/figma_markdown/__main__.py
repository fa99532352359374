# ABOUTME: CLI entry point for figma-markdown.
# ABOUTME: Provides 'run' and 'list' commands.

import argparse
import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path

from .config import load_config, ConfigError, Config
from .exporter import export_document, list_frames


def setup_logging(log_path: Path | None = None, verbose: bool = False) -> None:
    """Configure logging for the application.

    Args:
        log_path: Optional path for log file. If provided, enables rotating file logging.
        verbose: Log at DEBUG level instead of INFO.
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(log_format, date_format))
    root_logger.addHandler(console_handler)

    # File handler with rotation (if log_path provided)
    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(log_format, date_format))
        root_logger.addHandler(file_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def _load(args: argparse.Namespace) -> Config:
    return load_config(
        args.config,
        file_key=args.file_key,
        output_dir=getattr(args, "output", None),
    )


def cmd_run(args: argparse.Namespace) -> None:
    """Export the document immediately."""
    logger = logging.getLogger(__name__)

    config = _load(args)
    summary = export_document(config)
    logger.info(f"Markdown saved to: {summary.page_path}")


def cmd_list(args: argparse.Namespace) -> None:
    """Print the frames of the first page."""
    config = _load(args)
    for frame in list_frames(config):
        print(f"{frame['id']}\t{frame['name']}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="figma-markdown",
        description="Export Figma frames to Markdown documents with images",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Optional path to a YAML config file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file (rotated at 10 MB)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # run command
    run_parser = subparsers.add_parser(
        "run",
        help="Export every frame of the first page",
    )
    run_parser.add_argument(
        "--file-key", "-f",
        help="Figma file key (overrides FIGMA_FILE_KEY)",
    )
    run_parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output directory (default: ./output)",
    )

    # list command
    list_parser = subparsers.add_parser(
        "list",
        help="List frames of the first page",
    )
    list_parser.add_argument(
        "--file-key", "-f",
        help="Figma file key (overrides FIGMA_FILE_KEY)",
    )

    args = parser.parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    logger = logging.getLogger(__name__)

    try:
        if args.command == "run":
            cmd_run(args)
        elif args.command == "list":
            cmd_list(args)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except Exception as e:
        logger.error(f"Export failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
