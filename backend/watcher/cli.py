"""
DevWatch Command Line Entry Point.

Usage:
    devwatch [DIRECTORY ...] [--config watch.json]

Directories given on the command line replace those in the
configuration file. Everything else is read from WATCHER_* / LOG_*
environment variables or a .env file.
Requires Python 3.11+.
"""

import argparse
from pathlib import Path

from snapshot.classifier import DiffClassifier
from utils.config import ConfigError, Settings, WatchConfig, get_settings, load_watch_config
from utils.logger import configure_logging, get_logger, shutdown_logging
from watcher.loop import WatchLoop
from watcher.notifier import ChangeNotifier
from watcher.runner import CommandRunner
from watcher.scanner import DirectoryScanner


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="devwatch",
        description="Re-run the project entry point whenever watched source files change",
    )
    parser.add_argument(
        "directories",
        nargs="*",
        help="Directories to watch (overrides the configuration file)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Watch configuration file (default: WATCHER_CONFIG_FILE or watch.json)",
    )
    return parser


def build_loop(config: WatchConfig, settings: Settings) -> WatchLoop:
    """
    Wire the watch loop from configuration.

    Values in the watch configuration file win over process settings.
    """
    watcher_settings = settings.watcher

    scanner = DirectoryScanner(
        extensions=config.extensions or watcher_settings.extensions,
        ignore_patterns=[*watcher_settings.ignore_patterns, *config.ignore],
    )
    return WatchLoop(
        config=config,
        scanner=scanner,
        classifier=DiffClassifier(watcher_settings.diff_policy),
        notifier=ChangeNotifier(clear_screen=watcher_settings.clear_screen),
        runner=CommandRunner(config.command or watcher_settings.command),
        interval_seconds=watcher_settings.interval_seconds,
    )


def main(argv: list[str] | None = None) -> int:
    """
    Run the watcher until interrupted.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    configure_logging()
    logger = get_logger("devwatch.cli")
    settings = get_settings()

    try:
        config_path = args.config or settings.watcher.config_file
        try:
            config = load_watch_config(config_path)
        except ConfigError as e:
            logger.error("config_invalid", path=str(config_path), error=str(e))
            return 1

        if args.directories:
            config = config.with_directories(args.directories)

        loop = build_loop(config, settings)
        try:
            loop.run()
        except KeyboardInterrupt:
            logger.info("watch_stopped", ticks=loop.ticks)

        return 0
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
