"""
DevWatch Watcher Package.

Polling file watcher that re-runs the project entry point on change.
Requires Python 3.11+.
"""

from watcher.loop import TickReport, WatchLoop
from watcher.notifier import ChangeNotifier
from watcher.runner import CommandResult, CommandRunner
from watcher.scanner import DirectoryScanner, ScanStats

__all__ = [
    "ChangeNotifier",
    "CommandResult",
    "CommandRunner",
    "DirectoryScanner",
    "ScanStats",
    "TickReport",
    "WatchLoop",
]
