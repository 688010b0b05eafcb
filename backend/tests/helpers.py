"""
DevWatch Test Helpers.

Builders and test doubles shared by the test modules.
Requires Python 3.11+.
"""

import os
from pathlib import Path

from snapshot.models import ChangeEvent, Snapshot, WatchedFile
from watcher.runner import CommandResult


def make_snapshot(**files: float) -> Snapshot:
    """Build a snapshot from name=mtime keyword pairs (names get a .src suffix)."""
    return Snapshot(WatchedFile(path=f"{name}.src", modified_at=mtime) for name, mtime in files.items())


def touch(path: Path, mtime: float) -> Path:
    """Create a file and force its modification time."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    os.utime(path, (mtime, mtime))
    return path


class RecordingNotifier:
    """Notifier double that records calls instead of printing."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []

    def show_startup(self) -> None:
        self.calls.append(("startup", None))

    def show_change(self, event: ChangeEvent) -> None:
        self.calls.append(("change", event))

    def show_result(self, result: CommandResult) -> None:
        self.calls.append(("result", result))

    def kinds(self) -> list[str]:
        return [name for name, _ in self.calls]


class FakeRunner:
    """Runner double counting invocations."""

    command = "fake entry point"

    def __init__(self) -> None:
        self.runs = 0

    def run(self) -> CommandResult:
        self.runs += 1
        return CommandResult(command=self.command, exit_code=0, output="ok\n", duration_ms=1.5)


class RecordingSleep:
    """Sleep double that records requested intervals."""

    def __init__(self) -> None:
        self.intervals: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.intervals.append(seconds)
