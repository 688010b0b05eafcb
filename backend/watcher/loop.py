"""
DevWatch Watch Loop.

Polls the configured directories and re-runs the entry-point command
whenever a change is classified.
Requires Python 3.11+.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from snapshot.classifier import DiffClassifier
from snapshot.models import ChangeEvent
from snapshot.store import EngineState, SnapshotStore
from utils.config import WatchConfig
from utils.logger import LoggerMixin
from watcher.notifier import ChangeNotifier
from watcher.runner import CommandResult, CommandRunner
from watcher.scanner import DirectoryScanner


@dataclass
class TickReport:
    """What happened during one tick."""

    state: EngineState
    events: list[ChangeEvent] = field(default_factory=list)
    results: list[CommandResult] = field(default_factory=list)


class WatchLoop(LoggerMixin):
    """
    Single-threaded polling loop.

    Each tick invalidates scanner state, sleeps, rescans, classifies
    against the previous generation, then notifies and runs the command
    once per event before rotating generations. Command execution blocks
    the loop, so changes made while it runs surface on the next tick.
    """

    def __init__(
        self,
        config: WatchConfig,
        scanner: DirectoryScanner,
        classifier: DiffClassifier,
        notifier: ChangeNotifier,
        runner: CommandRunner,
        interval_seconds: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        store: SnapshotStore | None = None,
    ) -> None:
        """
        Initialize the watch loop.

        Args:
            config: Directories to watch
            scanner: Scanner producing one snapshot per tick
            classifier: Diff policy applied between generations
            notifier: Console presenter
            runner: Entry-point command executor
            interval_seconds: Sleep before each scan
            sleep: Sleep function (replaceable in tests)
            store: Snapshot holder (a new one if not provided)
        """
        self._config = config
        self._scanner = scanner
        self._classifier = classifier
        self._notifier = notifier
        self._runner = runner
        self._interval = interval_seconds
        self._sleep = sleep
        self._store = store or SnapshotStore()
        self._ticks = 0

    @property
    def store(self) -> SnapshotStore:
        """Get the snapshot store owned by this loop."""
        return self._store

    @property
    def state(self) -> EngineState:
        """Get the engine state."""
        return self._store.state

    @property
    def ticks(self) -> int:
        """Number of ticks executed."""
        return self._ticks

    def tick(self) -> TickReport:
        """
        Run one iteration of the loop.

        Returns:
            TickReport with the state after the tick and what was emitted
        """
        self._scanner.invalidate()
        self._sleep(self._interval)
        self._ticks += 1

        report = TickReport(state=self._store.state)

        if self._config.exists:
            current = self._scanner.scan(self._config.directories)
            report.state = self._store.capture(current)

            if report.state is EngineState.PRIMED:
                self.log.info("baseline_captured", files=len(current))
                self._notifier.show_startup()
            elif report.state is EngineState.STEADY and self._store.previous is not None:
                report.events = self._classifier.classify(self._store.previous, current)

            for event in report.events:
                self._notifier.show_change(event)
                result = self._runner.run()
                self._notifier.show_result(result)
                report.results.append(result)

        self._store.rotate()
        return report

    def run(self, max_ticks: int | None = None) -> None:
        """
        Tick until the process is stopped.

        Args:
            max_ticks: Stop after this many ticks (None runs forever)
        """
        self.log.info(
            "watch_started",
            directories=list(self._config.directories),
            interval_seconds=self._interval,
            policy=self._classifier.policy.value,
            command=self._runner.command,
        )
        if not self._config.exists:
            self.log.warning("no_directories_configured")

        while max_ticks is None or self._ticks < max_ticks:
            self.tick()
