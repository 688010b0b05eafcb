"""
DevWatch Snapshot Store.

Holds the current and previous generations and the engine state derived
from how many generations have been captured.
Requires Python 3.11+.
"""

from enum import Enum

from snapshot.models import Snapshot
from utils.logger import LoggerMixin


class EngineState(str, Enum):
    """Watch engine states."""

    IDLE = "idle"  # nothing captured yet
    PRIMED = "primed"  # one capture, baseline only
    STEADY = "steady"  # two or more captures, diffs are emitted


class SnapshotStore(LoggerMixin):
    """
    Two-generation snapshot holder.

    Never keeps more than ``current`` and ``previous``. ``capture`` fills
    ``current`` and advances the state machine; ``rotate`` makes it the
    baseline for the next tick.
    """

    def __init__(self) -> None:
        """Initialize an empty store in the IDLE state."""
        self._current: Snapshot | None = None
        self._previous: Snapshot | None = None
        self._captures = 0

    @property
    def current(self) -> Snapshot | None:
        """Snapshot captured by the running tick."""
        return self._current

    @property
    def previous(self) -> Snapshot | None:
        """Snapshot captured by the tick before."""
        return self._previous

    @property
    def captures(self) -> int:
        """Number of snapshots captured since the last clear."""
        return self._captures

    @property
    def state(self) -> EngineState:
        """Get the engine state."""
        if self._captures == 0:
            return EngineState.IDLE
        if self._captures == 1:
            return EngineState.PRIMED
        return EngineState.STEADY

    def capture(self, snapshot: Snapshot) -> EngineState:
        """
        Store a freshly scanned snapshot as the current generation.

        Args:
            snapshot: Result of this tick's scan

        Returns:
            The state after the capture
        """
        before = self.state
        self._current = snapshot
        self._captures += 1
        after = self.state
        if after is not before:
            self.log.debug("engine_state_changed", before=before.value, after=after.value)
        return after

    def rotate(self) -> None:
        """Move the current generation into the previous slot."""
        self._previous = self._current

    def clear(self) -> None:
        """Drop both generations and return to IDLE."""
        self._current = None
        self._previous = None
        self._captures = 0
