"""
DevWatch Snapshot Data Models.

Defines the records produced by a scan and the events derived from them.
Requires Python 3.11+.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from snapshot.identity import path_identity


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class ChangeKind(str, Enum):
    """Kinds of change reported between two generations."""

    ADDED = "added"
    MODIFIED = "modified"
    REMOVED = "removed"


@dataclass(frozen=True)
class WatchedFile:
    """A matching file observed during one scan."""

    path: str
    modified_at: float
    identity: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "identity", path_identity(self.path))

    def timestamp(self) -> str:
        """Format modified_at as a local date-time string."""
        return datetime.fromtimestamp(self.modified_at).strftime(TIMESTAMP_FORMAT)


class Snapshot:
    """
    Complete view of the matching files seen by one tick.

    Keyed by identity. A snapshot is built once and never updated; the
    next tick produces a new one.
    """

    __slots__ = ("_files",)

    def __init__(self, files: Iterable[WatchedFile] = ()) -> None:
        self._files: dict[str, WatchedFile] = {f.identity: f for f in files}

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, identity: object) -> bool:
        return identity in self._files

    def __iter__(self) -> Iterator[WatchedFile]:
        return iter(self._files.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self._files == other._files

    def __repr__(self) -> str:
        return f"<Snapshot files={len(self._files)}>"

    def get(self, identity: str) -> WatchedFile | None:
        """Get the file with the given identity, if present."""
        return self._files.get(identity)

    @property
    def paths(self) -> list[str]:
        """Get file paths in scan order."""
        return [f.path for f in self._files.values()]


@dataclass(frozen=True)
class ChangeEvent:
    """A classified change and the file it concerns."""

    kind: ChangeKind
    file: WatchedFile

    @property
    def path(self) -> str:
        """Path of the changed file."""
        return self.file.path
