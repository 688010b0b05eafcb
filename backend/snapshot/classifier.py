"""
DevWatch Diff Classifier.

Compares two snapshot generations and classifies what changed.
Requires Python 3.11+.
"""

from snapshot.models import ChangeEvent, ChangeKind, Snapshot
from utils.config import DiffPolicy
from utils.logger import LoggerMixin


def _modified(previous: Snapshot, current: Snapshot) -> list[ChangeEvent]:
    events = []
    for file in current:
        old = previous.get(file.identity)
        if old is not None and old.modified_at != file.modified_at:
            events.append(ChangeEvent(ChangeKind.MODIFIED, file))
    return events


def _removed(previous: Snapshot, current: Snapshot) -> list[ChangeEvent]:
    return [
        ChangeEvent(ChangeKind.REMOVED, file)
        for file in previous
        if file.identity not in current
    ]


def _added(previous: Snapshot, current: Snapshot) -> list[ChangeEvent]:
    return [
        ChangeEvent(ChangeKind.ADDED, file)
        for file in current
        if file.identity not in previous
    ]


def classify_single_branch(previous: Snapshot, current: Snapshot) -> list[ChangeEvent]:
    """
    Classify changes by comparing generation sizes.

    Exactly one kind of change is looked for per call:

    - same size: files whose modification time differs
    - fewer files: files that disappeared
    - more files: files that appeared

    A tick where one file is added and another removed keeps the same
    size and is therefore only checked for modifications.

    Args:
        previous: Baseline generation
        current: Newly scanned generation

    Returns:
        Change events in scan order
    """
    if len(current) == len(previous):
        return _modified(previous, current)
    if len(current) < len(previous):
        return _removed(previous, current)
    return _added(previous, current)


def classify_three_way(previous: Snapshot, current: Snapshot) -> list[ChangeEvent]:
    """
    Classify modifications, removals and additions independently.

    Args:
        previous: Baseline generation
        current: Newly scanned generation

    Returns:
        Modified events, then removed, then added
    """
    return [
        *_modified(previous, current),
        *_removed(previous, current),
        *_added(previous, current),
    ]


_POLICIES = {
    DiffPolicy.SINGLE_BRANCH: classify_single_branch,
    DiffPolicy.THREE_WAY: classify_three_way,
}


def classify(
    previous: Snapshot,
    current: Snapshot,
    policy: DiffPolicy = DiffPolicy.SINGLE_BRANCH,
) -> list[ChangeEvent]:
    """Classify changes between two generations using the given policy."""
    return _POLICIES[DiffPolicy(policy)](previous, current)


class DiffClassifier(LoggerMixin):
    """
    Classifier bound to a policy.

    Thin wrapper over ``classify`` so the watch loop can log results
    without the pure functions knowing about logging.
    """

    def __init__(self, policy: DiffPolicy | str = DiffPolicy.SINGLE_BRANCH) -> None:
        """
        Initialize the classifier.

        Args:
            policy: Diff policy name or member
        """
        self._policy = DiffPolicy(policy)

    @property
    def policy(self) -> DiffPolicy:
        """Get the active diff policy."""
        return self._policy

    def classify(self, previous: Snapshot, current: Snapshot) -> list[ChangeEvent]:
        """Classify changes between two generations."""
        events = classify(previous, current, self._policy)

        if events:
            self.log.info(
                "changes_classified",
                policy=self._policy.value,
                previous=len(previous),
                current=len(current),
                added=sum(1 for e in events if e.kind is ChangeKind.ADDED),
                modified=sum(1 for e in events if e.kind is ChangeKind.MODIFIED),
                removed=sum(1 for e in events if e.kind is ChangeKind.REMOVED),
            )

        return events
