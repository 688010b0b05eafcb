"""
DevWatch Snapshot Package.

Generation-based change detection over scanned file listings.
Requires Python 3.11+.
"""

from snapshot.classifier import DiffClassifier, DiffPolicy, classify
from snapshot.identity import path_identity
from snapshot.models import ChangeEvent, ChangeKind, Snapshot, WatchedFile
from snapshot.store import EngineState, SnapshotStore

__all__ = [
    "ChangeEvent",
    "ChangeKind",
    "DiffClassifier",
    "DiffPolicy",
    "EngineState",
    "Snapshot",
    "SnapshotStore",
    "WatchedFile",
    "classify",
    "path_identity",
]
