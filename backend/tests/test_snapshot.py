"""
Tests for Snapshot Models, Identity and Store.

Requires Python 3.11+.
"""

from datetime import datetime

from snapshot.identity import path_identity
from snapshot.models import ChangeEvent, ChangeKind, Snapshot, WatchedFile
from snapshot.store import EngineState, SnapshotStore

from helpers import make_snapshot


class TestIdentity:
    """Test cases for path identity."""

    def test_deterministic(self):
        """The same path always hashes to the same identity."""
        assert path_identity("src/app.py") == path_identity("src/app.py")

    def test_distinct_paths(self):
        """Different paths get different identities."""
        assert path_identity("src/app.py") != path_identity("src/main.py")

    def test_sha256_hex(self):
        """Identities are SHA-256 hex digests."""
        identity = path_identity("src/app.py")
        assert len(identity) == 64
        int(identity, 16)

    def test_identity_ignores_mtime(self):
        """A file keeps its identity when its modification time changes."""
        before = WatchedFile(path="src/app.py", modified_at=1)
        after = WatchedFile(path="src/app.py", modified_at=2)

        assert before.identity == after.identity == path_identity("src/app.py")


class TestWatchedFile:
    """Test cases for WatchedFile."""

    def test_timestamp_format(self):
        """timestamp renders local time as YYYY-MM-DD HH:MM:SS."""
        moment = datetime(2024, 3, 9, 14, 5, 7)
        file = WatchedFile(path="a.src", modified_at=moment.timestamp())

        assert file.timestamp() == "2024-03-09 14:05:07"

    def test_change_event_path(self):
        """ChangeEvent exposes the path of its file."""
        event = ChangeEvent(ChangeKind.ADDED, WatchedFile(path="a.src", modified_at=1))
        assert event.path == "a.src"


class TestSnapshot:
    """Test cases for Snapshot."""

    def test_keyed_by_identity(self):
        """Files are looked up by identity."""
        snapshot = make_snapshot(a=100, b=200)
        identity = path_identity("b.src")

        assert len(snapshot) == 2
        assert identity in snapshot
        assert snapshot.get(identity).modified_at == 200
        assert snapshot.get(path_identity("zzz.src")) is None

    def test_duplicate_paths_collapse(self):
        """The same path listed twice is stored once."""
        files = [WatchedFile("a.src", 1), WatchedFile("a.src", 1)]
        assert len(Snapshot(files)) == 1

    def test_order_irrelevant_for_equality(self):
        """Snapshots with the same files compare equal regardless of order."""
        first = Snapshot([WatchedFile("a.src", 1), WatchedFile("b.src", 2)])
        second = Snapshot([WatchedFile("b.src", 2), WatchedFile("a.src", 1)])

        assert first == second


class TestSnapshotStore:
    """Test cases for the two-generation store."""

    def test_starts_idle(self):
        """A new store is IDLE with no generations."""
        store = SnapshotStore()

        assert store.state is EngineState.IDLE
        assert store.current is None
        assert store.previous is None

    def test_state_transitions(self):
        """IDLE -> PRIMED on first capture, STEADY from then on."""
        store = SnapshotStore()

        assert store.capture(make_snapshot(a=1)) is EngineState.PRIMED
        store.rotate()
        assert store.capture(make_snapshot(a=1)) is EngineState.STEADY
        store.rotate()
        assert store.capture(make_snapshot(a=2)) is EngineState.STEADY
        assert store.captures == 3

    def test_rotate_keeps_two_generations(self):
        """rotate makes current the previous generation and drops the older one."""
        store = SnapshotStore()
        first = make_snapshot(a=1)
        second = make_snapshot(a=2)

        store.capture(first)
        store.rotate()
        store.capture(second)

        assert store.previous is first
        assert store.current is second

        store.rotate()
        assert store.previous is second

    def test_clear(self):
        """clear returns the store to IDLE."""
        store = SnapshotStore()
        store.capture(make_snapshot(a=1))
        store.rotate()
        store.clear()

        assert store.state is EngineState.IDLE
        assert store.previous is None
