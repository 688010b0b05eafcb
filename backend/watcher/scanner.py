"""
DevWatch Directory Scanner.

Recursively lists matching files under the watched directories.
Requires Python 3.11+.
"""

import fnmatch
import os
import stat
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from snapshot.models import Snapshot, WatchedFile
from utils.logger import LoggerMixin


@dataclass
class ScanStats:
    """Counters for a single scan."""

    directories: int = 0
    missing_directories: int = 0
    entries_visited: int = 0
    files_matched: int = 0


class DirectoryScanner(LoggerMixin):
    """
    Walks directory trees and collects files by extension.

    Every call stats the file system afresh; nothing is remembered
    between scans except the counters of the last one.
    """

    def __init__(
        self,
        extensions: Iterable[str] = (".py",),
        ignore_patterns: Iterable[str] | None = None,
        root: Path | None = None,
    ) -> None:
        """
        Initialize the scanner.

        Args:
            extensions: File suffixes to match, with or without leading dot
            ignore_patterns: Path component names or glob patterns to skip
            root: Base for relative directories (defaults to the cwd at scan time)
        """
        self._extensions = tuple(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            for ext in extensions
        )
        self._ignore_patterns = list(ignore_patterns or [])
        self._root = root
        self._stats = ScanStats()

    @property
    def extensions(self) -> tuple[str, ...]:
        """Get the matched file suffixes."""
        return self._extensions

    @property
    def last_stats(self) -> ScanStats:
        """Get counters of the most recent scan."""
        return self._stats

    def invalidate(self) -> None:
        """Reset per-scan state before the next tick."""
        self._stats = ScanStats()

    def resolve(self, directory: str | Path) -> Path:
        """Resolve a configured directory against the scan root."""
        path = Path(directory)
        if path.is_absolute():
            return path
        return (self._root or Path.cwd()) / path

    def _should_ignore(self, relative: str) -> bool:
        """
        Check if a path relative to the watched directory should be ignored.

        A pattern matches when it equals or globs any single path component,
        or globs the whole relative path.
        """
        parts = Path(relative).parts
        for pattern in self._ignore_patterns:
            if fnmatch.fnmatch(relative, pattern):
                return True
            if any(part == pattern or fnmatch.fnmatch(part, pattern) for part in parts):
                return True
        return False

    def _matches(self, name: str) -> bool:
        return name.lower().endswith(self._extensions)

    def scan_directory(self, directory: str | Path) -> list[WatchedFile]:
        """
        List matching files under one directory.

        Args:
            directory: Directory to walk, absolute or relative to the root

        Returns:
            Files in walk order; empty if the directory does not exist
        """
        base = self.resolve(directory)
        self._stats.directories += 1

        if not base.is_dir():
            self._stats.missing_directories += 1
            self.log.debug("directory_missing", path=str(base))
            return []

        files: list[WatchedFile] = []

        def on_error(error: OSError) -> None:
            self.log.debug("directory_unreadable", path=error.filename, error=str(error))

        for dirpath, dirnames, filenames in os.walk(base, onerror=on_error):
            relative_dir = os.path.relpath(dirpath, base)

            # Prune ignored subdirectories in place so walk skips them
            dirnames[:] = sorted(
                d for d in dirnames
                if not self._should_ignore(os.path.normpath(os.path.join(relative_dir, d)))
            )

            for name in sorted(filenames):
                self._stats.entries_visited += 1
                if not self._matches(name):
                    continue

                relative = os.path.normpath(os.path.join(relative_dir, name))
                if self._should_ignore(relative):
                    continue

                path = os.path.join(dirpath, name)
                try:
                    st = os.stat(path)
                except (FileNotFoundError, PermissionError):
                    # Vanished or unreadable between listing and stat
                    continue
                if not stat.S_ISREG(st.st_mode):
                    continue

                files.append(WatchedFile(path=path, modified_at=st.st_mtime))

        self._stats.files_matched += len(files)
        return files

    def scan(self, directories: Iterable[str | Path]) -> Snapshot:
        """
        Scan every configured directory into a fresh snapshot.

        Args:
            directories: Directories in configuration order

        Returns:
            Snapshot of all matching files
        """
        files: list[WatchedFile] = []
        for directory in directories:
            files.extend(self.scan_directory(directory))

        snapshot = Snapshot(files)
        self.log.debug(
            "tick_scanned",
            directories=self._stats.directories,
            missing=self._stats.missing_directories,
            visited=self._stats.entries_visited,
            files=len(snapshot),
        )
        return snapshot
