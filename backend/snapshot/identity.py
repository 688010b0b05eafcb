"""
DevWatch File Identity.

Stable, path-derived keys used to correlate files across generations.
Requires Python 3.11+.
"""

import hashlib


def path_identity(path: str) -> str:
    """
    Compute the identity of a file from its path string.

    The identity depends on the path only, never on file contents, so a
    file keeps its identity across edits and a renamed file gets a new one.

    Args:
        path: File path exactly as produced by the scanner

    Returns:
        SHA-256 hash as hex string
    """
    return hashlib.sha256(path.encode("utf-8")).hexdigest()
