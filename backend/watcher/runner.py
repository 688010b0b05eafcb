"""
DevWatch Command Runner.

Runs the project's entry-point command to completion and captures its output.
Requires Python 3.11+.
"""

import subprocess
import time
from dataclasses import dataclass
from pathlib import Path

from utils.logger import LoggerMixin


@dataclass
class CommandResult:
    """
    Result of one entry-point execution.

    Attributes:
        command: The command line that was run
        exit_code: Process exit code, or None if it could not be started
        output: Combined stdout/stderr output
        duration_ms: Wall-clock duration in milliseconds
    """

    command: str
    exit_code: int | None
    output: str
    duration_ms: float

    @property
    def success(self) -> bool:
        """True if command completed with exit code 0."""
        return self.exit_code == 0

    def __repr__(self) -> str:
        return f"<CommandResult exit={self.exit_code}, {self.duration_ms:.2f}ms>"


class CommandRunner(LoggerMixin):
    """
    Synchronous shell command executor.

    Blocks until the command exits; there is no timeout. A failing
    command is reported through its result, never raised.
    """

    def __init__(self, command: str, cwd: Path | None = None) -> None:
        """
        Initialize the runner.

        Args:
            command: Shell command line to execute
            cwd: Working directory (defaults to the process cwd)
        """
        self._command = command
        self._cwd = cwd

    @property
    def command(self) -> str:
        """Get the configured command line."""
        return self._command

    def run(self) -> CommandResult:
        """
        Execute the command and wait for it.

        Returns:
            CommandResult with output, exit code and duration
        """
        start_time = time.perf_counter()

        try:
            completed = subprocess.run(
                self._command,
                shell=True,
                cwd=self._cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,  # Merge stderr into stdout
                check=False,
            )
            exit_code: int | None = completed.returncode
            output = completed.stdout.decode("utf-8", errors="replace")
        except OSError as e:
            exit_code = None
            output = f"{self._command}: {e}\n"

        duration_ms = (time.perf_counter() - start_time) * 1000
        result = CommandResult(
            command=self._command,
            exit_code=exit_code,
            output=output,
            duration_ms=duration_ms,
        )

        self.log.info(
            "command_finished",
            command=self._command,
            exit_code=exit_code,
            duration_ms=round(duration_ms, 2),
        )
        return result
