"""Running external commands for commit lookups."""

import subprocess
from collections.abc import Sequence
from typing import Protocol

from versioninfo.logging import logger


class ProcessRunner(Protocol):
    def run(self, command: str, args: Sequence[str]) -> bytes | None:
        """Run command with args and return its stdout, or None if it couldn't start."""
        ...


class SubprocessRunner:
    """
    Runs commands with subprocess in the current working directory.

    Blocks until the child exits. The exit status is logged but not acted
    on: whatever the child wrote to stdout is returned.
    """

    def run(self, command: str, args: Sequence[str]) -> bytes | None:
        cmdline = [command, *args]
        logger.debug("Running {cmdline}", cmdline=" ".join(cmdline))
        try:
            proc = subprocess.run(
                cmdline, stdin=subprocess.DEVNULL, capture_output=True, check=False
            )
        except OSError as e:
            logger.debug(
                "Failed to launch {command}: {error}", command=command, error=str(e)
            )
            return None

        if proc.returncode != 0:
            logger.debug(
                "{command} exited with status {returncode}",
                command=command,
                returncode=proc.returncode,
            )
        return proc.stdout


default_runner = SubprocessRunner()
