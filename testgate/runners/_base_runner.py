"""
Base runner interface and the invocation result model.

A runner owns exactly one child process per run: it is spawned, awaited
without a timeout, and classified into a terminal RunStatus.

Copyright 2026 The testgate Authors.
All rights reserved.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import subprocess
import time
import logging

log = logging.getLogger(__name__)


class RunStatus(Enum):
    """Status of a test-suite invocation."""

    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    LAUNCH_ERROR = "launch_error"


TERMINAL_STATUSES = (RunStatus.PASSED, RunStatus.FAILED, RunStatus.LAUNCH_ERROR)


@dataclass
class InvocationResult:
    """
    Outcome of one run of the underlying test command.

    exit_code is only populated once the child has fully terminated; it stays
    None when the command could not be launched at all.
    """

    status: RunStatus
    start_time: float
    end_time: float
    command: List[str] = field(default_factory=list)

    exit_code: Optional[int] = None
    error_message: Optional[str] = None

    @property
    def duration_seconds(self) -> float:
        """Total execution time in seconds."""
        return self.end_time - self.start_time

    @property
    def succeeded(self) -> bool:
        """Whether the test command exited with status 0."""
        return self.status == RunStatus.PASSED

    @property
    def process_exit_code(self) -> int:
        """Exit code this program should hand back to its parent: 0 or 1."""
        return 0 if self.succeeded else 1


class BaseRunner:
    """
    Runs a fixed command to completion and reports how it ended.

    Subclasses set COMMAND. The child inherits this process's stdio, so
    whatever the test command prints passes through untouched.
    """

    COMMAND: List[str] = []

    def __init__(self):
        self.status = RunStatus.PENDING

    @property
    def command(self) -> List[str]:
        if not self.COMMAND:
            raise ValueError(f"{self.__class__.__name__} has no command configured")
        return list(self.COMMAND)

    @staticmethod
    def classify(exit_code: int) -> RunStatus:
        """Map a child return code onto PASSED or FAILED."""
        return RunStatus.PASSED if exit_code == 0 else RunStatus.FAILED

    def run(self) -> InvocationResult:
        """
        Spawn the command, block until it exits, and classify the result.

        Returns:
            InvocationResult. A non-zero exit or a launch failure is reported
            in the result, never raised.
        """
        argv = self.command
        start_time = time.time()
        log.debug(f"Running {self.__class__.__name__}: {' '.join(argv)}")

        try:
            with subprocess.Popen(argv) as proc:
                self.status = RunStatus.RUNNING
                exit_code = proc.wait()
        except OSError as e:
            log.error(f"Could not launch {argv[0]}: {e}")
            self.status = RunStatus.LAUNCH_ERROR
            return InvocationResult(
                status=self.status,
                start_time=start_time,
                end_time=time.time(),
                command=argv,
                error_message=str(e),
            )

        self.status = self.classify(exit_code)
        log.debug(f"{argv[0]} exited with {exit_code} ({self.status.value})")
        return InvocationResult(
            status=self.status,
            start_time=start_time,
            end_time=time.time(),
            command=argv,
            exit_code=exit_code,
        )
