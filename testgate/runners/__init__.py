"""
Runners that invoke an external test command and classify its exit status.
"""

from ._base_runner import BaseRunner, InvocationResult, RunStatus, TERMINAL_STATUSES
from .cargo import CargoWorkspaceRunner

__all__ = [
    'BaseRunner',
    'CargoWorkspaceRunner',
    'InvocationResult',
    'RunStatus',
    'TERMINAL_STATUSES',
]
