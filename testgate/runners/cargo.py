"""
Cargo workspace test runner.

Copyright 2026 The testgate Authors.
All rights reserved.
"""

from ._base_runner import BaseRunner


class CargoWorkspaceRunner(BaseRunner):
    """Runs every member of the current cargo workspace with release settings."""

    COMMAND = ["cargo", "test", "--workspace", "--release"]
