#!/usr/bin/env python3
import argparse
import logging
import os
import sys
import importlib.metadata as metadata

from testgate import report
from testgate.runners import CargoWorkspaceRunner

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

log = logging.getLogger(__name__)


def get_version():
    """Get the version from importlib.metadata or fallback to version.txt file."""
    try:
        version = metadata.version("testgate")
    except metadata.PackageNotFoundError:
        # Fallback for development
        version = "unknown"
        version_file = os.path.join(os.path.dirname(__file__), "..", "version.txt")
        if os.path.exists(version_file):
            with open(version_file) as f:
                version = f.read().strip()
    return f"testgate: {version}"


def build_arg_parser():
    """Build the argument parser for the testgate CLI.

    The command takes no arguments: the test command it wraps is fixed.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(
        description="Run the workspace test suite in release mode and report pass/fail",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit codes:
  0    all tests passed
  1    tests failed, the test process was killed, or it could not be launched""",
    )
    parser.add_argument("--version", action="version", version=get_version())
    return parser


def configure_logging(level=logging.WARNING):
    # stdout is reserved for the banner and the status line
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv=None, runner=None):
    parser = build_arg_parser()
    parser.parse_args(argv)
    configure_logging()

    if runner is None:
        runner = CargoWorkspaceRunner()

    report.print_banner()
    result = runner.run()
    report.print_result(result)
    log.debug(f"Run finished as {result.status.value} after {result.duration_seconds:.1f}s")
    sys.exit(result.process_exit_code)


if __name__ == "__main__":
    main()
