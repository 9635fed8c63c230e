import unittest
import os
import shutil
import stat
import subprocess
import sys
import tempfile

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SH_LAUNCHER = os.path.join(ROOT, "test.sh")
PS_LAUNCHER = os.path.join(ROOT, "test.ps1")

PASS_LINES = ["🧪 Running all tests...", "✅ All tests passed!"]
FAIL_LINES = ["🧪 Running all tests...", "❌ Some tests failed"]


class LauncherTestMixin:
    """Runs a launcher against a stub cargo that exits with a chosen code."""

    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.bin_dir = tmp.name
        self.args_file = os.path.join(self.bin_dir, "cargo.args")

    def make_cargo(self, exit_code):
        cargo = os.path.join(self.bin_dir, "cargo")
        with open(cargo, "w") as f:
            f.write("#!/bin/sh\n")
            f.write(f'echo "$@" > "{self.args_file}"\n')
            f.write(f"exit {exit_code}\n")
        os.chmod(cargo, os.stat(cargo).st_mode | stat.S_IEXEC)
        return cargo

    def launcher_env(self, python=sys.executable):
        env = os.environ.copy()
        env.pop("CI", None)
        env["NO_COLOR"] = "1"
        env["PYTHONIOENCODING"] = "utf-8"
        env["PYTHON"] = python
        env["PATH"] = self.bin_dir + os.pathsep + env.get("PATH", "")
        env["PYTHONPATH"] = ROOT + os.pathsep + env.get("PYTHONPATH", "")
        return env

    def launch(self, *extra_args, python=sys.executable):
        completed = subprocess.run(
            self.launcher_command() + list(extra_args),
            cwd=self.bin_dir,
            env=self.launcher_env(python),
            capture_output=True,
            timeout=120,
            check=False,
        )
        return completed.returncode, completed.stdout.decode("utf-8").splitlines()

    def cargo_args(self):
        with open(self.args_file) as f:
            return f.read().split()

    def test_passing_suite(self):
        """Scenario D/E: cargo exits 0"""
        self.make_cargo(0)
        code, lines = self.launch()
        self.assertEqual(code, 0)
        self.assertEqual(lines, PASS_LINES)
        self.assertEqual(self.cargo_args(), ["test", "--workspace", "--release"])

    def test_failing_suite(self):
        self.make_cargo(1)
        code, lines = self.launch()
        self.assertEqual(code, 1)
        self.assertEqual(lines, FAIL_LINES)

    def test_killed_suite(self):
        self.make_cargo(137)
        code, lines = self.launch()
        self.assertEqual(code, 1)
        self.assertEqual(lines, FAIL_LINES)

    def test_extra_arguments_are_ignored(self):
        self.make_cargo(0)
        code, lines = self.launch("extra", "--flag")
        self.assertEqual(code, 0)
        self.assertEqual(lines, PASS_LINES)
        self.assertEqual(self.cargo_args(), ["test", "--workspace", "--release"])

    def test_missing_interpreter_fails(self):
        self.make_cargo(0)
        missing = os.path.join(self.bin_dir, "no-such-python")
        code, lines = self.launch(python=missing)
        self.assertEqual(code, 1)
        self.assertNotIn("✅ All tests passed!", lines)
        self.assertFalse(os.path.exists(self.args_file))


@unittest.skipIf(sys.platform == "win32" or not shutil.which("bash"), "requires a POSIX shell")
class TestShellLauncher(LauncherTestMixin, unittest.TestCase):
    def launcher_command(self):
        return ["bash", SH_LAUNCHER]


@unittest.skipIf(sys.platform == "win32" or not shutil.which("pwsh"), "requires pwsh on a POSIX host")
class TestPowerShellLauncher(LauncherTestMixin, unittest.TestCase):
    def launcher_command(self):
        return ["pwsh", "-NoProfile", "-NonInteractive", "-File", PS_LAUNCHER]


if __name__ == "__main__":
    unittest.main()
