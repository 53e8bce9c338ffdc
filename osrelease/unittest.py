import contextlib
import io
import logging
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path
from typing import override

log = logging.getLogger(__name__)


class TestCase(unittest.TestCase):
    """TestCase extended with os-release fixtures."""

    @override
    def setUp(self) -> None:
        super().setUp()
        self.workdir = Path(self.enterContext(tempfile.TemporaryDirectory()))

    def write_osrelease(self, contents: str, path: str | Path = "etc/os-release") -> Path:
        """
        Write an os-release file under the test workdir.

        :arg path: path relative to the workdir
        :returns: the absolute path of the file written
        """
        dest = self.workdir / path
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(contents)
        return dest


class CLITestCase(TestCase):
    """Test case for CLI commands."""

    @override
    def setUp(self) -> None:
        super().setUp()
        # Keep user and system configuration out of the tests
        self.config_path = self.workdir / "osrelease.yaml"
        self.config_path.write_text(f"root: {self.workdir}\n")

    def assertNoStderr(self, res: subprocess.CompletedProcess[str]) -> None:
        self.assertEqual(res.stderr, "")

    def call(self, *args: str) -> subprocess.CompletedProcess[str]:
        """
        Run the command line in-process, capturing output and exit code.

        args[0] is the program name.
        """
        from osrelease.__main__ import main
        from osrelease.cli import run_main

        orig_argv = sys.argv
        sys.argv = list(args)
        stdout = io.StringIO()
        stderr = io.StringIO()
        returnvalue: int | str | None = None
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            try:
                run_main(main)
            except SystemExit as e:
                returnvalue = 0 if e.code is None else e.code
            finally:
                sys.argv = orig_argv

        return subprocess.CompletedProcess(args, returnvalue, stdout.getvalue(), stderr.getvalue())
