import io
import sys

import pytest
from rich.console import Console

from setupcheck.preflight.probe import CommandFailedError, GitProbe, parse_version


class FakeGitProbe(GitProbe):
    """GitProbe answering from a dict of canned outputs or errors."""

    def __init__(self, outputs=None):
        super().__init__("git")
        self.outputs = outputs or {}
        self.calls = []

    def run(self, *args):
        self.calls.append(args)
        answer = self.outputs.get(args)
        if isinstance(answer, Exception):
            raise answer
        if answer is None:
            raise CommandFailedError(["git", *args], 1)
        return answer


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def console(buffer):
    return Console(file=buffer, force_terminal=False, width=200)


@pytest.fixture
def make_probe():
    def _make(version="git version 2.39.1\n", email="dev@example.com\n", editor="code --wait\n"):
        outputs = {}
        for args, value in (
            (("--version",), version),
            (("config", "--global", "user.email"), email),
            (("config", "--global", "core.editor"), editor),
        ):
            if value is not None:
                outputs[args] = value
        return FakeGitProbe(outputs)
    return _make


@pytest.fixture
def required_version():
    return parse_version("2.0")


@pytest.fixture
def git_script(tmp_path):
    """Write an executable stand-in for git that prints raw bytes."""
    if sys.platform == "win32":
        pytest.skip("needs a POSIX shell")

    def _write(printf_format):
        path = tmp_path / "fake-git"
        path.write_text(f"#!/bin/sh\nprintf '{printf_format}'\n")
        path.chmod(0o755)
        return str(path)
    return _write
