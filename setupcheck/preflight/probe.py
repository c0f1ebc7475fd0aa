"""
Environment Probes

Reads the shell and git state that the checks compare against.
Every read happens when it is requested; nothing is cached.
"""

import os
import re
import subprocess
from dataclasses import dataclass
from typing import List, Mapping, Optional


class ProbeError(Exception):
    """Environment state could not be read."""
    pass


class MissingEnvironmentError(ProbeError):
    """A required environment variable is unset or empty."""
    pass


class CommandNotFoundError(ProbeError):
    """The external command is not installed or not on PATH."""
    pass


class CommandFailedError(ProbeError):
    """The external command exited with a nonzero status."""

    def __init__(self, command: List[str], returncode: int, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr.strip()
        message = f"`{' '.join(command)}` exited with status {returncode}"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message)


class MalformedVersionError(ProbeError):
    """Version output does not start with MAJOR.MINOR."""
    pass


GIT_VERSION_PREFIX = "git version"

_NUMERIC = re.compile(r"^\d+$")


@dataclass(frozen=True)
class GitVersion:
    """Leading MAJOR.MINOR of a git version string."""
    major: int
    minor: int
    text: str

    def satisfies(self, required: "GitVersion") -> bool:
        """Same major version, minor at least the required one."""
        return self.major == required.major and self.minor >= required.minor

    def __str__(self) -> str:
        return self.text


def parse_version(raw: str, prefix: str = "") -> GitVersion:
    """
    Parse the leading MAJOR.MINOR out of a version string.

    The prefix is removed and all whitespace dropped before splitting on
    dots. Only the first two tokens must be numeric; later tokens are
    ignored.

    Args:
        raw: Output such as "git version 2.39.1" or a bare "2.0"
        prefix: Leading text to remove

    Returns:
        Parsed GitVersion

    Raises:
        MalformedVersionError: If fewer than two numeric tokens lead the string
    """
    text = raw.replace(prefix, "", 1) if prefix else raw
    tokens = re.sub(r"\s", "", text).split(".")

    if len(tokens) < 2 or not all(_NUMERIC.match(t) for t in tokens[:2]):
        raise MalformedVersionError(f"Cannot parse a MAJOR.MINOR version from {raw.strip()!r}")

    return GitVersion(major=int(tokens[0]), minor=int(tokens[1]), text=text.strip())


def read_shell(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Get the user's default shell from the SHELL variable.

    Raises:
        MissingEnvironmentError: If SHELL is unset or empty
    """
    environ = os.environ if environ is None else environ
    shell = environ.get("SHELL", "")
    if not shell:
        raise MissingEnvironmentError("SHELL environment variable is not set")
    return shell


class GitProbe:
    """
    Runs git and returns its standard output as text.

    Calls block until git exits; there is no timeout.
    """

    def __init__(self, command: str = "git"):
        """
        Initialize the probe.

        Args:
            command: git executable name or path
        """
        self.command = command

    def run(self, *args: str) -> str:
        """
        Run git with the given arguments.

        Returns:
            Captured stdout

        Raises:
            CommandNotFoundError: If git is missing or cannot be executed
            CommandFailedError: If git exits nonzero
        """
        cmd = [self.command, *args]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError:
            raise CommandNotFoundError(f"`{self.command}` is not installed or not on PATH")
        except OSError as e:
            raise CommandNotFoundError(f"`{self.command}` cannot be executed: {e}")

        if result.returncode != 0:
            raise CommandFailedError(cmd, result.returncode, result.stderr or "")

        return result.stdout

    def version(self) -> GitVersion:
        """Get the installed git version."""
        return parse_version(self.run("--version"), prefix=GIT_VERSION_PREFIX)

    def global_config(self, key: str) -> str:
        """
        Get a value from the global git configuration.

        git exits with status 1 when the key is unset, which surfaces as
        CommandFailedError.
        """
        value = self.run("config", "--global", key).strip()
        if not value:
            raise CommandFailedError([self.command, "config", "--global", key], 1, f"{key} is empty")
        return value

    def email(self) -> str:
        return self.global_config("user.email")

    def editor(self) -> str:
        return self.global_config("core.editor")

