"""
Git Checks

Validates the installed git version and the configured commit editor.
"""

from ..models import CheckResult
from ..probe import GitProbe, GitVersion, ProbeError


def check_git_version(probe: GitProbe, required: GitVersion) -> CheckResult:
    """
    Check the installed git version.

    The major version must match exactly and the minor version must be at
    least the required one. Patch level is ignored.

    Args:
        probe: Git probe
        required: Minimum version within the required major series

    Returns:
        CheckResult for the git version
    """
    name = "Git Version"
    try:
        version = probe.version()
    except ProbeError as e:
        return CheckResult.unverifiable(name, e)

    if version.satisfies(required):
        return CheckResult.ok(name, f"Your default git version is {version}")

    return CheckResult.ko(
        name,
        f"Your default git version is outdated: {version}",
        f"Required: {required.major}.x with minor version >= {required.minor}",
    )


def check_git_editor(probe: GitProbe, pattern: str = "code", editor_name: str = "VS Code") -> CheckResult:
    """
    Check that git opens the expected editor.

    Args:
        probe: Git probe
        pattern: Text the core.editor value must contain, case-insensitively
        editor_name: Human-readable editor name for the report

    Returns:
        CheckResult for the editor setup
    """
    name = "Git Editor"
    try:
        editor = probe.editor()
    except ProbeError as e:
        return CheckResult.unverifiable(name, e, "Run: git config --global core.editor")

    if pattern.lower() in editor.lower():
        return CheckResult.ok(name, f"{editor_name} is your default git editor", f"core.editor={editor}")

    return CheckResult.ko(
        name,
        f"Ask a teacher to check your ~/.gitconfig editor setup. Right now, it's `{editor}`",
    )
