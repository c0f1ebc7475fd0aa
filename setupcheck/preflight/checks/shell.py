"""
Shell Check

Verifies the user's default login shell.
"""

from typing import Mapping, Optional

from ..models import CheckResult
from ..probe import ProbeError, read_shell

NAME = "Default Shell"


def check_shell(required: str = "zsh", environ: Optional[Mapping[str, str]] = None) -> CheckResult:
    """
    Check that the default shell is the required one.

    Matching is a case-sensitive substring test against $SHELL, so
    "/bin/zsh" and "/usr/local/bin/zsh" both satisfy "zsh".

    Args:
        required: Shell name to look for
        environ: Environment mapping. Defaults to os.environ

    Returns:
        CheckResult for the shell
    """
    try:
        shell = read_shell(environ)
    except ProbeError as e:
        return CheckResult.unverifiable(NAME, e, "Set SHELL or run the check from a login shell")

    if required in shell:
        return CheckResult.ok(NAME, f"Your default shell is {required}", f"SHELL={shell}")

    return CheckResult.ko(
        NAME,
        f"Your default shell is {shell}, but should be {required}",
        f"Run: chsh -s $(which {required})",
    )
