"""
Pre-flight Checker

Runs the setup checks in order and reports each outcome on the console.
"""

from typing import List, Optional, Sequence

from rich.console import Console
from rich.text import Text

from ..config import VerifierConfig
from .models import Check, CheckResult, CheckStatus, PreflightResult
from .probe import GitProbe, parse_version
from .session import InteractiveSession
from .checks import check_emails_match, check_git_editor, check_git_version, check_shell

READY_BANNER = "🚀  Awesome! Your computer is now ready!"
FAILURE_BANNER = "😥  Bummer! Something's wrong."
UNAVAILABLE_NOTICE = "Test not available for now..."


def default_checks(
    config: VerifierConfig,
    session: InteractiveSession,
    console: Console,
    probe: Optional[GitProbe] = None,
) -> List[Check]:
    """
    Build the standard check list.

    The email check closes the session, so it must stay the last check
    that reads input.

    Args:
        config: Required setup values
        session: Interactive session for the email check
        console: Console for check instructions
        probe: Git probe. Built from config when omitted

    Returns:
        Ordered list of checks
    """
    probe = probe or GitProbe(config.git_command)
    required_version = parse_version(config.required_git_version)

    return [
        Check("shell", lambda: check_shell(config.required_shell)),
        Check("git version", lambda: check_git_version(probe, required_version)),
        Check(
            "git/Github email matching",
            lambda: check_emails_match(probe, session, console, config.emails_url),
        ),
        Check(
            "git editor",
            lambda: check_git_editor(probe, config.editor_pattern, config.editor_name),
        ),
    ]


class PreflightChecker:
    """
    Runs setup checks one after another.

    Every check runs, even after a failure. A check that could not be
    verified is reported but does not count against the overall result.
    """

    def __init__(self, checks: Sequence[Check], console: Optional[Console] = None, verbose: bool = False):
        """
        Initialize the checker.

        Args:
            checks: Checks to run, in order
            console: Rich console for output
            verbose: Also print the detail lines of each result
        """
        self.checks = list(checks)
        self.console = console or Console()
        self.verbose = verbose

    def run_all(self) -> PreflightResult:
        """
        Run every check and print the closing banner.

        Returns:
            PreflightResult with all check results
        """
        results = [self.run_check(check) for check in self.checks]
        result = PreflightResult(checks=results)
        self.outro(result)
        return result

    def run_check(self, check: Check) -> CheckResult:
        """Run a single check and print its outcome."""
        self.console.print(f"Checking {check.label}...", markup=False, highlight=False, emoji=False, soft_wrap=True)
        result = check.routine()
        self.report(result)
        return result

    def report(self, result: CheckResult) -> None:
        """Print one check result."""
        if result.status == CheckStatus.PASS:
            self.console.print(Text(f"[OK] {result.message}", style="green"), soft_wrap=True)
        elif result.status == CheckStatus.FAIL:
            self.console.print(Text(f"[KO] {result.message}", style="red"), soft_wrap=True)
        else:
            self.console.print(UNAVAILABLE_NOTICE, markup=False, highlight=False, emoji=False, soft_wrap=True)
            self.console.print(Text(result.message, style="dim"), soft_wrap=True)

        if self.verbose:
            for detail in result.details:
                self.console.print(Text(f"  {detail}", style="dim"), soft_wrap=True)

    def outro(self, result: PreflightResult) -> None:
        self.console.print()
        if result.passed:
            self.console.print(Text(READY_BANNER, style="green"), soft_wrap=True)
        else:
            self.console.print(Text(FAILURE_BANNER, style="red"), soft_wrap=True)
