"""
Email Check

Asks the user to confirm that their git email is registered on their
GitHub account. This cannot be verified without signing in, so it is the
one check that needs the interactive session.
"""

from rich.console import Console
from rich.text import Text

from ..models import CheckResult
from ..probe import GitProbe, ProbeError
from ..session import InteractiveSession, is_affirmative

NAME = "Git/GitHub Email"

QUESTION = "Is that the case? (y/n + <Enter>)\n> "


def check_emails_match(
    probe: GitProbe,
    session: InteractiveSession,
    console: Console,
    emails_url: str = "https://github.com/settings/emails",
) -> CheckResult:
    """
    Check that the global git email is listed on the GitHub account.

    The session is closed when this check returns, whatever the outcome.

    Args:
        probe: Git probe
        session: Interactive session to ask on
        console: Console for the instructions
        emails_url: Account page listing the verified emails

    Returns:
        CheckResult for the email match
    """
    try:
        try:
            email = probe.email()
        except ProbeError as e:
            return CheckResult.unverifiable(NAME, e, 'Run: git config --global user.email "you@example.com"')

        console.print(Text(f"Please go to {emails_url} and make sure that"), soft_wrap=True)
        console.print(Text(f"the following email is listed on that page: {email}"), soft_wrap=True)
        answer = session.ask(QUESTION)
    finally:
        session.close()

    if is_affirmative(answer):
        return CheckResult.ok(NAME, "git email is included in Github emails")

    return CheckResult.ko(
        NAME,
        f"Add {email} to your GitHub account or update your git global settings",
        f"Add it at {emails_url}",
    )
