"""
Setup Check Implementations

One module per area of the developer setup.
"""

from .shell import check_shell
from .git import check_git_version, check_git_editor
from .email import check_emails_match

__all__ = [
    "check_shell",
    "check_git_version",
    "check_git_editor",
    "check_emails_match",
]
