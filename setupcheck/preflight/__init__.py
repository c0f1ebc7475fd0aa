"""
Pre-flight Check Module

Verifies the developer setup: shell, git, and GitHub account.
"""

from .models import Check, CheckResult, CheckStatus, PreflightResult
from .checker import PreflightChecker, default_checks
from .session import InteractiveSession, SessionClosedError

__all__ = [
    "PreflightChecker",
    "PreflightResult",
    "default_checks",
    "Check",
    "CheckResult",
    "CheckStatus",
    "InteractiveSession",
    "SessionClosedError",
]
