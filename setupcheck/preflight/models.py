"""
Pre-flight Check Models

Shared data types for environment setup checks.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Tuple


class CheckStatus(str, Enum):
    """Outcome of a single check."""
    PASS = "pass"
    FAIL = "fail"
    SKIPPED = "skipped"  # could not be verified


@dataclass(frozen=True)
class CheckResult:
    """Result of a single setup check."""
    name: str
    status: CheckStatus
    message: str
    details: Tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.status == CheckStatus.PASS

    @property
    def skipped(self) -> bool:
        return self.status == CheckStatus.SKIPPED

    @classmethod
    def ok(cls, name: str, message: str, *details: str) -> "CheckResult":
        return cls(name, CheckStatus.PASS, message, details)

    @classmethod
    def ko(cls, name: str, message: str, *details: str) -> "CheckResult":
        return cls(name, CheckStatus.FAIL, message, details)

    @classmethod
    def unverifiable(cls, name: str, error: Exception, *details: str) -> "CheckResult":
        """Build a skipped result from the fault that prevented the check."""
        return cls(name, CheckStatus.SKIPPED, str(error), details)

    def __str__(self) -> str:
        return f"[{self.status.value.upper()}] {self.name}: {self.message}"


@dataclass(frozen=True)
class Check:
    """A named check routine, run by the checker in list order."""
    label: str
    routine: Callable[[], CheckResult]


@dataclass
class PreflightResult:
    """Complete results of one run, in execution order."""
    checks: List[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """Overall status: every check that could be verified passed."""
        return all(c.passed for c in self.checks if not c.skipped)

    @property
    def failures(self) -> List[CheckResult]:
        return [c for c in self.checks if c.status == CheckStatus.FAIL]

    @property
    def skipped(self) -> List[CheckResult]:
        return [c for c in self.checks if c.skipped]

    def summary(self) -> str:
        """Get summary string."""
        total = len(self.checks)
        passed = len([c for c in self.checks if c.passed])
        failed = len(self.failures)
        skipped = len(self.skipped)

        status = "PASSED" if self.passed else "FAILED"
        return f"{status}: {passed}/{total} checks passed ({failed} failed, {skipped} not verified)"
