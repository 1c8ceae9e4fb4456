from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lockbox.validation.validator import Violation


class LockboxError(Exception):
    """Base exception for all lockbox errors."""


class ValidationError(LockboxError):
    """Raised when an uploaded file fails one or more content checks."""

    def __init__(self, violations: list[Violation]) -> None:
        self.violations = list(violations)
        lines = "\n".join(v.message for v in self.violations)
        super().__init__(f"File validation failed:\n{lines}")


class PasswordPolicyError(LockboxError):
    """Raised when a caller-supplied password fails the complexity policy."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        super().__init__("Password rejected: " + "; ".join(self.problems))


class EncryptionError(LockboxError):
    """Raised when a document cannot be encrypted."""
