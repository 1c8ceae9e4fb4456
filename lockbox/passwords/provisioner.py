import secrets
import string
from dataclasses import dataclass

from lockbox.exceptions import PasswordPolicyError

DEFAULT_SYMBOLS = '!@#$%^&*(),.?":{}|<>'


@dataclass(frozen=True)
class PasswordPolicy:
    """Complexity rules applied to caller-supplied passwords."""

    min_length: int = 8
    max_length: int = 20
    symbols: str = DEFAULT_SYMBOLS
    generated_length: int = 12


class PasswordProvisioner:
    """Supplies the encryption password: caller-given and checked, or generated."""

    def __init__(self, policy: PasswordPolicy | None = None) -> None:
        self._policy = policy if policy is not None else PasswordPolicy()

    def resolve(self, password: str | None = None) -> str:
        """Return the password to encrypt with.

        Raises:
            PasswordPolicyError: if a supplied password breaks the policy.
        """
        if password is None:
            return self.generate()
        problems = self.check(password)
        if problems:
            raise PasswordPolicyError(problems)
        return password

    def check(self, password: str) -> list[str]:
        """List every policy rule the password breaks; empty when it complies."""
        policy = self._policy
        problems: list[str] = []
        if len(password) < policy.min_length:
            problems.append(f"must be at least {policy.min_length} characters long")
        if len(password) > policy.max_length:
            problems.append(f"must not exceed {policy.max_length} characters")
        if not any(c in string.ascii_lowercase for c in password):
            problems.append("missing a lowercase letter")
        if not any(c in string.ascii_uppercase for c in password):
            problems.append("missing an uppercase letter")
        if not any(c in string.digits for c in password):
            problems.append("missing a digit")
        if not any(c in policy.symbols for c in password):
            problems.append(f"missing a symbol from {policy.symbols}")
        return problems

    def generate(self) -> str:
        """Generate a random password holding every required character class."""
        classes = (
            string.ascii_lowercase,
            string.ascii_uppercase,
            string.digits,
            self._policy.symbols,
        )
        alphabet = "".join(classes)
        chars = [secrets.choice(group) for group in classes]
        chars += [
            secrets.choice(alphabet)
            for _ in range(self._policy.generated_length - len(chars))
        ]
        secrets.SystemRandom().shuffle(chars)
        return "".join(chars)
