"""Base rule — abstract class implementing the Strategy Pattern.

Each rule is a standalone, independently testable unit.
New rules are added without modifying the engine.
"""

from abc import ABC, abstractmethod
import re
from typing import Optional

from signup.validators.models import RULE_MESSAGES, RuleCode, RuleViolation, SubmittedForm

# local-part "@" domain, with a dot inside the domain and no whitespace anywhere
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@.]+")


class BaseRule(ABC):
    """Abstract base for all signup form rules.

    Contract:
        - check() is deterministic: same input → same output
        - check() returns a RuleViolation when the rule is violated, else None
        - A rule contributes at most one violation
        - No I/O, no network calls, no randomness
    """

    code: RuleCode
    field: str

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def is_satisfied(self, form: SubmittedForm) -> bool:
        """Return True when the submitted form passes this rule."""
        ...

    def check(self, form: SubmittedForm) -> Optional[RuleViolation]:
        if self.is_satisfied(form):
            return None
        return self.violation()

    def violation(self) -> RuleViolation:
        """The violation this rule emits."""
        return RuleViolation(code=self.code, field=self.field, message=RULE_MESSAGES[self.code])

    # ── Helper Methods ──

    @staticmethod
    def _is_not_empty(value) -> bool:
        """Not None and not a whitespace-only string."""
        if value is None:
            return False
        if isinstance(value, str):
            return value.strip() != ""
        return True

    @staticmethod
    def _is_email(value) -> bool:
        if not isinstance(value, str):
            return False
        return EMAIL_PATTERN.fullmatch(value) is not None

    @staticmethod
    def _has_min_length(value, min_length: int) -> bool:
        if value is None:
            return False
        return len(value) >= min_length

    @staticmethod
    def _is_equal(value, other) -> bool:
        """Exact, case-sensitive comparison. A missing value equals nothing."""
        if value is None or other is None:
            return False
        return value == other
