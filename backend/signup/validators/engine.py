"""Form Validator — runs every signup rule in order and produces the tagged result.

This is the main entry point for signup validation. Rules are evaluated
independently (no short-circuiting); each violated rule contributes its
message in chain order.

Usage:
    validator = FormValidator()
    result = validator.validate(form)
    if isinstance(result, Failure):
        # Re-render with result.errors and result.echo
"""

import time
from typing import Optional

import structlog

from signup.validators.base import BaseRule
from signup.validators.models import Failure, RuleViolation, Success, SubmittedForm, ValidationResult

# Import all rules
from signup.validators.credentials_validator import EmailRule, PasswordLengthRule, PasswordMatchRule
from signup.validators.profile_validator import FullNameRule, RoleRule
from signup.validators.consent_validator import AcquisitionChannelRule, TermsAcceptedRule

logger = structlog.get_logger()


class FormValidator:
    """Evaluates the signup rule chain and produces a ValidationResult.

    Design principles:
        - Pure: same input → same output, no shared mutable state touched
        - Total: never raises for a well-typed form
        - Extensible: add rules without modifying the validator
        - Observable: logs every validation run with timing
    """

    def __init__(self, rules: Optional[list[BaseRule]] = None):
        """Initialize with the default rule chain or a custom list.

        Args:
            rules: Optional list of rules. If None, uses all defaults.
        """
        self.rules = list(rules) if rules is not None else self._default_rules()

    @staticmethod
    def _default_rules() -> list[BaseRule]:
        """Create the default rule chain in message order."""
        return [
            EmailRule(),
            PasswordLengthRule(),
            PasswordMatchRule(),
            FullNameRule(),
            RoleRule(),
            AcquisitionChannelRule(),
            TermsAcceptedRule(),
        ]

    def validate(self, form: SubmittedForm) -> ValidationResult:
        """Run all rules against the submitted form.

        Args:
            form: Values exactly as the user submitted them

        Returns:
            Success, or Failure with ordered messages and an echo of the form
        """
        start_time = time.perf_counter()

        violations: list[RuleViolation] = []
        for rule in self.rules:
            try:
                violation = rule.check(form)
            except Exception as e:
                logger.error("rule_failed", rule=rule.name, error=str(e))
                # A value the rule cannot inspect fails that rule
                violation = rule.violation()
            if violation is not None:
                violations.append(violation)

        result = Failure.build(violations, form) if violations else Success()

        logger.info(
            "validation_complete",
            passed=not violations,
            violated=[v.code.value for v in violations],
            total_errors=len(violations),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )

        return result

    def add_rule(self, rule: BaseRule) -> None:
        """Append a custom rule to the chain."""
        self.rules.append(rule)

    def remove_rule(self, rule_name: str) -> None:
        """Remove a rule by name."""
        self.rules = [r for r in self.rules if r.name != rule_name]


# Module-level singleton
form_validator = FormValidator()
