"""Signup form validator — deterministic rule set for submitted signup forms.

Usage:
    from signup.validators import form_validator

    result = form_validator.validate(form)
    if result.status == "failure":
        # Re-render with result.errors and result.echo
"""

from signup.validators.engine import FormValidator, form_validator
from signup.validators.models import (
    AcquisitionChannel,
    Failure,
    Role,
    RuleCode,
    RuleViolation,
    SubmittedForm,
    Success,
    ValidationResult,
)

__all__ = [
    "FormValidator",
    "form_validator",
    "SubmittedForm",
    "ValidationResult",
    "Success",
    "Failure",
    "RuleViolation",
    "RuleCode",
    "Role",
    "AcquisitionChannel",
]
