"""Validation models — submitted form, rule codes, violations, and the tagged result.

All validation is deterministic: same input → same output, no I/O, no randomness.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Role(str, Enum):
    """Roles offered by the signup form."""

    STUDENT = "student"
    TEACHER = "teacher"
    EMPLOYEE = "employee"
    FOUNDER = "founder"
    OTHER = "other"


class AcquisitionChannel(str, Enum):
    """How the user found us — checkbox group values."""

    GOOGLE = "google"
    FRIEND = "friend"
    OTHER = "other"


class RuleCode(str, Enum):
    """Deterministic code for every validation rule, in evaluation order."""

    INVALID_EMAIL = "INVALID_EMAIL"
    PASSWORD_TOO_SHORT = "PASSWORD_TOO_SHORT"
    PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
    NAME_MISSING = "NAME_MISSING"
    ROLE_MISSING = "ROLE_MISSING"
    ACQUISITION_MISSING = "ACQUISITION_MISSING"
    TERMS_NOT_ACCEPTED = "TERMS_NOT_ACCEPTED"


# Fixed user-facing message per rule
RULE_MESSAGES = {
    RuleCode.INVALID_EMAIL: "Invalid email address.",
    RuleCode.PASSWORD_TOO_SHORT: "You must provide a password with at least 6 characters.",
    RuleCode.PASSWORD_MISMATCH: "Passwords do not match.",
    RuleCode.NAME_MISSING: "Please provide both your first and last name.",
    RuleCode.ROLE_MISSING: "Please select a role.",
    RuleCode.ACQUISITION_MISSING: "Please select at least one acquisition channel.",
    RuleCode.TERMS_NOT_ACCEPTED: "You must agree to the terms and conditions.",
}


class SubmittedForm(BaseModel):
    """All field values gathered at submission time.

    Values are stored exactly as submitted — no stripping, no case folding.
    Any field may be missing; missing fields fail their rule instead of
    failing construction.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None
    acquisition_channels: Optional[set[str]] = None
    terms_accepted: Optional[bool] = None


class RuleViolation(BaseModel):
    """A single violated rule."""

    code: RuleCode
    field: str       # Which form field the rule concerns
    message: str


class Success(BaseModel):
    """Every rule passed."""

    status: Literal["success"] = "success"


class Failure(BaseModel):
    """One or more rules failed — ordered messages plus the untouched input."""

    status: Literal["failure"] = "failure"
    errors: list[str] = Field(min_length=1)
    echo: SubmittedForm

    @classmethod
    def build(cls, violations: list[RuleViolation], form: SubmittedForm) -> "Failure":
        """Build a failure from violations already in rule order."""
        return cls(
            errors=[v.message for v in violations],
            echo=form.model_copy(deep=True),
        )


ValidationResult = Annotated[Union[Success, Failure], Field(discriminator="status")]
