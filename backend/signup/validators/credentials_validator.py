"""Credential rules — email shape, password length, password confirmation."""

from signup.validators.base import BaseRule
from signup.validators.models import RuleCode, SubmittedForm

PASSWORD_MIN_LENGTH = 6


class EmailRule(BaseRule):
    """Email must look like local-part@domain.tld."""

    code = RuleCode.INVALID_EMAIL
    field = "email"

    @property
    def name(self) -> str:
        return "EmailRule"

    def is_satisfied(self, form: SubmittedForm) -> bool:
        return self._is_email(form.email)


class PasswordLengthRule(BaseRule):
    """Password must be present and at least PASSWORD_MIN_LENGTH characters."""

    code = RuleCode.PASSWORD_TOO_SHORT
    field = "password"

    @property
    def name(self) -> str:
        return "PasswordLengthRule"

    def is_satisfied(self, form: SubmittedForm) -> bool:
        return self._is_not_empty(form.password) and self._has_min_length(
            form.password, PASSWORD_MIN_LENGTH
        )


class PasswordMatchRule(BaseRule):
    code = RuleCode.PASSWORD_MISMATCH
    field = "confirmPassword"

    @property
    def name(self) -> str:
        return "PasswordMatchRule"

    def is_satisfied(self, form: SubmittedForm) -> bool:
        return self._is_equal(form.password, form.confirm_password)
