"""Profile rules — first/last name and role selection."""

from signup.validators.base import BaseRule
from signup.validators.models import RuleCode, SubmittedForm


class FullNameRule(BaseRule):
    """Both first and last name are required; one message covers both."""

    code = RuleCode.NAME_MISSING
    field = "firstName"

    @property
    def name(self) -> str:
        return "FullNameRule"

    def is_satisfied(self, form: SubmittedForm) -> bool:
        return self._is_not_empty(form.first_name) and self._is_not_empty(form.last_name)


class RoleRule(BaseRule):
    code = RuleCode.ROLE_MISSING
    field = "role"

    @property
    def name(self) -> str:
        return "RoleRule"

    def is_satisfied(self, form: SubmittedForm) -> bool:
        return self._is_not_empty(form.role)
