"""Consent rules — acquisition channel survey and terms acceptance."""

from signup.validators.base import BaseRule
from signup.validators.models import RuleCode, SubmittedForm


class AcquisitionChannelRule(BaseRule):
    """At least one acquisition checkbox must be ticked."""

    code = RuleCode.ACQUISITION_MISSING
    field = "acquisitionChannels"

    @property
    def name(self) -> str:
        return "AcquisitionChannelRule"

    def is_satisfied(self, form: SubmittedForm) -> bool:
        return bool(form.acquisition_channels)


class TermsAcceptedRule(BaseRule):
    code = RuleCode.TERMS_NOT_ACCEPTED
    field = "termsAccepted"

    @property
    def name(self) -> str:
        return "TermsAcceptedRule"

    def is_satisfied(self, form: SubmittedForm) -> bool:
        return form.terms_accepted is True
