"""Application errors."""

from signup.validators.models import Failure


class SignupValidationFailed(ValueError):
    """A submitted signup form violated one or more rules.

    Carries the Failure so handlers can return both the ordered messages
    and the echo of the submitted values.
    """

    def __init__(self, failure: Failure):
        self.failure = failure
        super().__init__("; ".join(failure.errors))
