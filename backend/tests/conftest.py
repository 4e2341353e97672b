"""
Pytest configuration for backend tests.

Why: Force AnyIO to use the asyncio backend for the async HTTP tests.
"""
import pytest

from signup.validators.models import SubmittedForm


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def valid_form() -> SubmittedForm:
    """A submission that satisfies every rule."""
    return SubmittedForm(
        email="a@b.com",
        password="secret1",
        confirm_password="secret1",
        first_name="A",
        last_name="B",
        role="student",
        acquisition_channels={"google"},
        terms_accepted=True,
    )
