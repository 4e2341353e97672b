"""Signup API — form page, form post, and JSON validation endpoint."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

import structlog

from signup.config import get_settings
from signup.exceptions import SignupValidationFailed
from signup.forms.collector import collect_submission
from signup.forms.components import Layout, SignupFormPage, SignupSuccessPage
from signup.models.responses import SignupAcceptedResponse
from signup.validators import Failure, SubmittedForm, form_validator

logger = structlog.get_logger()

# HTML pages, mounted at the app root
pages_router = APIRouter()

# JSON endpoints, mounted under /api/v1
router = APIRouter()


def _page(body: str, status_code: int = 200) -> HTMLResponse:
    return HTMLResponse(Layout(get_settings().APP_NAME, body).render(), status_code=status_code)


# ─── HTML form ───


@pages_router.get("/signup", response_class=HTMLResponse)
async def signup_form():
    """Empty signup form."""
    return _page(SignupFormPage().render())


@pages_router.post("/signup", response_class=HTMLResponse)
async def submit_signup_form(request: Request):
    """Validate a posted form; re-render with the entered values on failure."""
    form = collect_submission(await request.form())
    result = form_validator.validate(form)

    if isinstance(result, Failure):
        logger.info("signup_rejected", source="form", error_count=len(result.errors))
        return _page(SignupFormPage(echo=result.echo, errors=result.errors).render(), status_code=422)

    logger.info("signup_accepted", source="form")
    return _page(SignupSuccessPage(form.first_name).render())


# ─── JSON ───


@router.post("/signup/validate", response_model=SignupAcceptedResponse)
async def validate_signup(form: SubmittedForm):
    """Validate a SubmittedForm. Failures are raised and mapped to 422 by the app."""
    result = form_validator.validate(form)

    if isinstance(result, Failure):
        logger.info("signup_rejected", source="api", error_count=len(result.errors))
        raise SignupValidationFailed(result)

    logger.info("signup_accepted", source="api")
    return SignupAcceptedResponse()
