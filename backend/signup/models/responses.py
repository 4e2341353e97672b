"""API response models."""

from pydantic import BaseModel
from typing import Literal

from signup.validators.models import SubmittedForm


class SignupAcceptedResponse(BaseModel):
    """Every rule passed."""

    status: Literal["success"] = "success"


class SignupRejectedResponse(BaseModel):
    """Body of a 422 for a rejected signup — ordered messages plus the echo."""

    error: Literal["validation_error"] = "validation_error"
    errors: list[str]
    echo: SubmittedForm


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy"]
    version: str = "1.0.0"
    uptime_seconds: float
