"""Collect raw posted form fields into a SubmittedForm.

Checkbox groups arrive as repeated keys; they are collapsed into a set
before validation. Text values pass through untouched.
"""

from typing import Any, Mapping, Optional

from signup.validators.models import SubmittedForm

# HTML input name → SubmittedForm attribute
TEXT_FIELDS = {
    "email": "email",
    "password": "password",
    "confirm-password": "confirm_password",
    "first-name": "first_name",
    "last-name": "last_name",
    "role": "role",
}
ACQUISITION_FIELD = "acquisition"
TERMS_FIELD = "terms"


def _get_all(data: Mapping[str, Any], key: str) -> list:
    """All values for key — works for Starlette FormData, MultiDicts and plain dicts."""
    getlist = getattr(data, "getlist", None)
    if callable(getlist):
        return list(getlist(key))
    value = data.get(key)
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def _get_text(data: Mapping[str, Any], key: str) -> Optional[str]:
    values = _get_all(data, key)
    if not values:
        return None
    value = values[0]
    # File uploads have no place in this form
    return value if isinstance(value, str) else None


def collect_submission(data: Mapping[str, Any]) -> SubmittedForm:
    """Build a SubmittedForm from posted form data.

    Args:
        data: Multi-value mapping of HTML field names to values

    Returns:
        SubmittedForm with values exactly as posted
    """
    values: dict[str, Any] = {attr: _get_text(data, key) for key, attr in TEXT_FIELDS.items()}
    values["acquisition_channels"] = {
        v for v in _get_all(data, ACQUISITION_FIELD) if isinstance(v, str)
    }
    # Unchecked checkboxes are absent from the post; a falsy dict value also counts as unchecked
    values["terms_accepted"] = any(_get_all(data, TERMS_FIELD))
    return SubmittedForm(**values)
