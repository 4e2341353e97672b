"""
Signup form components.

SignupFormPage renders the whole form. Given an echo it re-populates every
field with the submitted values; given errors it lists them in order.
"""

from typing import Optional

from signup.forms.base import Component
from signup.forms.collector import ACQUISITION_FIELD, TERMS_FIELD
from signup.validators.models import AcquisitionChannel, Role, SubmittedForm

ROLE_LABELS = {
    Role.STUDENT: "Student",
    Role.TEACHER: "Teacher",
    Role.EMPLOYEE: "Employee",
    Role.FOUNDER: "Founder",
    Role.OTHER: "Other",
}

CHANNEL_LABELS = {
    AcquisitionChannel.GOOGLE: "Google",
    AcquisitionChannel.FRIEND: "Referred by friend",
    AcquisitionChannel.OTHER: "Other",
}


class TextInputField(Component):
    """Labelled single-line input inside a .control wrapper."""

    def __init__(self, field_id: str, label: str, input_type: str = "text"):
        self.field_id = field_id
        self.label = label
        self.input_type = input_type

    def render(self, value: Optional[str] = None) -> str:
        input_attrs = self.attributes(
            id=self.field_id,
            name=self.field_id,
            type=self.input_type,
            value=value,
        )
        return (
            '<div class="control">'
            f"<label {self.attributes(for_=self.field_id)}>{self.escape(self.label)}</label>"
            f"<input {input_attrs}>"
            "</div>"
        )


class RoleSelect(Component):
    def __init__(self, selected: Optional[str] = None):
        self.selected = selected

    def render(self) -> str:
        options = ['<option value="">Please select</option>']
        for role, label in ROLE_LABELS.items():
            attrs = self.attributes(value=role.value, selected=self.selected == role.value)
            options.append(f"<option {attrs}>{self.escape(label)}</option>")
        return (
            '<div class="control">'
            '<label for="role">What best describes your role?</label>'
            f'<select id="role" name="role">{"".join(options)}</select>'
            "</div>"
        )


class AcquisitionFieldset(Component):
    """Checkbox group; every ticked box posts another `acquisition` value."""

    def __init__(self, checked: Optional[set[str]] = None):
        self.checked = checked or set()

    def render(self) -> str:
        boxes = []
        for channel, label in CHANNEL_LABELS.items():
            attrs = self.attributes(
                type="checkbox",
                id=channel.value,
                name=ACQUISITION_FIELD,
                value=channel.value,
                checked=channel.value in self.checked,
            )
            boxes.append(
                '<div class="control">'
                f"<input {attrs}>"
                f"<label {self.attributes(for_=channel.value)}>{self.escape(label)}</label>"
                "</div>"
            )
        return f"<fieldset><legend>How did you find us?</legend>{''.join(boxes)}</fieldset>"


class ErrorList(Component):
    def __init__(self, errors: Optional[list[str]] = None):
        self.errors = errors or []

    def render(self) -> str:
        if not self.errors:
            return ""
        items = "".join(f"<li>{self.escape(error)}</li>" for error in self.errors)
        return f'<ul class="error" role="alert">{items}</ul>'


class SignupFormPage(Component):
    """
    The complete signup form.

    Args:
        echo: Previously submitted values to re-populate, if any.
        errors: Ordered validation messages to display, if any.
    """

    def __init__(self, echo: Optional[SubmittedForm] = None, errors: Optional[list[str]] = None):
        self.echo = echo if echo is not None else SubmittedForm()
        self.errors = errors or []

    def render(self) -> str:
        echo = self.echo
        terms_attrs = self.attributes(
            type="checkbox",
            id="terms-and-conditions",
            name=TERMS_FIELD,
            checked=echo.terms_accepted is True,
        )
        return (
            '<form method="post" action="/signup">'
            "<h2>Welcome on board!</h2>"
            "<p>We just need a little bit of data from you to get you started</p>"
            + TextInputField("email", "Email", input_type="email").render(echo.email)
            + '<div class="control-row">'
            + TextInputField("password", "Password", input_type="password").render(echo.password)
            + TextInputField("confirm-password", "Confirm Password", input_type="password").render(
                echo.confirm_password
            )
            + "</div><hr>"
            + '<div class="control-row">'
            + TextInputField("first-name", "First Name").render(echo.first_name)
            + TextInputField("last-name", "Last Name").render(echo.last_name)
            + "</div>"
            + RoleSelect(echo.role).render()
            + AcquisitionFieldset(echo.acquisition_channels).render()
            + '<div class="control">'
            f'<label for="terms-and-conditions"><input {terms_attrs}>'
            "I agree to the terms and conditions</label>"
            "</div>"
            + ErrorList(self.errors).render()
            + '<p class="form-actions">'
            '<button type="reset" class="button button-flat">Reset</button>'
            '<button class="button">Sign up</button>'
            "</p>"
            "</form>"
        )


class SignupSuccessPage(Component):
    def __init__(self, first_name: Optional[str] = None):
        self.first_name = first_name

    def render(self) -> str:
        greeting = f"Welcome, {self.escape(self.first_name)}!" if self.first_name else "Welcome!"
        return f'<section class="signup-success"><h2>{greeting}</h2><p>Your signup was received.</p></section>'


class Layout(Component):
    """Minimal HTML document around a page body."""

    def __init__(self, title: str, body: str):
        self.title = title
        self.body = body

    def render(self) -> str:
        return (
            "<!DOCTYPE html>"
            '<html lang="en">'
            f'<head><meta charset="utf-8"><title>{self.escape(self.title)}</title></head>'
            f"<body><main>{self.body}</main></body>"
            "</html>"
        )
