"""Rendering of the signup form with and without an echo."""

from signup.forms.components import ErrorList, SignupFormPage
from signup.validators.models import SubmittedForm


def test_empty_form_has_every_field_and_no_errors():
    html = SignupFormPage().render()

    for name in ("email", "password", "confirm-password", "first-name", "last-name", "role", "terms"):
        assert f'name="{name}"' in html
    assert html.count('name="acquisition"') == 3
    assert "checked" not in html
    assert 'class="error"' not in html


def test_echo_repopulates_fields():
    echo = SubmittedForm(
        email="a@b.com",
        first_name="Ada",
        role="teacher",
        acquisition_channels={"friend"},
        terms_accepted=True,
    )
    html = SignupFormPage(echo=echo, errors=["Passwords do not match."]).render()

    assert 'value="a@b.com"' in html
    assert 'value="Ada"' in html
    assert '<option value="teacher" selected>' in html
    assert 'id="friend" name="acquisition" value="friend" checked' in html
    assert 'id="google" name="acquisition" value="google">' in html
    assert 'name="terms" checked' in html
    assert "<li>Passwords do not match.</li>" in html


def test_values_and_errors_are_escaped():
    echo = SubmittedForm(first_name='"><script>')
    html = SignupFormPage(echo=echo, errors=["<b>bad</b>"]).render()

    assert "<script>" not in html
    assert "&lt;b&gt;bad&lt;/b&gt;" in html


def test_errors_render_in_order():
    html = ErrorList(["first", "second"]).render()
    assert html.index("first") < html.index("second")
    assert ErrorList().render() == ""
