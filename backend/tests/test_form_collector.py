"""Collecting posted form fields into a SubmittedForm."""

from starlette.datastructures import FormData

from signup.forms.collector import collect_submission


def test_collects_all_fields_from_multi_value_form_data():
    data = FormData(
        [
            ("email", "a@b.com"),
            ("password", "secret1"),
            ("confirm-password", "secret1"),
            ("first-name", "Ada"),
            ("last-name", "Lovelace"),
            ("role", "founder"),
            ("acquisition", "google"),
            ("acquisition", "friend"),
            ("terms", "on"),
        ]
    )
    form = collect_submission(data)

    assert form.email == "a@b.com"
    assert form.confirm_password == "secret1"
    assert form.first_name == "Ada"
    assert form.last_name == "Lovelace"
    assert form.role == "founder"
    assert form.acquisition_channels == {"google", "friend"}
    assert form.terms_accepted is True


def test_unchecked_boxes_and_missing_fields():
    form = collect_submission(FormData([("email", "x@y.org")]))

    assert form.password is None
    assert form.first_name is None
    assert form.acquisition_channels == set()
    assert form.terms_accepted is False


def test_plain_dict_values_pass_through_untrimmed():
    form = collect_submission({"first-name": "  Ada ", "acquisition": ["other"], "terms": "on"})

    assert form.first_name == "  Ada "
    assert form.acquisition_channels == {"other"}
    assert form.terms_accepted is True


def test_repeated_text_field_keeps_first_value():
    data = FormData([("email", "first@b.com"), ("email", "second@b.com")])
    assert collect_submission(data).email == "first@b.com"


def test_falsy_terms_value_is_unchecked():
    assert collect_submission({"terms": False}).terms_accepted is False
    assert collect_submission({"terms": ""}).terms_accepted is False
