"""Tests for argument validation."""

import pytest

from starbuero.core.domain import operations
from starbuero.core.domain.models import FieldKind, FieldSpec
from starbuero.core.errors import ValidationError
from starbuero.core.validation import check_field, validate_arguments

PRESENCE = FieldSpec(name="title", wire="title")
FLAG = FieldSpec(name="vip", wire="vip", kind=FieldKind.EXPLICIT_BOOLEAN)
ARRAY = FieldSpec(name="email_addresses", wire="emailAddresses", kind=FieldKind.ARRAY)


@pytest.mark.parametrize("value", [None, ""])
def test_presence_rejects_missing_and_empty(value):
    assert check_field(PRESENCE, value) is False


@pytest.mark.parametrize("value", ["Dr.", 0, 42, " "])
def test_presence_accepts_values(value):
    assert check_field(PRESENCE, value) is True


def test_flag_accepts_false_but_not_absent():
    assert check_field(FLAG, False) is True
    assert check_field(FLAG, True) is True
    assert check_field(FLAG, None) is False


@pytest.mark.parametrize("value", ["not-an-array", "", None, {"a": 1}, 5])
def test_array_rejects_non_sequences(value):
    assert check_field(ARRAY, value) is False


@pytest.mark.parametrize("value", [[], ["a@b.de"], ("a@b.de",)])
def test_array_accepts_lists_and_tuples(value):
    assert check_field(ARRAY, value) is True


def test_validate_arguments_lists_every_failing_field(valid_arguments):
    args = valid_arguments(operations.CREATE_CONTACT)
    args["firstname"] = ""
    args["phone_numbers"] = "0301234567"
    del args["can_forward"]

    with pytest.raises(ValidationError) as exc_info:
        validate_arguments(operations.CREATE_CONTACT, args)

    assert exc_info.value.operation == "create_contact"
    assert exc_info.value.fields == ("firstname", "phone_numbers", "can_forward")


def test_validate_arguments_ignores_optional_fields():
    validate_arguments(operations.EDIT_FAQ_ENTRY, {"faq_entry_id": "7"})


def test_validate_arguments_no_arguments_needed():
    validate_arguments(operations.GET_COMPANY_INFO, {})


def test_appointment_employee_may_be_zero(valid_arguments):
    args = valid_arguments(operations.CREATE_APPOINTMENT)
    args["employee"] = 0
    validate_arguments(operations.CREATE_APPOINTMENT, args)
