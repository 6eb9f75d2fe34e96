import pytest

from user_api.domain.user_rules import (
    User,
    ValidationError,
    build_user,
    is_valid_email,
    validate_user,
)


def test_valid_user_passes():
    validate_user("Juan Pérez", "juan@example.com", 30)


@pytest.mark.parametrize(
    "name,email,age,field,message",
    [
        ("", "a@b.com", 30, "name", "name is required"),
        ("J", "a@b.com", 30, "name", "name must be at least 2 characters long"),
        ("x" * 101, "a@b.com", 30, "name", "name must be at most 100 characters long"),
        ("Ana", "", 30, "email", "email is required"),
        ("Ana", "invalid-email", 30, "email", "email must be a valid email address"),
        ("Ana", "a@b.com", 0, "age", "age must be greater than 0"),
        ("Ana", "a@b.com", -5, "age", "age must be greater than 0"),
        ("Ana", "a@b.com", 121, "age", "age must be less than or equal to 120"),
    ],
)
def test_each_rule_reports_its_cause(name, email, age, field, message):
    with pytest.raises(ValidationError) as ei:
        validate_user(name, email, age)
    assert ei.value.field == field
    assert str(ei.value) == message


def test_trailing_newline_email_is_rejected():
    with pytest.raises(ValidationError) as ei:
        validate_user("Ana", "ana@example.com\n", 30)
    assert ei.value.field == "email"


def test_first_broken_rule_wins():
    # empty name, bad email and negative age together -> name is reported
    with pytest.raises(ValidationError) as ei:
        validate_user("", "invalid-email", -5)
    assert ei.value.field == "name"


def test_boundaries_are_inclusive():
    validate_user("Al", "a@b.co", 1)
    validate_user("x" * 100, "a@b.co", 120)


@pytest.mark.parametrize(
    "email,ok",
    [
        ("juan@example.com", True),
        ("first.last+tag@sub.example.org", True),
        ("no-at-sign", False),
        ("two@@example.com", False),
        ("@example.com", False),
        ("user@", False),
        ("user@.example.com", False),
        ("us..er@example.com", False),
        ("ana@example.com\n", False),
    ],
)
def test_email_shape(email, ok):
    assert is_valid_email(email) is ok


def test_build_user_ignores_identity_fields():
    u = build_user({"id": 99, "name": "Ana", "email": "ana@example.com", "age": 22})
    assert u == User(name="Ana", email="ana@example.com", age=22)
    assert u.id == 0 and u.created_at is None


def test_validation_error_is_value_error():
    assert issubclass(ValidationError, ValueError)
