"""Tests for request validation rules."""

from wareland.schemas import RegisterRequest, UpdateProfileRequest
from wareland.services.validation import (
    validate_email,
    validate_profile_update,
    validate_registration,
    validate_strong_password,
)


def _rules(violations) -> set[tuple[str, str]]:
    return {(v.field, v.rule) for v in violations}


class TestStrongPassword:
    def test_accepts_strong(self):
        assert validate_strong_password("password", "Secret@123") == []

    def test_blank_passes(self):
        assert validate_strong_password("password", None) == []
        assert validate_strong_password("password", "  ") == []

    def test_missing_uppercase_digit_or_special(self):
        for weak in ("secret@123", "Secret@abc", "Secret1234"):
            violations = validate_strong_password("password", weak)
            assert _rules(violations) == {("password", "strong_password")}


class TestEmail:
    def test_valid(self):
        assert validate_email("email", "budi@example.com") == []

    def test_invalid(self):
        assert _rules(validate_email("email", "budi@example")) == {("email", "email")}
        assert _rules(validate_email("email", "budi example.com")) == {("email", "email")}


class TestRegistration:
    def test_valid_request(self):
        req = RegisterRequest(
            username="budi",
            name="Budi",
            email="budi@example.com",
            password="Secret@123",
            role="seller",
        )
        assert validate_registration(req) == []

    def test_reports_every_missing_field(self):
        rules = _rules(validate_registration(RegisterRequest()))
        assert rules == {
            ("username", "required"),
            ("name", "required"),
            ("email", "required"),
            ("password", "required"),
        }

    def test_reports_multiple_rules_at_once(self):
        req = RegisterRequest(
            username="bu",
            name="Budi",
            email="not-an-email",
            password="weak",
        )
        rules = _rules(validate_registration(req))
        assert ("username", "size") in rules
        assert ("email", "email") in rules
        assert ("password", "size") in rules
        assert ("password", "strong_password") in rules

    def test_admin_role_cannot_self_register(self):
        req = RegisterRequest(
            username="budi",
            name="Budi",
            email="budi@example.com",
            password="Secret@123",
            role="ADMIN",
        )
        assert _rules(validate_registration(req)) == {("role", "enum")}


class TestProfileUpdate:
    def test_empty_update_is_valid(self):
        assert validate_profile_update(UpdateProfileRequest()) == []

    def test_new_password_requires_old_password(self):
        rules = _rules(validate_profile_update(UpdateProfileRequest(new_password="Secret@123")))
        assert rules == {("oldPassword", "required")}

    def test_blank_name_rejected(self):
        assert _rules(validate_profile_update(UpdateProfileRequest(name=" "))) == {("name", "required")}

    def test_weak_new_password(self):
        req = UpdateProfileRequest(old_password="Old@12345", new_password="weakpassword")
        assert _rules(validate_profile_update(req)) == {("newPassword", "strong_password")}

    def test_whitespace_new_password_rejected(self):
        req = UpdateProfileRequest(old_password="Secret@123", new_password="   ")
        assert _rules(validate_profile_update(req)) == {("newPassword", "required")}

    def test_empty_new_password_rejected(self):
        req = UpdateProfileRequest(new_password="")
        assert _rules(validate_profile_update(req)) == {("newPassword", "required")}
