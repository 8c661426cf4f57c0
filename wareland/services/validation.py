"""Request validation.

Each validator returns a list of Violation(field, rule, message); an empty
list means the input is acceptable. Routes run these before calling services
and raise ValidationFailedException with the full list, so clients see every
problem at once instead of the first one.
"""

import re

from wareland.models import UserRole
from wareland.schemas import RegisterRequest, UpdateProfileRequest, Violation

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
UPPERCASE_RE = re.compile(r"[A-Z]")
DIGIT_RE = re.compile(r"\d")
SPECIAL_RE = re.compile(r"[^A-Za-z0-9]")

USERNAME_MIN, USERNAME_MAX = 3, 50
PASSWORD_MIN = 8
PASSWORD_MAX_BYTES = 72  # bcrypt only hashes the first 72 bytes

# ADMIN accounts are never self-registered
SELF_SERVICE_ROLES = (UserRole.BUYER.value, UserRole.SELLER.value)

STRONG_PASSWORD_MESSAGE = (
    "Password must contain at least one uppercase letter, one digit, "
    "and one special character (e.g., @)."
)


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_required(field: str, value: str | None) -> list[Violation]:
    if _blank(value):
        return [Violation(field=field, rule="required", message=f"{field} is required")]
    return []


def validate_email(field: str, value: str | None) -> list[Violation]:
    """Blank values pass; pair with validate_required for mandatory fields."""
    if _blank(value):
        return []
    if not EMAIL_RE.match(value.strip()):
        return [Violation(field=field, rule="email", message="Email format is invalid")]
    return []


def validate_strong_password(field: str, value: str | None) -> list[Violation]:
    """Uppercase + digit + special character. Blank values pass."""
    if _blank(value):
        return []
    if UPPERCASE_RE.search(value) and DIGIT_RE.search(value) and SPECIAL_RE.search(value):
        return []
    return [Violation(field=field, rule="strong_password", message=STRONG_PASSWORD_MESSAGE)]


def validate_password_size(field: str, value: str | None) -> list[Violation]:
    if _blank(value):
        return []
    if len(value) < PASSWORD_MIN or len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        return [
            Violation(
                field=field,
                rule="size",
                message=f"Password must be {PASSWORD_MIN}-{PASSWORD_MAX_BYTES} characters long",
            )
        ]
    return []


def validate_registration(req: RegisterRequest) -> list[Violation]:
    violations: list[Violation] = []
    for field, value in (
        ("username", req.username),
        ("name", req.name),
        ("email", req.email),
        ("password", req.password),
    ):
        violations += validate_required(field, value)

    if not _blank(req.username) and not (
        USERNAME_MIN <= len(req.username.strip()) <= USERNAME_MAX
    ):
        violations.append(
            Violation(
                field="username",
                rule="size",
                message=f"Username must be {USERNAME_MIN}-{USERNAME_MAX} characters long",
            )
        )

    violations += validate_email("email", req.email)
    violations += validate_password_size("password", req.password)
    violations += validate_strong_password("password", req.password)

    if req.role is not None and req.role.upper() not in SELF_SERVICE_ROLES:
        violations.append(
            Violation(
                field="role",
                rule="enum",
                message=f"Role must be one of {', '.join(SELF_SERVICE_ROLES)}",
            )
        )
    return violations


def validate_profile_update(req: UpdateProfileRequest) -> list[Violation]:
    violations: list[Violation] = []
    if req.name is not None:
        violations += validate_required("name", req.name)
    violations += validate_email("email", req.email)
    if req.new_password is not None and _blank(req.new_password):
        violations.append(
            Violation(field="newPassword", rule="required", message="newPassword must not be blank")
        )
    violations += validate_password_size("newPassword", req.new_password)
    violations += validate_strong_password("newPassword", req.new_password)
    if not _blank(req.new_password):
        violations += validate_required("oldPassword", req.old_password)
    return violations
