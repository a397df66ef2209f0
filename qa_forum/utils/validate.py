# qa_forum/utils/validate.py
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

NAME_RE = re.compile(r"^[A-Za-z]+$")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# At least 6 characters with at least one letter and one digit
PASSWORD_RE = re.compile(r"^(?=.*[A-Za-z])(?=.*\d).{6,}$")

PASSWORD_POLICY_MESSAGE = (
    "Password must be at least 6 characters long and contain at least one letter and one digit"
)


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    message: Optional[str] = None


VALID = ValidationResult(valid=True)


def _invalid(message: str) -> ValidationResult:
    return ValidationResult(valid=False, message=message)


def _present(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return value is not None


def _matches(pattern: re.Pattern, value: Any) -> bool:
    # fullmatch: a "$" anchor alone would accept a trailing newline
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def validate_register(data: Mapping[str, Any]) -> ValidationResult:
    fields = ("firstName", "lastName", "email", "password", "confirmPassword")
    if not all(_present(data.get(f)) for f in fields):
        return _invalid("All fields are required")

    if not (_matches(NAME_RE, data["firstName"]) and _matches(NAME_RE, data["lastName"])):
        return _invalid("First name and last name must contain only letters")

    if not _matches(EMAIL_RE, data["email"]):
        return _invalid("Invalid email format")

    if data["password"] != data["confirmPassword"]:
        return _invalid("Passwords do not match")

    if not _matches(PASSWORD_RE, data["password"]):
        return _invalid(PASSWORD_POLICY_MESSAGE)

    return VALID


def validate_login(data: Mapping[str, Any]) -> ValidationResult:
    if not (_present(data.get("email")) and _present(data.get("password"))):
        return _invalid("Email and password are required")

    if not _matches(EMAIL_RE, data["email"]):
        return _invalid("Invalid email format")

    if not _matches(PASSWORD_RE, data["password"]):
        return _invalid(PASSWORD_POLICY_MESSAGE)

    return VALID


def validate_question(data: Mapping[str, Any]) -> ValidationResult:
    if not _present(data.get("title")):
        return _invalid("Title is required")

    if not _present(data.get("description")):
        return _invalid("Description is required")

    return VALID


def validate_answer(data: Mapping[str, Any]) -> ValidationResult:
    if not _present(data.get("description")):
        return _invalid("Description is required")

    return VALID
