"""Validation of the participant details collected before a quiz starts."""

from __future__ import annotations

import re

from quiz_taker.core.models import ParticipantInfo

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_MAX_NAME_LENGTH = 150


class ParticipantInfoError(ValueError):
    """Raised when the participant form is incomplete or invalid."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors.items()))
        self.errors = errors


def validate_participant(name: str, email: str) -> ParticipantInfo:
    """Return cleaned participant info or raise with one message per bad field."""
    cleaned_name = (name or "").strip()
    cleaned_email = (email or "").strip()
    errors: dict[str, str] = {}

    if not cleaned_name:
        errors["name"] = "This field is required"
    elif len(cleaned_name) > _MAX_NAME_LENGTH:
        errors["name"] = f"Maximum length is {_MAX_NAME_LENGTH} characters"

    if not cleaned_email:
        errors["email"] = "This field is required"
    elif not _EMAIL_PATTERN.match(cleaned_email):
        errors["email"] = "Please enter a valid email address"

    if errors:
        raise ParticipantInfoError(errors)
    return ParticipantInfo(name=cleaned_name, email=cleaned_email)
