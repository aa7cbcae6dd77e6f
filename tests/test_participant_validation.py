import pytest

from quiz_taker.core.participant_validation import ParticipantInfoError, validate_participant


def test_valid_details_are_trimmed():
    participant = validate_participant("  Ada Lovelace ", " ada@example.com ")
    assert participant.name == "Ada Lovelace"
    assert participant.email == "ada@example.com"


def test_missing_fields_are_reported_per_field():
    with pytest.raises(ParticipantInfoError) as excinfo:
        validate_participant("", "   ")
    assert excinfo.value.errors == {
        "name": "This field is required",
        "email": "This field is required",
    }


@pytest.mark.parametrize("email", ["ada", "ada@example", "ada @example.com", "@example.com"])
def test_malformed_email_is_rejected(email):
    with pytest.raises(ParticipantInfoError) as excinfo:
        validate_participant("Ada", email)
    assert excinfo.value.errors == {"email": "Please enter a valid email address"}


def test_overlong_name_is_rejected():
    with pytest.raises(ValueError):
        validate_participant("x" * 151, "ada@example.com")
