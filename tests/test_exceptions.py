"""Tests for the exception hierarchy."""

import pytest

from openiban.exceptions import (
    FormatViolation,
    IbanFormatException,
    InvalidCheckDigitException,
    OpenIbanError,
    UnsupportedCountryException,
)

pytestmark = pytest.mark.unit


class TestOpenIbanError:
    """Test the base exception."""

    def test_message_only(self):
        error = OpenIbanError("Something failed")

        assert str(error) == "Something failed"
        assert error.context == {}

    def test_context_in_str(self):
        error = OpenIbanError("Something failed", context={"iban": "DE89"})

        assert str(error) == "Something failed (iban=DE89)"
        assert "context={'iban': 'DE89'}" in repr(error)


class TestIbanFormatException:
    """Test format violations."""

    def test_attributes(self):
        error = IbanFormatException(
            FormatViolation.BBAN_LENGTH,
            "[3704] length is 4, expected BBAN length is: 18",
            actual="3704",
            expected="18",
        )

        assert isinstance(error, OpenIbanError)
        assert error.format_violation is FormatViolation.BBAN_LENGTH
        assert error.actual == "3704"
        assert error.expected == "18"
        assert error.context == {"violation": "bban_length", "actual": "3704", "expected": "18"}

    def test_long_actual_truncated_in_context(self):
        error = IbanFormatException(FormatViolation.BBAN_LENGTH, "too long", actual="1" * 500)

        assert len(error.context["actual"]) == 100
        assert len(error.actual) == 500

    def test_violation_str(self):
        assert str(FormatViolation.NOT_EMPTY) == "not_empty"


class TestOtherExceptions:
    """Test unsupported country and check digit errors."""

    def test_unsupported_country(self):
        error = UnsupportedCountryException("Country code is not supported.", "US")

        assert error.country_code == "US"
        assert "country_code=US" in str(error)

    def test_invalid_check_digit(self):
        error = InvalidCheckDigitException("bad check digit", actual="89", expected="62")

        assert (error.actual, error.expected) == ("89", "62")
        assert error.context == {"actual": "89", "expected": "62"}

    @pytest.mark.parametrize(
        "error",
        [
            IbanFormatException(FormatViolation.NOT_NULL, "x"),
            UnsupportedCountryException("x"),
            InvalidCheckDigitException("x", actual="00", expected="01"),
        ],
    )
    def test_single_base_class(self, error):
        with pytest.raises(OpenIbanError):
            raise error
