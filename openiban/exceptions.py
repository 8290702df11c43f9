"""Exception hierarchy for OpenIBAN.

Every error raised by the library derives from :class:`OpenIbanError` and
carries structured context so callers can log it or present it without
parsing messages.

Usage:
    from openiban.exceptions import FormatViolation, IbanFormatException

    try:
        validate(iban)
    except IbanFormatException as e:
        logger.warning("iban_rejected", violation=e.format_violation, context=e.context)
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class FormatViolation(str, Enum):
    """Kind of structural problem found in an IBAN string."""

    IBAN_FORMAT = "iban_format"
    IBAN_VALID_CHARACTERS = "iban_valid_characters"

    NOT_NULL = "not_null"
    NOT_EMPTY = "not_empty"

    COUNTRY_CODE_TWO_LETTERS = "country_code_two_letters"
    COUNTRY_CODE_ONLY_UPPER_CASE_LETTERS = "country_code_only_upper_case_letters"
    COUNTRY_CODE_EXISTS = "country_code_exists"

    CHECK_DIGIT_TWO_DIGITS = "check_digit_two_digits"
    CHECK_DIGIT_ONLY_DIGITS = "check_digit_only_digits"

    BBAN_LENGTH = "bban_length"
    BBAN_ONLY_UPPER_CASE_LETTERS = "bban_only_upper_case_letters"
    BBAN_ONLY_DIGITS_OR_LETTERS = "bban_only_digits_or_letters"
    BBAN_ONLY_DIGITS = "bban_only_digits"

    def __str__(self) -> str:
        return self.value


class OpenIbanError(Exception):
    """Base exception for all OpenIBAN errors.

    Attributes:
        message: Human-readable error message
        context: Additional context for debugging (dict)
    """

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Format exception with context for logging."""
        base = self.message
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({ctx_str})"
        return base

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, context={self.context!r})"


class IbanFormatException(OpenIbanError):
    """Raised when an IBAN string is structurally malformed.

    The offending part of the input is kept in ``actual``; ``expected`` is
    only filled in where a single correct value exists (e.g. BBAN length).
    """

    def __init__(
        self,
        format_violation: FormatViolation,
        message: str,
        actual: str | None = None,
        expected: str | None = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.get("context", {})
        context["violation"] = format_violation.value
        if actual is not None:
            context["actual"] = actual[:100]
        if expected is not None:
            context["expected"] = expected
        kwargs["context"] = context
        super().__init__(message, **kwargs)
        self.format_violation = format_violation
        self.actual = actual
        self.expected = expected


class UnsupportedCountryException(OpenIbanError):
    """Raised when a known country has no IBAN (BBAN) structure."""

    def __init__(self, message: str, country_code: str | None = None, **kwargs: Any) -> None:
        context = kwargs.get("context", {})
        if country_code:
            context["country_code"] = country_code
        kwargs["context"] = context
        super().__init__(message, **kwargs)
        self.country_code = country_code


class InvalidCheckDigitException(OpenIbanError):
    """Raised when a well-formed IBAN fails the mod-97 check.

    Both the check digit found in the IBAN and the one it should carry are
    kept for diagnostics.
    """

    def __init__(self, message: str, actual: str, expected: str, **kwargs: Any) -> None:
        context = kwargs.get("context", {})
        context["actual"] = actual
        context["expected"] = expected
        kwargs["context"] = context
        super().__init__(message, **kwargs)
        self.actual = actual
        self.expected = expected


__all__ = [
    "FormatViolation",
    "OpenIbanError",
    "IbanFormatException",
    "UnsupportedCountryException",
    "InvalidCheckDigitException",
]
