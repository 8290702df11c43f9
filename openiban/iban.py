"""IBAN value object.

An :class:`Iban` can only be built from a valid IBAN, so every instance is
known to pass structural and check digit validation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from . import iban_util
from .domain.country import Country, country_by_code
from .exceptions import FormatViolation, IbanFormatException


class IbanFormat(str, Enum):
    """Textual form an IBAN is given in.

    ``NONE`` is the compact electronic form, ``DEFAULT`` the printed form
    with groups of four characters separated by single spaces.
    """

    NONE = "none"
    DEFAULT = "default"

    def __str__(self) -> str:
        return self.value


# Groups of four, the last one holding one to four characters
PRINTED_FORM = re.compile(r"[A-Z]{2}[0-9]{2}( [A-Z0-9]{4})*( [A-Z0-9]{1,4})?")


@dataclass(frozen=True)
class Iban:
    """Validated International Bank Account Number.

    Example:
        >>> iban = Iban.value_of("DE89 3704 0044 0532 0130 00", IbanFormat.DEFAULT)
        >>> iban.bank_code
        '37040044'
        >>> str(iban)
        'DE89370400440532013000'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate the IBAN."""
        iban_util.validate(self.value)

    @classmethod
    def value_of(cls, text: str, iban_format: IbanFormat = IbanFormat.NONE) -> Iban:
        """Parse an IBAN given in ``iban_format``.

        Raises:
            IbanFormatException: If the text is malformed or does not match
                the printed form when ``IbanFormat.DEFAULT`` is requested
            UnsupportedCountryException: If the country has no IBAN structure
            InvalidCheckDigitException: If the check digit is wrong
        """
        if iban_format is IbanFormat.DEFAULT:
            if text is None or not PRINTED_FORM.fullmatch(text):
                raise IbanFormatException(
                    FormatViolation.IBAN_FORMAT,
                    f"Iban must be formatted using 4 characters and space combination. "
                    f"Instead of [{text}]",
                    text,
                )
            text = text.replace(" ", "")
        return cls(text)

    @property
    def country_code(self) -> str:
        return iban_util.get_country_code(self.value)

    @property
    def country(self) -> Country:
        country = country_by_code(self.country_code)
        assert country is not None
        return country

    @property
    def check_digit(self) -> str:
        return iban_util.get_check_digit(self.value)

    @property
    def bban(self) -> str:
        return iban_util.get_bban(self.value)

    @property
    def bank_code(self) -> str | None:
        return iban_util.get_bank_code(self.value)

    @property
    def branch_code(self) -> str | None:
        return iban_util.get_branch_code(self.value)

    @property
    def account_number(self) -> str | None:
        return iban_util.get_account_number(self.value)

    @property
    def national_check_digit(self) -> str | None:
        return iban_util.get_national_check_digit(self.value)

    @property
    def account_type(self) -> str | None:
        return iban_util.get_account_type(self.value)

    @property
    def owner_account_type(self) -> str | None:
        return iban_util.get_owner_account_type(self.value)

    @property
    def identification_number(self) -> str | None:
        return iban_util.get_identification_number(self.value)

    def to_formatted_string(self) -> str:
        return iban_util.to_formatted_string(self.value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "iban": self.value,
            "formatted": self.to_formatted_string(),
            "country_code": self.country_code,
            "country_name": self.country.name,
            "check_digit": self.check_digit,
            "bban": self.bban,
            "bank_code": self.bank_code,
            "branch_code": self.branch_code,
            "account_number": self.account_number,
            "national_check_digit": self.national_check_digit,
            "account_type": self.account_type,
            "owner_account_type": self.owner_account_type,
            "identification_number": self.identification_number,
        }

    def __str__(self) -> str:
        return self.value


__all__ = ["Iban", "IbanFormat"]
