"""Domain enums for BBAN structures."""

import re
from enum import Enum


class CharacterType(str, Enum):
    """Character class of a BBAN field, using the IBAN registry notation.

    ``a`` upper-case letters, ``n`` digits, ``c`` upper-case letters and digits.
    """

    a = "a"
    n = "n"
    c = "c"

    def __str__(self) -> str:
        return self.value

    @property
    def pattern(self) -> re.Pattern[str]:
        """Compiled regex a whole field value must match."""
        return _CHARACTER_PATTERNS[self]

    def matches(self, value: str) -> bool:
        """Whether every character of ``value`` belongs to this class."""
        return self.pattern.fullmatch(value) is not None


_CHARACTER_PATTERNS = {
    CharacterType.a: re.compile(r"[A-Z]+"),
    CharacterType.n: re.compile(r"[0-9]+"),
    CharacterType.c: re.compile(r"[A-Z0-9]+"),
}


class PartType(str, Enum):
    """Semantic tag of a BBAN field."""

    BANK_CODE = "bank_code"
    BRANCH_CODE = "branch_code"
    ACCOUNT_NUMBER = "account_number"
    NATIONAL_CHECK_DIGIT = "national_check_digit"
    ACCOUNT_TYPE = "account_type"
    OWNER_ACCOUNT_NUMBER = "owner_account_number"
    IDENTIFICATION_NUMBER = "identification_number"

    def __str__(self) -> str:
        return self.value
