"""IBAN validation and decomposition.

Functions here work on plain strings. Validation runs the cheap structural
checks first and the checksum last, raising on the first violation:

1. not null / not empty
2. country code: two upper-case letters, known, with an IBAN structure
3. check digit: two digits
4. BBAN length
5. BBAN characters, part by part
6. mod-97 check digit

Usage:
    >>> validate("DE89370400440532013000")
    >>> get_bank_code("DE89370400440532013000")
    '37040044'
    >>> to_formatted_string("DE89370400440532013000")
    'DE89 3704 0044 0532 0130 00'
"""

import re

from .checksum import (
    BBAN_INDEX,
    CHECK_DIGIT_LENGTH,
    COUNTRY_CODE_LENGTH,
    calculate_check_digit,
    replace_check_digit,
    validate_check_digit,
)
from .domain.country import Country, country_by_code
from .domain.enums import CharacterType, PartType
from .domain.structure import BbanStructure, BbanStructurePart
from .exceptions import (
    FormatViolation,
    IbanFormatException,
    OpenIbanError,
    UnsupportedCountryException,
)

UPPER_CASE_LETTERS = re.compile(r"[A-Z]+")
DIGITS = re.compile(r"[0-9]+")

GROUP_SIZE = 4

_BBAN_VIOLATIONS = {
    CharacterType.a: (
        FormatViolation.BBAN_ONLY_UPPER_CASE_LETTERS,
        "must contain only upper case letters.",
    ),
    CharacterType.c: (
        FormatViolation.BBAN_ONLY_DIGITS_OR_LETTERS,
        "must contain only digits or letters.",
    ),
    CharacterType.n: (
        FormatViolation.BBAN_ONLY_DIGITS,
        "must contain only digits.",
    ),
}


def validate(iban: str | None) -> None:
    """
    Validate an IBAN.

    Args:
        iban: Candidate IBAN in compact form (no spaces)

    Raises:
        IbanFormatException: If the IBAN is malformed
        UnsupportedCountryException: If the country has no IBAN structure
        InvalidCheckDigitException: If the check digit is wrong
    """
    _validate_empty(iban)
    assert iban is not None
    _validate_country_code(iban)
    _validate_check_digit_presence(iban)

    structure = _get_bban_structure(iban)
    if structure is None:
        # _validate_country_code already rejected unsupported countries
        raise RuntimeError("Internal error, expected structure")

    _validate_bban_length(iban, structure)
    _validate_bban_entries(iban, structure)

    validate_check_digit(iban)


def is_valid(iban: str | None) -> bool:
    """Return True if ``iban`` passes :func:`validate`."""
    try:
        validate(iban)
    except OpenIbanError:
        return False
    return True


def is_supported_country(country: Country | str) -> bool:
    """Check whether a country uses IBANs."""
    return BbanStructure.for_country(country) is not None


def get_iban_length(country: Country | str) -> int:
    """
    Return the IBAN length of a country.

    Raises:
        UnsupportedCountryException: If the country has no IBAN structure
    """
    structure = BbanStructure.for_country(country)
    if structure is None:
        raise UnsupportedCountryException("Unsupported country", str(country))
    return COUNTRY_CODE_LENGTH + CHECK_DIGIT_LENGTH + structure.bban_length


def get_check_digit(iban: str) -> str:
    return iban[COUNTRY_CODE_LENGTH:BBAN_INDEX]


def get_country_code(iban: str) -> str:
    return iban[:COUNTRY_CODE_LENGTH]


def get_country_code_and_check_digit(iban: str) -> str:
    return iban[:BBAN_INDEX]


def get_bban(iban: str) -> str:
    return iban[BBAN_INDEX:]


def get_account_number(iban: str) -> str | None:
    return extract_bban_entry(iban, PartType.ACCOUNT_NUMBER)


def get_bank_code(iban: str) -> str | None:
    return extract_bban_entry(iban, PartType.BANK_CODE)


def get_branch_code(iban: str) -> str | None:
    return extract_bban_entry(iban, PartType.BRANCH_CODE)


def get_national_check_digit(iban: str) -> str | None:
    return extract_bban_entry(iban, PartType.NATIONAL_CHECK_DIGIT)


def get_account_type(iban: str) -> str | None:
    return extract_bban_entry(iban, PartType.ACCOUNT_TYPE)


def get_owner_account_type(iban: str) -> str | None:
    return extract_bban_entry(iban, PartType.OWNER_ACCOUNT_NUMBER)


def get_identification_number(iban: str) -> str | None:
    return extract_bban_entry(iban, PartType.IDENTIFICATION_NUMBER)


def to_formatted_string(iban: str) -> str:
    """
    Return the printed form of an IBAN: groups of four separated by spaces.

    Spaces already present are dropped first, so formatting a formatted
    IBAN gives the same result.
    """
    compact = iban.replace(" ", "")
    groups = [compact[i : i + GROUP_SIZE] for i in range(0, len(compact), GROUP_SIZE)]
    return " ".join(groups)


def normalize(iban: str) -> str:
    """Strip all whitespace and upper-case, e.g. for user-typed input."""
    return "".join(iban.split()).upper()


def extract_bban_entry(iban: str, part_type: PartType) -> str | None:
    """
    Concatenate the BBAN fields of ``iban`` tagged ``part_type``.

    Returns:
        The field value, or None if the country is unknown or its layout
        has no such field
    """
    structure = _get_bban_structure(iban)
    if structure is None:
        return None

    values = [
        value for part, value in structure.split(get_bban(iban)) if part.part_type == part_type
    ]
    if not values:
        return None
    return "".join(values)


def _get_bban_structure(iban: str) -> BbanStructure | None:
    country = country_by_code(get_country_code(iban))
    if country is None:
        return None
    return BbanStructure.for_country(country)


def _validate_empty(iban: str | None) -> None:
    if iban is None:
        raise IbanFormatException(FormatViolation.NOT_NULL, "Null can't be a valid Iban.")

    if len(iban) == 0:
        raise IbanFormatException(FormatViolation.NOT_EMPTY, "Empty string can't be a valid Iban.")


def _validate_country_code(iban: str) -> None:
    if len(iban) < COUNTRY_CODE_LENGTH:
        raise IbanFormatException(
            FormatViolation.COUNTRY_CODE_TWO_LETTERS,
            "Iban must contain 2 char country code.",
            iban,
        )

    country_code = get_country_code(iban)
    if not UPPER_CASE_LETTERS.fullmatch(country_code):
        raise IbanFormatException(
            FormatViolation.COUNTRY_CODE_ONLY_UPPER_CASE_LETTERS,
            "Iban country code must contain upper case letters.",
            country_code,
        )

    country = country_by_code(country_code)
    if country is None:
        raise IbanFormatException(
            FormatViolation.COUNTRY_CODE_EXISTS,
            "Iban contains non existing country code.",
            country_code,
        )

    if BbanStructure.for_country(country) is None:
        raise UnsupportedCountryException("Country code is not supported.", country_code)


def _validate_check_digit_presence(iban: str) -> None:
    if len(iban) < BBAN_INDEX:
        raise IbanFormatException(
            FormatViolation.CHECK_DIGIT_TWO_DIGITS,
            "Iban must contain 2 digit check digit.",
            iban[COUNTRY_CODE_LENGTH:],
        )

    check_digit = get_check_digit(iban)
    if not DIGITS.fullmatch(check_digit):
        raise IbanFormatException(
            FormatViolation.CHECK_DIGIT_ONLY_DIGITS,
            "Iban's check digit should contain only digits.",
            check_digit,
        )


def _validate_bban_length(iban: str, structure: BbanStructure) -> None:
    expected_length = structure.bban_length
    bban = get_bban(iban)

    if len(bban) != expected_length:
        raise IbanFormatException(
            FormatViolation.BBAN_LENGTH,
            f"[{bban}] length is {len(bban)}, expected BBAN length is: {expected_length}",
            str(len(bban)),
            str(expected_length),
        )


def _validate_bban_entries(iban: str, structure: BbanStructure) -> None:
    for part, value in structure.split(get_bban(iban)):
        _validate_bban_entry_character_type(part, value)


def _validate_bban_entry_character_type(part: BbanStructurePart, value: str) -> None:
    if part.validate(value):
        return

    violation, reason = _BBAN_VIOLATIONS[part.character_type]
    raise IbanFormatException(violation, f"[{value}] {reason}", value)


__all__ = [
    "calculate_check_digit",
    "validate",
    "is_valid",
    "is_supported_country",
    "get_iban_length",
    "get_check_digit",
    "get_country_code",
    "get_country_code_and_check_digit",
    "get_bban",
    "get_account_number",
    "get_bank_code",
    "get_branch_code",
    "get_national_check_digit",
    "get_account_type",
    "get_owner_account_type",
    "get_identification_number",
    "replace_check_digit",
    "to_formatted_string",
    "normalize",
    "extract_bban_entry",
]
