"""ISO 7064 mod-97-10 check digits for IBANs.

The IBAN is rearranged so that the country code and check digit move to the
end, letters are expanded to two-digit numbers (A=10 ... Z=35) and the
resulting decimal string must leave a remainder of 1 when divided by 97.

Reference: https://en.wikipedia.org/wiki/International_Bank_Account_Number#Validating_the_IBAN
"""

from .exceptions import FormatViolation, IbanFormatException, InvalidCheckDigitException

DEFAULT_CHECK_DIGIT = "00"

MOD = 97
MAX = 999_999_999

COUNTRY_CODE_LENGTH = 2
CHECK_DIGIT_LENGTH = 2
BBAN_INDEX = COUNTRY_CODE_LENGTH + CHECK_DIGIT_LENGTH


def _char_value(char: str) -> int:
    """A=10, B=11, ..., Z=35 in either case; digits map to themselves."""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 10
    raise IbanFormatException(
        FormatViolation.IBAN_VALID_CHARACTERS,
        f"Invalid Character[{char}] = '{ord(char)}'",
        char,
    )


def calculate_mod(iban: str) -> int:
    """Compute the mod-97 remainder of an IBAN.

    The running total is folded back modulo 97 whenever it grows past
    ``MAX`` so the value never needs more than a machine word.

    Args:
        iban: IBAN string, any case

    Returns:
        Remainder in ``[0, 96]``; ``1`` for a valid IBAN

    Raises:
        IbanFormatException: On a character outside ``[A-Za-z0-9]``
    """
    rearranged = iban[BBAN_INDEX:] + iban[:BBAN_INDEX]

    total = 0
    for char in rearranged:
        value = _char_value(char)
        total = (total * 100 if value > 9 else total * 10) + value
        if total > MAX:
            total %= MOD

    return total % MOD


def replace_check_digit(iban: str, check_digit: str) -> str:
    """Return ``iban`` with its check digit replaced by ``check_digit``."""
    return iban[:COUNTRY_CODE_LENGTH] + check_digit + iban[BBAN_INDEX:]


def calculate_check_digit(iban: str) -> str:
    """Calculate the check digit an IBAN should carry.

    The existing check digit is ignored.

    Example:
        >>> calculate_check_digit("DE00370400440532013000")
        '89'
    """
    mod = calculate_mod(replace_check_digit(iban, DEFAULT_CHECK_DIGIT))
    return str(98 - mod).zfill(CHECK_DIGIT_LENGTH)


def validate_check_digit(iban: str) -> None:
    """Raise :class:`InvalidCheckDigitException` unless the mod-97 check holds."""
    if calculate_mod(iban) != 1:
        check_digit = iban[COUNTRY_CODE_LENGTH:BBAN_INDEX]
        expected = calculate_check_digit(iban)
        raise InvalidCheckDigitException(
            f"[{iban}] has invalid check digit: {check_digit}, "
            f"expected check digit is: {expected}",
            check_digit,
            expected,
        )


__all__ = [
    "DEFAULT_CHECK_DIGIT",
    "calculate_mod",
    "calculate_check_digit",
    "replace_check_digit",
    "validate_check_digit",
]
