"""BBAN structures of every IBAN country.

Source: SWIFT IBAN Registry
Reference: https://www.swift.com/standards/data-standards/iban-international-bank-account-number

Each entry lists the BBAN fields in registry order. French overseas
departments and territories share the French layout.
"""

from types import MappingProxyType

from .enums import CharacterType
from .structure import BbanStructure
from .structure import BbanStructurePart as Part

a = CharacterType.a
n = CharacterType.n
c = CharacterType.c

_FRENCH_LAYOUT = BbanStructure(
    Part.bank_code(5, n),
    Part.branch_code(5, n),
    Part.account_number(11, c),
    Part.national_check_digit(2, n),
)

_STRUCTURES: dict[str, BbanStructure] = {
    "AD": BbanStructure(
        Part.bank_code(4, n),
        Part.branch_code(4, n),
        Part.account_number(12, c),
    ),
    "AE": BbanStructure(
        Part.bank_code(3, n),
        Part.account_number(16, c),
    ),
    "AL": BbanStructure(
        Part.bank_code(3, n),
        Part.branch_code(4, n),
        Part.national_check_digit(1, n),
        Part.account_number(16, c),
    ),
    "AT": BbanStructure(
        Part.bank_code(5, n),
        Part.account_number(11, n),
    ),
    "AZ": BbanStructure(
        Part.bank_code(4, a),
        Part.account_number(20, c),
    ),
    "BA": BbanStructure(
        Part.bank_code(3, n),
        Part.branch_code(3, n),
        Part.account_number(8, n),
        Part.national_check_digit(2, n),
    ),
    "BE": BbanStructure(
        Part.bank_code(3, n),
        Part.account_number(7, n),
        Part.national_check_digit(2, n),
    ),
    "BG": BbanStructure(
        Part.bank_code(4, a),
        Part.branch_code(4, n),
        Part.account_type(2, n),
        Part.account_number(8, c),
    ),
    "BH": BbanStructure(
        Part.bank_code(4, a),
        Part.account_number(14, c),
    ),
    "BI": BbanStructure(
        Part.bank_code(5, n),
        Part.branch_code(5, n),
        Part.account_number(11, n),
        Part.national_check_digit(2, n),
    ),
    "BR": BbanStructure(
        Part.bank_code(8, n),
        Part.branch_code(5, n),
        Part.account_number(10, n),
        Part.account_type(1, a),
        Part.owner_account_type(1, c),
    ),
    "BY": BbanStructure(
        Part.bank_code(4, c),
        Part.branch_code(4, n),
        Part.account_number(16, c),
    ),
    "CH": BbanStructure(
        Part.bank_code(5, n),
        Part.account_number(12, c),
    ),
    "CR": BbanStructure(
        Part.bank_code(4, n),
        Part.account_number(14, n),
    ),
    "CY": BbanStructure(
        Part.bank_code(3, n),
        Part.branch_code(5, n),
        Part.account_number(16, c),
    ),
    "CZ": BbanStructure(
        Part.bank_code(4, n),
        Part.account_number(16, n),
    ),
    "DE": BbanStructure(
        Part.bank_code(8, n),
        Part.account_number(10, n),
    ),
    "DJ": BbanStructure(
        Part.bank_code(5, n),
        Part.branch_code(5, n),
        Part.account_number(11, n),
        Part.national_check_digit(2, n),
    ),
    "DK": BbanStructure(
        Part.bank_code(4, n),
        Part.account_number(10, n),
    ),
    "DO": BbanStructure(
        Part.bank_code(4, c),
        Part.account_number(20, n),
    ),
    "EE": BbanStructure(
        Part.bank_code(2, n),
        Part.branch_code(2, n),
        Part.account_number(11, n),
        Part.national_check_digit(1, n),
    ),
    "EG": BbanStructure(
        Part.bank_code(4, n),
        Part.branch_code(4, n),
        Part.account_number(17, n),
    ),
    "ES": BbanStructure(
        Part.bank_code(4, n),
        Part.branch_code(4, n),
        Part.national_check_digit(2, n),
        Part.account_number(10, n),
    ),
    "FI": BbanStructure(
        Part.bank_code(6, n),
        Part.account_number(7, n),
        Part.national_check_digit(1, n),
    ),
    "FK": BbanStructure(
        Part.bank_code(2, a),
        Part.account_number(12, n),
    ),
    "FO": BbanStructure(
        Part.bank_code(4, n),
        Part.account_number(9, n),
        Part.national_check_digit(1, n),
    ),
    "FR": _FRENCH_LAYOUT,
    "GB": BbanStructure(
        Part.bank_code(4, a),
        Part.branch_code(6, n),
        Part.account_number(8, n),
    ),
    "GE": BbanStructure(
        Part.bank_code(2, a),
        Part.account_number(16, n),
    ),
    "GI": BbanStructure(
        Part.bank_code(4, a),
        Part.account_number(15, c),
    ),
    "GL": BbanStructure(
        Part.bank_code(4, n),
        Part.account_number(10, n),
    ),
    "GR": BbanStructure(
        Part.bank_code(3, n),
        Part.branch_code(4, n),
        Part.account_number(16, c),
    ),
    "GT": BbanStructure(
        Part.bank_code(4, c),
        Part.account_number(20, c),
    ),
    "HN": BbanStructure(
        Part.bank_code(4, a),
        Part.account_number(20, n),
    ),
    "HR": BbanStructure(
        Part.bank_code(7, n),
        Part.account_number(10, n),
    ),
    "HU": BbanStructure(
        Part.bank_code(3, n),
        Part.branch_code(4, n),
        Part.account_number(16, n),
        Part.national_check_digit(1, n),
    ),
    "IE": BbanStructure(
        Part.bank_code(4, a),
        Part.branch_code(6, n),
        Part.account_number(8, n),
    ),
    "IL": BbanStructure(
        Part.bank_code(3, n),
        Part.branch_code(3, n),
        Part.account_number(13, n),
    ),
    "IQ": BbanStructure(
        Part.bank_code(4, a),
        Part.branch_code(3, n),
        Part.account_number(12, n),
    ),
    "IS": BbanStructure(
        Part.bank_code(2, n),
        Part.branch_code(2, n),
        Part.account_type(2, n),
        Part.account_number(6, n),
        Part.identification_number(10, n),
    ),
    "IT": BbanStructure(
        Part.national_check_digit(1, a),
        Part.bank_code(5, n),
        Part.branch_code(5, n),
        Part.account_number(12, c),
    ),
    "JO": BbanStructure(
        Part.bank_code(4, a),
        Part.branch_code(4, n),
        Part.account_number(18, c),
    ),
    "KW": BbanStructure(
        Part.bank_code(4, a),
        Part.account_number(22, c),
    ),
    "KZ": BbanStructure(
        Part.bank_code(3, n),
        Part.account_number(13, c),
    ),
    "LB": BbanStructure(
        Part.bank_code(4, n),
        Part.account_number(20, c),
    ),
    "LC": BbanStructure(
        Part.bank_code(4, a),
        Part.account_number(24, c),
    ),
    "LI": BbanStructure(
        Part.bank_code(5, n),
        Part.account_number(12, c),
    ),
    "LT": BbanStructure(
        Part.bank_code(5, n),
        Part.account_number(11, n),
    ),
    "LU": BbanStructure(
        Part.bank_code(3, n),
        Part.account_number(13, c),
    ),
    "LV": BbanStructure(
        Part.bank_code(4, a),
        Part.account_number(13, c),
    ),
    "LY": BbanStructure(
        Part.bank_code(3, n),
        Part.branch_code(3, n),
        Part.account_number(15, n),
    ),
    "MC": _FRENCH_LAYOUT,
    "MD": BbanStructure(
        Part.bank_code(2, c),
        Part.account_number(18, c),
    ),
    "ME": BbanStructure(
        Part.bank_code(3, n),
        Part.account_number(13, n),
        Part.national_check_digit(2, n),
    ),
    "MK": BbanStructure(
        Part.bank_code(3, n),
        Part.account_number(10, c),
        Part.national_check_digit(2, n),
    ),
    "MN": BbanStructure(
        Part.bank_code(4, n),
        Part.account_number(12, n),
    ),
    "MR": BbanStructure(
        Part.bank_code(5, n),
        Part.branch_code(5, n),
        Part.account_number(11, n),
        Part.national_check_digit(2, n),
    ),
    "MT": BbanStructure(
        Part.bank_code(4, a),
        Part.branch_code(5, n),
        Part.account_number(18, c),
    ),
    "MU": BbanStructure(
        Part.bank_code(6, c),
        Part.branch_code(2, n),
        Part.account_number(18, c),
    ),
    "NI": BbanStructure(
        Part.bank_code(4, a),
        Part.account_number(20, n),
    ),
    "NL": BbanStructure(
        Part.bank_code(4, a),
        Part.account_number(10, n),
    ),
    "NO": BbanStructure(
        Part.bank_code(4, n),
        Part.account_number(6, n),
        Part.national_check_digit(1, n),
    ),
    "OM": BbanStructure(
        Part.bank_code(3, n),
        Part.account_number(16, c),
    ),
    "PK": BbanStructure(
        Part.bank_code(4, c),
        Part.account_number(16, n),
    ),
    "PL": BbanStructure(
        Part.bank_code(3, n),
        Part.branch_code(4, n),
        Part.national_check_digit(1, n),
        Part.account_number(16, n),
    ),
    "PS": BbanStructure(
        Part.bank_code(4, c),
        Part.account_number(21, c),
    ),
    "PT": BbanStructure(
        Part.bank_code(4, n),
        Part.branch_code(4, n),
        Part.account_number(11, n),
        Part.national_check_digit(2, n),
    ),
    "QA": BbanStructure(
        Part.bank_code(4, a),
        Part.account_number(21, c),
    ),
    "RO": BbanStructure(
        Part.bank_code(4, a),
        Part.account_number(16, c),
    ),
    "RS": BbanStructure(
        Part.bank_code(3, n),
        Part.account_number(13, n),
        Part.national_check_digit(2, n),
    ),
    "RU": BbanStructure(
        Part.bank_code(9, n),
        Part.branch_code(5, n),
        Part.account_number(15, c),
    ),
    "SA": BbanStructure(
        Part.bank_code(2, n),
        Part.account_number(18, c),
    ),
    "SC": BbanStructure(
        Part.bank_code(4, a),
        Part.branch_code(4, n),
        Part.account_number(16, n),
        Part.account_type(3, a),
    ),
    "SD": BbanStructure(
        Part.bank_code(2, n),
        Part.account_number(12, n),
    ),
    "SE": BbanStructure(
        Part.bank_code(3, n),
        Part.account_number(17, n),
    ),
    "SI": BbanStructure(
        Part.bank_code(2, n),
        Part.branch_code(3, n),
        Part.account_number(8, n),
        Part.national_check_digit(2, n),
    ),
    "SK": BbanStructure(
        Part.bank_code(4, n),
        Part.account_number(16, n),
    ),
    "SM": BbanStructure(
        Part.national_check_digit(1, a),
        Part.bank_code(5, n),
        Part.branch_code(5, n),
        Part.account_number(12, c),
    ),
    "SO": BbanStructure(
        Part.bank_code(4, n),
        Part.branch_code(3, n),
        Part.account_number(12, n),
    ),
    "ST": BbanStructure(
        Part.bank_code(4, n),
        Part.branch_code(4, n),
        Part.account_number(11, n),
        Part.national_check_digit(2, n),
    ),
    "SV": BbanStructure(
        Part.bank_code(4, a),
        Part.account_number(20, n),
    ),
    "TL": BbanStructure(
        Part.bank_code(3, n),
        Part.account_number(14, n),
        Part.national_check_digit(2, n),
    ),
    "TN": BbanStructure(
        Part.bank_code(2, n),
        Part.branch_code(3, n),
        Part.account_number(15, c),
    ),
    "TR": BbanStructure(
        Part.bank_code(5, n),
        Part.national_check_digit(1, c),
        Part.account_number(16, c),
    ),
    "UA": BbanStructure(
        Part.bank_code(6, n),
        Part.account_number(19, n),
    ),
    "VA": BbanStructure(
        Part.bank_code(3, n),
        Part.account_number(15, n),
    ),
    "VG": BbanStructure(
        Part.bank_code(4, a),
        Part.account_number(16, n),
    ),
    "XK": BbanStructure(
        Part.bank_code(2, n),
        Part.branch_code(2, n),
        Part.account_number(10, n),
        Part.national_check_digit(2, n),
    ),
    "YE": BbanStructure(
        Part.bank_code(4, a),
        Part.branch_code(4, n),
        Part.account_number(18, c),
    ),
}

for _code in ("BL", "GF", "GP", "MF", "MQ", "NC", "PF", "PM", "RE", "TF", "WF", "YT"):
    _STRUCTURES[_code] = _FRENCH_LAYOUT

BBAN_STRUCTURES: MappingProxyType[str, BbanStructure] = MappingProxyType(_STRUCTURES)

__all__ = ["BBAN_STRUCTURES"]
