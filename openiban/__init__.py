"""OpenIBAN - IBAN validation and decomposition.

Validates IBANs against per-country BBAN layouts and the ISO 7064 mod-97-10
check digit, and extracts bank code, branch code, account number and the
other BBAN fields.
"""

__version__ = "1.0.0"

from .checksum import calculate_mod, validate_check_digit
from .domain import (
    COUNTRIES,
    BbanStructure,
    BbanStructurePart,
    CharacterType,
    Country,
    PartType,
    country_by_code,
)
from .exceptions import (
    FormatViolation,
    IbanFormatException,
    InvalidCheckDigitException,
    OpenIbanError,
    UnsupportedCountryException,
)
from .iban import Iban, IbanFormat
from .iban_util import (
    calculate_check_digit,
    extract_bban_entry,
    get_account_number,
    get_account_type,
    get_bank_code,
    get_bban,
    get_branch_code,
    get_check_digit,
    get_country_code,
    get_country_code_and_check_digit,
    get_iban_length,
    get_identification_number,
    get_national_check_digit,
    get_owner_account_type,
    is_supported_country,
    is_valid,
    normalize,
    replace_check_digit,
    to_formatted_string,
    validate,
)

__all__ = [
    "__version__",
    # Value objects
    "Iban",
    "IbanFormat",
    "Country",
    "COUNTRIES",
    "country_by_code",
    "BbanStructure",
    "BbanStructurePart",
    "CharacterType",
    "PartType",
    # Operations
    "calculate_check_digit",
    "calculate_mod",
    "validate",
    "validate_check_digit",
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
    "extract_bban_entry",
    "replace_check_digit",
    "to_formatted_string",
    "normalize",
    # Errors
    "OpenIbanError",
    "FormatViolation",
    "IbanFormatException",
    "UnsupportedCountryException",
    "InvalidCheckDigitException",
]
