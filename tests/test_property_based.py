"""
Property-based tests for IBAN validation using Hypothesis.

IBANs are generated from the BBAN layouts themselves, so every supported
country is exercised with random but structurally correct account data.
"""

import string

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from openiban import iban_util
from openiban.checksum import calculate_check_digit, calculate_mod
from openiban.domain.enums import CharacterType, PartType
from openiban.domain.structure import BbanStructure
from openiban.exceptions import InvalidCheckDigitException

pytestmark = pytest.mark.unit

ALPHABETS = {
    CharacterType.a: string.ascii_uppercase,
    CharacterType.n: string.digits,
    CharacterType.c: string.ascii_uppercase + string.digits,
}


@st.composite
def valid_ibans(draw: st.DrawFn) -> str:
    """Draw a structurally valid IBAN with a correct check digit."""
    country_code = draw(st.sampled_from(BbanStructure.supported_countries()))
    structure = BbanStructure.for_country(country_code)
    assert structure is not None

    bban = "".join(
        draw(
            st.text(
                alphabet=ALPHABETS[part.character_type],
                min_size=part.length,
                max_size=part.length,
            )
        )
        for part in structure
    )
    check_digit = calculate_check_digit(country_code + "00" + bban)
    return country_code + check_digit + bban


class TestChecksumProperties:
    """Property-based tests for the checksum engine."""

    @given(iban=valid_ibans())
    def test_generated_iban_is_valid(self, iban):
        iban_util.validate(iban)

    @given(iban=valid_ibans())
    def test_check_digit_recomputes(self, iban):
        assert calculate_check_digit(iban_util.replace_check_digit(iban, "00")) == (
            iban_util.get_check_digit(iban)
        )

    @given(iban=valid_ibans(), wrong=st.integers(min_value=0, max_value=99))
    def test_wrong_check_digit_reports_expected(self, iban, wrong):
        expected = iban_util.get_check_digit(iban)
        # 97 apart leaves the same remainder
        assume(wrong % 97 != int(expected) % 97)
        tampered = iban_util.replace_check_digit(iban, f"{wrong:02d}")

        with pytest.raises(InvalidCheckDigitException) as exc_info:
            iban_util.validate(tampered)

        assert exc_info.value.expected == expected
        iban_util.validate(iban_util.replace_check_digit(tampered, exc_info.value.expected))

    @given(
        text=st.text(
            alphabet=string.ascii_uppercase + string.digits,
            min_size=4,
            max_size=64,
        )
    )
    def test_mod_matches_big_integer_arithmetic(self, text):
        """Incremental reduction agrees with Python's arbitrary precision ints."""
        rearranged = text[4:] + text[:4]
        number = int("".join(str(int(ch, 36)) for ch in rearranged))

        assert calculate_mod(text) == number % 97


class TestStructureProperties:
    """Property-based tests for decomposition and formatting."""

    @given(iban=valid_ibans())
    def test_round_trip(self, iban):
        rebuilt = (
            iban_util.get_country_code(iban)
            + iban_util.get_check_digit(iban)
            + iban_util.get_bban(iban)
        )
        assert rebuilt == iban

    @given(iban=valid_ibans())
    def test_iban_length_matches_country(self, iban):
        assert len(iban) == iban_util.get_iban_length(iban_util.get_country_code(iban))

    @given(iban=valid_ibans())
    def test_formatting_idempotent(self, iban):
        formatted = iban_util.to_formatted_string(iban)

        assert iban_util.to_formatted_string(formatted) == formatted
        assert formatted.replace(" ", "") == iban
        assert all(len(group) <= 4 for group in formatted.split(" "))

    @given(iban=valid_ibans())
    def test_bank_code_is_bban_prefix_or_none(self, iban):
        """Wherever a layout starts with the bank code, it is the BBAN prefix."""
        structure = BbanStructure.for_country(iban_util.get_country_code(iban))
        assert structure is not None
        first = structure.parts[0]
        bank_code = iban_util.get_bank_code(iban)

        if first.part_type is PartType.BANK_CODE:
            assert bank_code is not None
            assert iban_util.get_bban(iban).startswith(bank_code)
