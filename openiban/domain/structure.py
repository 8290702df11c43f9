"""BBAN structure value objects.

A BBAN structure is the ordered list of fixed-width fields making up the
country-specific part of an IBAN, e.g. Germany is ``8!n 10!n``: an 8 digit
bank code followed by a 10 digit account number.

Value Objects:
- Immutable (frozen dataclasses)
- Equality based on attributes
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .country import Country
from .enums import CharacterType, PartType


@dataclass(frozen=True)
class BbanStructurePart:
    """One fixed-width field of a BBAN.

    Attributes:
        part_type: Semantic tag of the field (bank code, account number, ...)
        character_type: Allowed character class
        length: Number of characters, always positive
    """

    part_type: PartType
    character_type: CharacterType
    length: int

    def __post_init__(self) -> None:
        if not isinstance(self.length, int) or self.length <= 0:
            raise ValueError(f"BBAN part length must be a positive integer, got {self.length!r}")

    def validate(self, value: str) -> bool:
        """Check that ``value`` only holds characters of this part's class.

        The caller slices ``value`` by :attr:`length`, so only the character
        class is checked here.
        """
        return self.character_type.matches(value)

    def to_notation(self) -> str:
        """Registry notation of the part, e.g. ``8!n``."""
        return f"{self.length}!{self.character_type.value}"

    @classmethod
    def bank_code(cls, length: int, character_type: CharacterType) -> BbanStructurePart:
        return cls(PartType.BANK_CODE, character_type, length)

    @classmethod
    def branch_code(cls, length: int, character_type: CharacterType) -> BbanStructurePart:
        return cls(PartType.BRANCH_CODE, character_type, length)

    @classmethod
    def account_number(cls, length: int, character_type: CharacterType) -> BbanStructurePart:
        return cls(PartType.ACCOUNT_NUMBER, character_type, length)

    @classmethod
    def national_check_digit(
        cls, length: int, character_type: CharacterType
    ) -> BbanStructurePart:
        return cls(PartType.NATIONAL_CHECK_DIGIT, character_type, length)

    @classmethod
    def account_type(cls, length: int, character_type: CharacterType) -> BbanStructurePart:
        return cls(PartType.ACCOUNT_TYPE, character_type, length)

    @classmethod
    def owner_account_type(cls, length: int, character_type: CharacterType) -> BbanStructurePart:
        return cls(PartType.OWNER_ACCOUNT_NUMBER, character_type, length)

    @classmethod
    def identification_number(
        cls, length: int, character_type: CharacterType
    ) -> BbanStructurePart:
        return cls(PartType.IDENTIFICATION_NUMBER, character_type, length)


@dataclass(frozen=True, init=False)
class BbanStructure:
    """Ordered BBAN layout of one country.

    Usage:
        >>> structure = BbanStructure.for_country("DE")
        >>> structure.bban_length
        18
        >>> structure.to_notation()
        '8!n 10!n'
    """

    parts: tuple[BbanStructurePart, ...]

    def __init__(self, *parts: BbanStructurePart) -> None:
        if not parts:
            raise ValueError("BBAN structure needs at least one part")
        object.__setattr__(self, "parts", tuple(parts))

    def __iter__(self) -> Iterator[BbanStructurePart]:
        return iter(self.parts)

    @property
    def bban_length(self) -> int:
        """Sum of all part lengths."""
        return sum(part.length for part in self.parts)

    def split(self, bban: str) -> Iterator[tuple[BbanStructurePart, str]]:
        """Yield each part with its slice of ``bban``, in layout order.

        Slices past the end of a short ``bban`` come back shorter or empty;
        length is the caller's concern.
        """
        offset = 0
        for part in self.parts:
            yield part, bban[offset : offset + part.length]
            offset += part.length

    def to_notation(self) -> str:
        return " ".join(part.to_notation() for part in self.parts)

    @staticmethod
    def for_country(country: Country | str | None) -> BbanStructure | None:
        """Return the BBAN structure of a country.

        Args:
            country: :class:`Country` or alpha-2 code

        Returns:
            The structure, or None if the country does not use IBANs
        """
        from .bban_registry import BBAN_STRUCTURES

        if country is None:
            return None
        code = country.alpha2 if isinstance(country, Country) else country
        return BBAN_STRUCTURES.get(code)

    @staticmethod
    def supported_countries() -> list[str]:
        """Sorted alpha-2 codes of every country with a BBAN structure."""
        from .bban_registry import BBAN_STRUCTURES

        return sorted(BBAN_STRUCTURES)


__all__ = ["BbanStructurePart", "BbanStructure"]
