"""Domain model: countries, character classes and BBAN layouts."""

from .country import COUNTRIES, Country, country_by_code
from .enums import CharacterType, PartType
from .structure import BbanStructure, BbanStructurePart

__all__ = [
    "COUNTRIES",
    "Country",
    "country_by_code",
    "CharacterType",
    "PartType",
    "BbanStructure",
    "BbanStructurePart",
]
