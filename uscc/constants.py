"""
Code Tables for Unified Social Credit Code Validation

This module contains the read-only tables shared by the validator and the
processor: character alphabets, weight vectors, the registration-department
policy table and the coarse region-prefix whitelist.

References:
    - GB 32100-2015 Coding rule of the unified social credit identifier
    - GB 11714-1997 Rules of coding for the representation of organization code
"""

from types import MappingProxyType

from .types import RegistrationDepartment

# ============================================================================
# Code Layout
# ============================================================================
USCC_LENGTH = 18
ORG_BODY_START = 8  # First character of the organization-code body
ORG_BODY_END = 16  # Exclusive; index 16 is the organization check character
ORG_CHECK_INDEX = 16
COMPOSITE_CHECK_INDEX = 17
REGION_SLICE = slice(2, 4)

# ============================================================================
# GB 32100-2015 Alphabet (Table A)
# ============================================================================
# 31 symbols; I, O, S, V, Z are excluded to avoid confusion with digits
GB32100_ALPHABET = "0123456789ABCDEFGHJKLMNPQRTUWXY"

GB32100_CHAR_VALUES = MappingProxyType(
    {char: value for value, char in enumerate(GB32100_ALPHABET)}
)
GB32100_VALUE_CHARS = MappingProxyType(
    {value: char for value, char in enumerate(GB32100_ALPHABET)}
)

USCC_PATTERN = r"^[0-9A-HJ-NPQRTUWXY]{18}$"

# ============================================================================
# GB 11714-1997 Alphabet (Table B)
# ============================================================================
# Digits 0-9 -> 0..9, letters A-Z -> 10..35
GB11714_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

GB11714_CHAR_VALUES = MappingProxyType(
    {char: value for value, char in enumerate(GB11714_ALPHABET)}
)

# ============================================================================
# Weight Vectors
# ============================================================================
# Composite check (mod 31), 3^i mod 31 for positions 0-16
GB32100_WEIGHTS = (1, 3, 9, 27, 19, 26, 16, 17, 20, 29, 25, 13, 8, 24, 10, 30, 28)

# Organization body check (mod 11), positions 8-15
GB11714_WEIGHTS = (3, 7, 9, 10, 5, 8, 4, 2)

GB32100_MODULUS = 31
GB11714_MODULUS = 11

# ============================================================================
# Registration Department Policy
# ============================================================================
# Leading character -> permitted second characters (organization category)
DEPARTMENT_SUBCODES = MappingProxyType(
    {
        RegistrationDepartment.ESTABLISHMENT: frozenset("1239"),
        RegistrationDepartment.CIVIL_AFFAIRS: frozenset("1239"),
        RegistrationDepartment.INDUSTRY_AND_COMMERCE: frozenset("123"),
        RegistrationDepartment.OTHER: frozenset("1"),
    }
)

# ============================================================================
# Region Prefixes
# ============================================================================
# Grouping is documentary only; validation uses the flattened set
REGION_PREFIXES_BY_ZONE = MappingProxyType(
    {
        "north": ("11", "12", "13", "14", "15"),
        "northeast": ("21", "22", "23"),
        "east": ("31", "32", "33", "34", "35", "36", "37"),
        "south_central": ("41", "42", "43", "44", "45", "46"),
        "southwest": ("50", "51", "52", "53", "54"),
        "northwest": ("61", "62", "63", "64", "65"),
        "special": ("71", "81", "82"),  # Taiwan, Hong Kong, Macao
    }
)

REGION_PREFIXES = frozenset(
    prefix for prefixes in REGION_PREFIXES_BY_ZONE.values() for prefix in prefixes
)
