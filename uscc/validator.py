"""Unified Social Credit Code format and checksum validation.

This module implements the GB 32100-2015 validation rules for the 18-character
unified social credit code, including the embedded GB 11714-1997 organization
code check character.

Code layout (0-indexed):
    0       Registration department (1, 5, 9, Y)
    1       Organization category within the department
    2-7     Administrative region of the registering authority
    8-15    Organization-code body
    16      Organization-code check character (mod 11)
    17      Composite check character (mod 31)

Only the first two region digits are checked, against a coarse whitelist.

References:
    - GB 32100-2015 Coding rule of the unified social credit identifier
    - GB 11714-1997 Rules of coding for the representation of organization code
"""

import re
from typing import Optional

from .constants import (
    COMPOSITE_CHECK_INDEX,
    DEPARTMENT_SUBCODES,
    GB11714_CHAR_VALUES,
    GB11714_MODULUS,
    GB11714_WEIGHTS,
    GB32100_CHAR_VALUES,
    GB32100_MODULUS,
    GB32100_VALUE_CHARS,
    GB32100_WEIGHTS,
    ORG_BODY_END,
    ORG_BODY_START,
    ORG_CHECK_INDEX,
    REGION_PREFIXES,
    REGION_SLICE,
    USCC_LENGTH,
    USCC_PATTERN,
)
from .types import RegistrationDepartment

_USCC_RE = re.compile(USCC_PATTERN)


def normalize_code(text: str) -> str:
    """Normalize a code by converting it to uppercase.

    No other normalization is applied: whitespace is kept so that the
    format check rejects it.

    Example:
        >>> normalize_code("91320213586657279t")
        '91320213586657279T'
    """
    return text.upper()


def validate_format(code: str) -> bool:
    """Validate length and character set of a normalized code.

    Args:
        code: Code after normalization

    Returns:
        True if the code is 18 characters from the 31-symbol alphabet

    Example:
        >>> validate_format("91320213586657279T")
        True
        >>> validate_format("91320213586657279I")  # I is not permitted
        False
    """
    if not code or len(code) != USCC_LENGTH:
        return False

    return bool(_USCC_RE.match(code))


def validate_department(code: str) -> bool:
    """Validate the registration department and organization category.

    The first character selects the department; the second must be one of
    the categories that department defines:
        - 1, 5: 1, 2, 3 or 9
        - 9: 1, 2 or 3
        - Y: 1

    Example:
        >>> validate_department("91")
        True
        >>> validate_department("94")
        False
        >>> validate_department("A1")  # No such department
        False
    """
    if len(code) < 2:
        return False

    department = RegistrationDepartment.from_char(code[0])
    if department is None:
        return False

    return code[1] in DEPARTMENT_SUBCODES[department]


def validate_region(code: str) -> bool:
    """Validate the region prefix (characters 3-4) against the whitelist.

    Example:
        >>> validate_region("91320213586657279T")
        True
        >>> validate_region("91990213586657279T")
        False
    """
    return code[REGION_SLICE] in REGION_PREFIXES


def calculate_org_check_char(body: str) -> str:
    """Calculate the organization-code check character for an 8-character body.

    1. Map each character through the GB 11714 alphabet (0-9, A=10 ... Z=35)
    2. Multiply by the positional weight (3, 7, 9, 10, 5, 8, 4, 2) and sum
    3. r = sum mod 11; r == 0 -> '0', r == 10 -> 'X', otherwise chr('0' + 11 - r)

    When r == 1 the result falls outside the code alphabet, so no code can
    match it.

    Args:
        body: Organization-code body (code characters 9-16)

    Returns:
        Expected check character

    Raises:
        ValueError: If input is not exactly 8 characters
        ValueError: If input contains characters outside the GB 11714 alphabet

    Example:
        >>> calculate_org_check_char("58665727")
        '9'
    """
    if len(body) != len(GB11714_WEIGHTS):
        raise ValueError(
            f"Expected {len(GB11714_WEIGHTS)} characters, got {len(body)}"
        )

    try:
        total = sum(
            GB11714_CHAR_VALUES[char] * weight
            for char, weight in zip(body, GB11714_WEIGHTS)
        )
    except KeyError as e:
        raise ValueError(f"Invalid character in organization code: {e.args[0]}") from e

    remainder = total % GB11714_MODULUS
    if remainder == 0:
        return "0"
    if remainder == 10:
        return "X"
    return chr(ord("0") + GB11714_MODULUS - remainder)


def calculate_composite_check_char(prefix: str) -> str:
    """Calculate the composite check character for the first 17 characters.

    1. Map each character through the GB 32100 alphabet (0-9, A=10 ... Y=30)
    2. Multiply by the positional weight (3^i mod 31) and sum
    3. r = sum mod 31; expected value is 0 if r == 0 else 31 - r
    4. Map the value back through the GB 32100 alphabet

    Raises:
        ValueError: If input is not exactly 17 characters
        ValueError: If input contains characters outside the GB 32100 alphabet

    Example:
        >>> calculate_composite_check_char("91320213586657279")
        'T'
    """
    if len(prefix) != len(GB32100_WEIGHTS):
        raise ValueError(
            f"Expected {len(GB32100_WEIGHTS)} characters, got {len(prefix)}"
        )

    try:
        total = sum(
            GB32100_CHAR_VALUES[char] * weight
            for char, weight in zip(prefix, GB32100_WEIGHTS)
        )
    except KeyError as e:
        raise ValueError(f"Invalid character in credit code: {e.args[0]}") from e

    remainder = total % GB32100_MODULUS
    value = 0 if remainder == 0 else GB32100_MODULUS - remainder

    return GB32100_VALUE_CHARS[value]


def validate_org_check_char(code: str) -> tuple[bool, Optional[str], str]:
    """Validate the organization-code check character (index 16).

    Args:
        code: Normalized 18-character code

    Returns:
        Tuple of (is_valid, expected, actual). expected is None when the
        body contains a character outside the GB 11714 alphabet.

    Example:
        >>> validate_org_check_char("91320213586657279T")
        (True, '9', '9')
    """
    actual = code[ORG_CHECK_INDEX]
    try:
        expected = calculate_org_check_char(code[ORG_BODY_START:ORG_BODY_END])
    except ValueError:
        return (False, None, actual)

    return (expected == actual, expected, actual)


def validate_composite_check_char(code: str) -> tuple[bool, Optional[str], str]:
    """Validate the composite check character (index 17).

    Example:
        >>> validate_composite_check_char("91320213586657279T")
        (True, 'T', 'T')
        >>> validate_composite_check_char("91320213586657279A")
        (False, 'T', 'A')
    """
    actual = code[COMPOSITE_CHECK_INDEX]
    try:
        expected = calculate_composite_check_char(code[:COMPOSITE_CHECK_INDEX])
    except ValueError:
        return (False, None, actual)

    return (expected == actual, expected, actual)


def validate(code: object) -> bool:
    """Validate a unified social credit code.

    Checks run in order and stop at the first failure: format, department,
    region prefix, organization check character, composite check character.
    Never raises; any malformed input yields False.

    Args:
        code: Candidate code, in any case

    Returns:
        True if the code passes every check

    Example:
        >>> validate("91320213586657279T")
        True
        >>> validate("91320213586657279t")
        True
        >>> validate("91320213586657279A")
        False
        >>> validate(None)
        False
    """
    if not isinstance(code, str) or not code.strip() or len(code) != USCC_LENGTH:
        return False

    code = normalize_code(code)

    if not validate_format(code):
        return False
    if not validate_department(code):
        return False
    if not validate_region(code):
        return False
    if not validate_org_check_char(code)[0]:
        return False

    return validate_composite_check_char(code)[0]
