"""
Pytest Configuration and Shared Fixtures

This file contains pytest configuration and fixtures that are available
to all test modules.
"""

import random

import pytest

from uscc.constants import DEPARTMENT_SUBCODES, GB32100_ALPHABET, REGION_PREFIXES
from uscc.validator import calculate_composite_check_char, calculate_org_check_char

# Check characters of these codes were computed by hand from the weight tables
KNOWN_VALID_CODES = [
    "91320213586657279T",  # Industry and commerce, Jiangsu
    "91350211MA2WPM7X0U",  # Industry and commerce, Fujian, letters in body
    "Y11100001234567880",  # Other registry, composite remainder 0
    "59440300MA5G7C2D0T",  # Civil affairs, category 9, Guangdong
    "9111010812345676XD",  # Organization check character X
]


def build_code(rng: random.Random) -> str:
    """Build a valid code from random department, region and body."""
    departments = sorted(DEPARTMENT_SUBCODES, key=lambda d: d.value)
    while True:
        department = rng.choice(departments)
        category = rng.choice(sorted(DEPARTMENT_SUBCODES[department]))
        region = rng.choice(sorted(REGION_PREFIXES))
        region += "".join(rng.choice("0123456789") for _ in range(4))
        body = "".join(rng.choice(GB32100_ALPHABET) for _ in range(8))

        org_check = calculate_org_check_char(body)
        if org_check not in GB32100_ALPHABET:
            # Remainder 1 has no representable check character
            continue

        prefix = department.value + category + region + body + org_check
        return prefix + calculate_composite_check_char(prefix)


@pytest.fixture
def known_valid_codes():
    """Fixture providing hand-verified valid codes."""
    return list(KNOWN_VALID_CODES)


@pytest.fixture
def generated_codes():
    """Fixture providing valid-by-construction codes from a fixed seed."""
    rng = random.Random(20151001)
    return [build_code(rng) for _ in range(50)]
