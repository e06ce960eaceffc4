"""Parsing of a single input line into a positive integer."""

from __future__ import annotations

import re

from cylinder_calc.core.domain.errors import MalformedInputError, NonPositiveValueError

# ASCII digits only: `int()` would also accept "1_000" and non-ASCII digits.
_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")

# Signed 32-bit range. Anything outside it is not an integer token.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def parse_positive_int(raw: str) -> int:
    """Parse `raw` as a strictly positive base-10 integer.

    Surrounding whitespace (line terminator included) is ignored.

    Raises:
        MalformedInputError: `raw` is not an integer token, or is outside
            the signed 32-bit range.
        NonPositiveValueError: the integer is zero or negative.
    """

    token = raw.strip()
    if not _INTEGER_TOKEN.fullmatch(token):
        raise MalformedInputError(raw)
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        raise MalformedInputError(raw)
    if value <= 0:
        raise NonPositiveValueError(raw, value)
    return value
