"""String conversion helpers that never raise."""

import re

_UNSIGNED_INT = re.compile(r"\+?([0-9]+)")

# Values must fit a signed 32-bit integer
INT_MAX = 2**31 - 1


def string_to_int(value: str) -> int:
    """Convert ``value`` to int; return 0 if it is empty or not convertible.

    Accepts digits with an optional leading plus sign. Values too large for a
    signed 32-bit integer also yield 0.
    """
    if not isinstance(value, str):
        return 0
    match = _UNSIGNED_INT.fullmatch(value)
    if match is None:
        return 0
    number = int(match.group(1))
    return number if number <= INT_MAX else 0
