# SPDX-License-Identifier: MIT
"""SemVer precedence rules shared by comparison, equality and hashing.

Build metadata never reaches this module: only the core numbers and the
pre-release string take part in precedence.
"""

from __future__ import annotations

import re

_NUMERIC_IDENTIFIER = re.compile(r"[0-9]+")


def _is_numeric(identifier: str) -> bool:
    return _NUMERIC_IDENTIFIER.fullmatch(identifier) is not None


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _numeric_key(identifier: str) -> tuple[int, str]:
    # (length, digits) orders like int(), which is capped by
    # sys.get_int_max_str_digits().
    digits = identifier.lstrip("0") or "0"
    return (len(digits), digits)


def compare_identifiers(left: str, right: str) -> int:
    """Compare two dot-separated pre-release identifiers.

    Numeric identifiers compare by numeric value and always sort below
    alphanumeric ones. Alphanumeric identifiers compare case-insensitively.
    """
    left_numeric = _is_numeric(left)
    right_numeric = _is_numeric(right)

    if left_numeric and right_numeric:
        left_key = _numeric_key(left)
        right_key = _numeric_key(right)
        return (left_key > right_key) - (left_key < right_key)
    if left_numeric:
        return -1
    if right_numeric:
        return 1

    left_folded = left.lower()
    right_folded = right.lower()
    if left_folded == right_folded:
        return 0
    return -1 if left_folded < right_folded else 1


def compare_prerelease(pre1: str, pre2: str) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    An empty string means "no pre-release", which has higher precedence
    than any pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1
    if not pre2:
        return -1

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        result = compare_identifiers(p1, p2)
        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    return _sign(len(parts1) - len(parts2))


def compare_core(core1: tuple[int, int, int], core2: tuple[int, int, int]) -> int:
    """Compare (major, minor, patch) triples component by component."""
    for val1, val2 in zip(core1, core2):
        if val1 != val2:
            return -1 if val1 < val2 else 1
    return 0


def prerelease_key(prerelease: str) -> tuple:
    """Return a sort key for a pre-release string.

    The key orders exactly like :func:`compare_prerelease`: no pre-release
    becomes ``(1,)`` so it sorts after every ``(0, ...)`` pre-release key, and
    numeric identifiers are tagged ``0`` so they sort below alphanumeric ones.
    """
    if not prerelease:
        return (1,)

    parts = []
    for part in prerelease.split("."):
        if _is_numeric(part):
            parts.append((0, *_numeric_key(part)))
        else:
            parts.append((1, part.lower()))
    return (0, tuple(parts))
