# SPDX-License-Identifier: MIT
"""Semantic version value type.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1
- Build metadata: +build, +build.123, +master.c34fede

Pre-release and build are independent: a version may carry either, both,
or neither.
"""

from __future__ import annotations

import dataclasses
import logging
import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .precedence import compare_core, compare_prerelease, prerelease_key

logger = logging.getLogger(__name__)

# Grammar accepted by default: only the dot/hyphen/plus structure and the
# identifier character set are checked.
SEMVER_PATTERN = re.compile(
    r"^(?P<major>[0-9]+)"
    r"\.(?P<minor>[0-9]+)"
    r"\.(?P<patch>[0-9]+)"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<buildmetadata>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)

# SemVer 2.0.0 regex, additionally rejecting leading zeros
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
STRICT_SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


class SemverFormatError(ValueError):
    """Raised for text that is not a semantic version or an unknown format token."""

    def __init__(self, value: object, message: str = ""):
        self.value = value
        self.message = message or f"Invalid semantic version: {value}"
        super().__init__(self.message)


class SemverFormat(str, Enum):
    """Textual renderings of a :class:`Semver`."""

    FULL = "F"
    VERSION = "V"
    PRERELEASE = "P"

    @classmethod
    def coerce(cls, fmt: Union["SemverFormat", str, None]) -> "SemverFormat":
        """Resolve a format token, defaulting to FULL for ``None`` or ``""``.

        Raises:
            SemverFormatError: If the token is not one of F, V or P
        """
        if fmt is None or fmt == "":
            return cls.FULL
        if isinstance(fmt, cls):
            return fmt
        try:
            return cls(fmt)
        except ValueError:
            raise SemverFormatError(fmt, f"Unknown version format: {fmt!r}") from None


def _pattern(strict: bool) -> re.Pattern[str]:
    return STRICT_SEMVER_PATTERN if strict else SEMVER_PATTERN


def _core_number(digits: str) -> Optional[int]:
    """Convert a MAJOR/MINOR/PATCH digit run, or None if int() would refuse it."""
    significant = digits.lstrip("0") or "0"
    limit = sys.get_int_max_str_digits()
    if limit and len(significant) > limit:
        return None
    return int(significant)


def _rejected(value: object, strict: bool, message: str = "") -> SemverFormatError:
    error = SemverFormatError(value, message)
    logger.debug("Rejected version string %r (strict=%s): %s", value, strict, error.message)
    return error


def _decompose(version_string: str, strict: bool) -> Optional[tuple[int, int, int, str, str]]:
    """Split a stripped version string into its components, or None if invalid."""
    match = _pattern(strict).match(version_string)
    if not match:
        return None

    core = [_core_number(match.group(name)) for name in ("major", "minor", "patch")]
    if None in core:
        return None

    major, minor, patch = core
    return (
        major,
        minor,
        patch,
        match.group("prerelease") or "",
        match.group("buildmetadata") or "",
    )


def _check_component(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Semver:
    """An immutable semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., "alpha.1", "beta", "rc.2"),
            empty when absent
        build: Build metadata (e.g., "build.123", "master.c34fede"), empty
            when absent. Never part of ordering, equality or hashing.
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build: str = ""

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            _check_component(name, getattr(self, name))
        for name in ("prerelease", "build"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"{name} must be a str, got {type(value).__name__}")

    @classmethod
    def parse(cls, version_string: str, *, strict: bool = False) -> "Semver":
        """Parse ``version_string``; see :func:`parse_version`."""
        return parse_version(version_string, strict=strict)

    @staticmethod
    def is_valid(version_string: str, *, strict: bool = False) -> bool:
        """Check ``version_string`` without raising; see :func:`is_valid_semver`."""
        return is_valid_semver(version_string, strict=strict)

    def to_string(self, fmt: Union[SemverFormat, str, None] = None) -> str:
        """Render the version.

        Args:
            fmt: ``"F"`` (default) for the full version, ``"V"`` for
                MAJOR.MINOR.PATCH only, ``"P"`` for the version with its
                pre-release but without build metadata

        Raises:
            SemverFormatError: If ``fmt`` is not a recognized token
        """
        mode = SemverFormat.coerce(fmt)

        text = f"{self.major}.{self.minor}.{self.patch}"
        if mode is SemverFormat.VERSION:
            return text
        if self.prerelease:
            text += f"-{self.prerelease}"
        if mode is SemverFormat.FULL and self.build:
            text += f"+{self.build}"
        return text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec)

    @property
    def version(self) -> str:
        """MAJOR.MINOR.PATCH without pre-release or build metadata."""
        return self.to_string(SemverFormat.VERSION)

    @property
    def full_version(self) -> str:
        return self.to_string(SemverFormat.FULL)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def override_build(self, new_build: str) -> "Semver":
        """Return a copy of this version with its build metadata replaced."""
        return dataclasses.replace(self, build=new_build)

    def compare_to(self, other: "Semver") -> int:
        """Compare by SemVer precedence.

        Returns:
            -1 if self < other
            0 if self and other have equal precedence
            1 if self > other
        """
        result = compare_core(
            (self.major, self.minor, self.patch),
            (other.major, other.minor, other.patch),
        )
        if result:
            return result
        return compare_prerelease(self.prerelease, other.prerelease)

    def equals(self, other: object) -> bool:
        """Return True when ``other`` is a Semver of equal precedence."""
        if not isinstance(other, Semver):
            return False
        return self.compare_to(other) == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Semver):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: "Semver") -> bool:
        if not isinstance(other, Semver):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "Semver") -> bool:
        if not isinstance(other, Semver):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "Semver") -> bool:
        if not isinstance(other, Semver):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "Semver") -> bool:
        if not isinstance(other, Semver):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, prerelease_key(self.prerelease)))


def parse_version(version_string: str, *, strict: bool = False) -> Semver:
    """Parse a semantic version string into a Semver object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])
        strict: Also reject leading zeros in numeric parts, as
            SemVer 2.0.0 requires

    Returns:
        A Semver object with parsed components

    Raises:
        SemverFormatError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Semver('1.2.3')

        >>> parse_version("1.2.3-beta.2").prerelease
        'beta.2'

        >>> parse_version("1.2.3+master.c34fede").build
        'master.c34fede'
    """
    if not isinstance(version_string, str):
        raise _rejected(
            version_string, strict, f"Version must be a string, got {type(version_string).__name__}"
        )

    version_string = version_string.strip()
    if not version_string:
        raise _rejected(version_string, strict, "Version string cannot be empty")

    parts = _decompose(version_string, strict)
    if parts is None:
        raise _rejected(version_string, strict)

    return Semver(*parts)


def is_valid_semver(version_string: str, *, strict: bool = False) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate
        strict: Apply the leading-zero rules of :func:`parse_version`

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.2.3-pre+build")
        True
        >>> is_valid_semver("1.2-foo")
        False
        >>> is_valid_semver("foobar")
        False
    """
    if not isinstance(version_string, str):
        return False
    return _decompose(version_string.strip(), strict) is not None


def try_parse_version(version_string: str, *, strict: bool = False) -> Optional[Semver]:
    """Parse ``version_string``, returning None instead of raising."""
    if not is_valid_semver(version_string, strict=strict):
        return None
    return parse_version(version_string, strict=strict)
