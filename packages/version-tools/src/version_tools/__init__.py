# SPDX-License-Identifier: MIT
"""Semantic version parsing, formatting and comparison.

This package provides an immutable SemVer value type with parsing,
formatting and precedence ordering following the SemVer 2.0.0 specification.

Example:
    >>> from version_tools import Semver, compare_versions, is_valid_semver
    >>>
    >>> version = Semver.parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>> version.to_string("P")
    '1.2.3-alpha.1'
    >>>
    >>> is_valid_semver("1.0.0")
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

__version__ = "0.1.0"

from .semver import (
    Semver,
    SemverFormat,
    SemverFormatError,
    parse_version,
    try_parse_version,
    is_valid_semver,
    SEMVER_PATTERN,
    STRICT_SEMVER_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
)

__all__ = [
    # Value type
    "Semver",
    "SemverFormat",
    "SemverFormatError",
    # Version parsing
    "parse_version",
    "try_parse_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    "STRICT_SEMVER_PATTERN",
    # Version comparison
    "compare_versions",
    "version_key",
]
