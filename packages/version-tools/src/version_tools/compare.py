# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Numeric pre-release identifiers sort below alphanumeric ones, alphanumeric
identifiers compare case-insensitively, and a release sorts above all of
its pre-releases. Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import Union

from .precedence import prerelease_key
from .semver import Semver, parse_version


def _coerce(version: Union[str, Semver]) -> Semver:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Semver], version2: Union[str, Semver]) -> int:
    """Compare two semantic versions by SemVer precedence.

    Args:
        version1: First version (string or Semver object)
        version2: Second version (string or Semver object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        SemverFormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.2.3+fuu", "1.2.3+bar")
        0
        >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
        1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    return _coerce(version1).compare_to(_coerce(version2))


def version_key(version: Union[str, Semver]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Keys order exactly like :meth:`Semver.compare_to`, so equal keys mean
    equal precedence.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)
    return (v.major, v.minor, v.patch, prerelease_key(v.prerelease))
