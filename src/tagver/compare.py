# SPDX-License-Identifier: MIT
"""Comparison helpers accepting version strings or Version objects.

Ordering matches :class:`~tagver.version.Version`: numeric triple first,
then an untagged version before a tagged one, then tags as plain strings.
"""

from __future__ import annotations

from typing import Union

from .parser import parse_version
from .version import Version


def _coerce(version: Union[str, Version]) -> Version:
    """Return a Version unchanged; parse anything else strictly, so non-strings raise."""
    return version if isinstance(version, Version) else parse_version(version)


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.2.3", "1.2.3-alpha1")
        -1
        >>> compare_versions("1.2.3-beta", "1.2.3-alpha")
        1
    """
    return _coerce(version1).compare(_coerce(version2))


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that sorts in the same order as the versions themselves

    Examples:
        >>> sorted(["1.2.3-alpha1", "2.0.0", "1.2.3"], key=version_key)
        ['1.2.3', '1.2.3-alpha1', '2.0.0']
    """
    v = _coerce(version)

    # Untagged becomes (0,) so it sorts before any (1, tag)
    if v.tag is None:
        tag_key: tuple = (0,)
    else:
        tag_key = (1, v.tag)

    return (v.major, v.minor, v.patch, tag_key)
