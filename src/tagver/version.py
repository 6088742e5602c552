# SPDX-License-Identifier: MIT
"""The parsed version value and its ordering.

Versions order by ``major``, ``minor`` and ``patch`` numerically. With an
equal numeric triple, an untagged version sorts before a tagged one and two
tags compare as plain strings::

    1.2.3 < 1.2.3-alpha1 < 1.2.3-alpha2
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Largest value a numeric component may hold (unsigned 64-bit)
MAX_COMPONENT = 2**64 - 1


@dataclass(frozen=True, slots=True)
class Version:
    """A parsed ``major.minor.patch[-tag]`` version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        tag: Optional pre-release tag following ``-`` (e.g. "alpha1")
    """

    major: int
    minor: int
    patch: int
    tag: Optional[str] = None

    @property
    def is_prerelease(self) -> bool:
        """Return True if the version carries a tag."""
        return self.tag is not None

    @property
    def release(self) -> tuple[int, int, int]:
        """Return the numeric ``(major, minor, patch)`` triple."""
        return (self.major, self.minor, self.patch)

    def compare(self, other: Version) -> int:
        """Three-way compare against another version.

        Returns:
            -1 if self < other
            0 if self == other
            1 if self > other
        """
        for attr in ("major", "minor", "patch"):
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1

        if self.tag is None and other.tag is None:
            return 0
        if self.tag is None:
            return -1
        if other.tag is None:
            return 1
        if self.tag != other.tag:
            return -1 if self.tag < other.tag else 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0
