# SPDX-License-Identifier: MIT
"""Parsing and ordering of ``major.minor.patch[-tag]`` versions.

Example:
    >>> from tagver import parse, compare_versions
    >>>
    >>> version = parse("1.2.3-alpha1")
    >>> version.tag
    'alpha1'
    >>> parse("1.2.3") < version
    True
    >>> parse("1.2.3 abc") is None
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

__version__ = "0.1.0"

from .errors import InvalidVersionError
from .reader import EOF, CharReader
from .version import MAX_COMPONENT, Version
from .parser import (
    parse,
    parse_reader,
    parse_version,
    is_valid_version,
)
from .compare import (
    compare_versions,
    version_key,
)

__all__ = [
    # Values
    "Version",
    "MAX_COMPONENT",
    # Character source
    "CharReader",
    "EOF",
    # Parsing
    "parse",
    "parse_reader",
    "parse_version",
    "is_valid_version",
    "InvalidVersionError",
    # Comparison
    "compare_versions",
    "version_key",
]
