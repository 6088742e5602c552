# SPDX-License-Identifier: MIT
"""Exceptions raised by the strict version helpers."""


class InvalidVersionError(Exception):
    """Raised when a string is not a ``major.minor.patch[-tag]`` version."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version!r}"
        super().__init__(self.message)
