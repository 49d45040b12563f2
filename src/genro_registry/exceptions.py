# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Registry exceptions and warnings."""

from __future__ import annotations

from typing import Any


class RegistryError(Exception):
    """Base exception for registry errors."""

    pass


class InvalidKeyError(RegistryError, TypeError):
    """Raised when a key is neither a string nor an integer."""

    def __init__(self, key: Any = None) -> None:
        super().__init__("Invalid key passed")
        self.key = key


class MissingKeyError(RegistryError, LookupError):
    """Raised by get() when a key is absent and no default was given.

    The message quotes the key as the caller passed it, so for tree
    stores it is the full delimited path, not the terminal segment.
    """

    def __init__(self, key: Any) -> None:
        super().__init__(missing_key_message(key))
        self.key = key


class MissingPathError(MissingKeyError):
    """Raised when an intermediate path segment does not exist."""

    def __init__(self, key: Any, segment: str | None = None) -> None:
        super().__init__(key)
        self.segment = segment


class ComplexPathError(RegistryError):
    """Raised when an intermediate path segment is not a nested scope."""

    def __init__(self, path: str, segment: str) -> None:
        super().__init__(
            f"Complex path segment '{segment}' of '{path}' is not a nested container"
        )
        self.path = path
        self.segment = segment


class InvalidScopeError(RegistryError, TypeError):
    """Raised when a scope (or branch value) is not a dict."""

    pass


class MissingKeyWarning(UserWarning):
    """Emitted instead of MissingKeyError when the caller asks to warn."""

    pass


def missing_key_message(key: Any) -> str:
    return f"Missing key '{key}'"
