# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Missing-key policies for get().

A policy decides what get() does when a key is absent and no default was
passed: raise an error, emit a warning and return None, or return None
silently.

Example:
    >>> store.get('nope')                           # raises MissingKeyError
    >>> store.get('nope', on_missing=OnMissing.WARN)  # MissingKeyWarning, None
    >>> store.get('nope', on_missing=OnMissing.SILENT)  # None
    >>> store.get('nope', on_missing=OnMissing.raise_(RuntimeError))
"""

from __future__ import annotations

import warnings
from enum import Enum
from typing import Any

from .exceptions import MissingKeyError, MissingKeyWarning, missing_key_message


class MissingAction(Enum):
    """What a policy does about a missing key."""

    RAISE = 'raise'
    WARN = 'warn'
    SILENT = 'silent'


class OnMissing:
    """Missing-key policy passed as ``on_missing`` to get().

    Build policies with the class constants ``RAISE``, ``WARN`` and
    ``SILENT``, or with ``raise_()`` / ``warn()`` to pick the error kind
    or warning category.
    """

    __slots__ = ('action', 'category')

    RAISE: OnMissing
    WARN: OnMissing
    SILENT: OnMissing

    def __init__(
        self,
        action: MissingAction,
        category: type[BaseException] | None = None,
    ) -> None:
        self.action = action
        self.category = category

    @classmethod
    def raise_(cls, error: type[Exception] = MissingKeyError) -> OnMissing:
        """Policy raising ``error`` with the missing-key message."""
        if not (isinstance(error, type) and issubclass(error, Exception)):
            raise TypeError(f"error must be an Exception subclass, not {error!r}")
        return cls(MissingAction.RAISE, error)

    @classmethod
    def warn(cls, category: type[Warning] = MissingKeyWarning) -> OnMissing:
        """Policy emitting a ``category`` warning and returning None."""
        if not (isinstance(category, type) and issubclass(category, Warning)):
            raise TypeError(f"category must be a Warning subclass, not {category!r}")
        return cls(MissingAction.WARN, category)

    @classmethod
    def coerce(cls, value: OnMissing | None | bool) -> OnMissing:
        """Normalize an ``on_missing`` argument; falsy values mean silent."""
        if isinstance(value, OnMissing):
            return value
        if not value:
            return cls.SILENT
        raise TypeError(
            f"on_missing must be an OnMissing policy, not {type(value).__name__}"
        )

    def handle(self, key: Any, stacklevel: int = 3) -> None:
        """Apply the policy to ``key``; returns only if it does not raise."""
        if self.action is MissingAction.RAISE:
            if issubclass(self.category, MissingKeyError):
                raise self.category(key)
            raise self.category(missing_key_message(key))
        if self.action is MissingAction.WARN:
            warnings.warn(missing_key_message(key), self.category, stacklevel=stacklevel)

    def __repr__(self) -> str:
        if self.category is None:
            return f"OnMissing({self.action.name})"
        return f"OnMissing({self.action.name}, {self.category.__name__})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OnMissing):
            return NotImplemented
        return self.action is other.action and self.category is other.category

    def __hash__(self) -> int:
        return hash((self.action, self.category))


OnMissing.RAISE = OnMissing.raise_()
OnMissing.WARN = OnMissing.warn()
OnMissing.SILENT = OnMissing(MissingAction.SILENT)
