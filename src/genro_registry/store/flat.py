# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""FlatStore - key/value registry over a single namespace.

Example:
    >>> store = FlatStore({'key_1': 'value_1', 'zero': '0'})
    >>> store.exists('key_1')
    True
    >>> store.is_empty('zero')
    True
    >>> store.get('key_3', 'default value')
    'default value'
    >>> store.get('key_3', on_missing=OnMissing.SILENT) is None
    True
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Any, Mapping

from ..missing import OnMissing
from ..options import RegistryOptions
from .base import Key, Registry


def is_empty_value(value: Any) -> bool:
    """Emptiness test used by is_empty().

    Empty values are None, False, '', '0', numeric zero and any sized
    container of length 0. Everything else, including 'false', ' ' and
    '0.0', is not empty.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == '' or value == '0'
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    return False


class FlatStore(Registry):
    """Registry over a flat dict; keys are used as-is."""

    __slots__ = ()

    def set(self, key: Key, value: Any) -> None:
        """Set value at key, replacing any previous value.

        Args:
            key: String or integer key.
            value: Any value, None and empty values included.

        Raises:
            InvalidKeyError: If key is not a str or int.
        """
        self._validate_key(key)
        self._scope[key] = value

    def exists(self, key: Key) -> bool:
        """Check whether key is present.

        Args:
            key: String or integer key.

        Returns:
            True if key is present, even when its value is None.
        """
        self._validate_key(key)
        return key in self._scope

    def is_empty(self, key: Key) -> bool:
        """Check whether key is absent or holds an empty value.

        See is_empty_value() for what counts as empty.

        Args:
            key: String or integer key.

        Returns:
            True if key is absent or its value is empty.
        """
        self._validate_key(key)
        return is_empty_value(self._scope.get(key))

    def get(
        self,
        key: Key | None = None,
        default: Any = None,
        on_missing: OnMissing | None = OnMissing.RAISE,
    ) -> Any:
        """Get the value at key.

        Args:
            key: Key to look up. If None, the whole scope is returned.
            default: Returned when key is absent, unless None.
            on_missing: Policy applied when key is absent and default is
                None: raise (default), warn and return None, or return
                None silently. None/False also mean silent.

        Returns:
            The stored value (even if None or empty), the default, or None.

        Raises:
            InvalidKeyError: If key is not a str, int or None.
            MissingKeyError: If key is absent, default is None and the
                policy raises (or the policy's own error kind).
        """
        self._validate_key(key, none_allowed=True)
        if key is None:
            return self._scope
        if key in self._scope:
            return self._scope[key]
        if default is not None:
            return default
        OnMissing.coerce(on_missing).handle(key)
        return None

    def delete(self, key: Key) -> None:
        """Remove key. Absent keys are ignored.

        Args:
            key: String or integer key.
        """
        self._validate_key(key)
        self._scope.pop(key, None)

    def get_branch(
        self,
        key: Key,
        options: Mapping[str, Any] | RegistryOptions | None = None,
    ) -> FlatStore:
        """New FlatStore seeded with a deep copy of the dict at key.

        Args:
            key: Key holding a dict.
            options: Options for the branch; defaults to this store's.

        Raises:
            MissingKeyError: If key is absent.
            InvalidScopeError: If the value is not a dict.
        """
        self._validate_key(key)
        return self._new_branch(self.get(key), key, options)
