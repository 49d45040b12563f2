# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeStore - registry addressing nested dicts through delimited paths.

Example:
    >>> store = TreeStore({
    ...     'key_1': 'value_1',
    ...     'key_2': {'key_2_1': 'value_2_1', 'key_2_2': 'value_2_2'},
    ... })
    >>> store.get('key_2/key_2_2')
    'value_2_2'
    >>> store.exists('key_2/key_2_3')
    False
    >>> store.set('key_3/key_3_1', 'x')
    >>> store.get('key_3')
    {'key_3_1': 'x'}

Keys without the delimiter behave exactly as in FlatStore, and integer
keys never contain it.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..exceptions import ComplexPathError, MissingPathError
from ..missing import OnMissing
from ..options import RegistryOptions
from .base import Key, Registry, Scope
from .flat import FlatStore
from .resolver import Resolution, TreePathResolver


class TreeStore(Registry):
    """Registry over nested dicts.

    Every operation resolves the path first (``set`` creating missing
    levels, the others never creating anything) and then applies the
    FlatStore operation to the terminal key in the resolved dict.

    The options always carry ``tree_like=True`` in their extras.
    """

    __slots__ = ('_resolver',)

    def __init__(
        self,
        scope: Scope | None = None,
        options: Mapping[str, Any] | RegistryOptions | None = None,
    ) -> None:
        """Initialize a TreeStore.

        Args:
            scope: Initial nested dict, kept by reference.
            options: RegistryOptions or mapping; ``delimiter`` defaults to '/'.
        """
        super().__init__(scope, options)
        self._resolver = TreePathResolver(self._options.delimiter, self._middleware)

    def _init_options(self, options: RegistryOptions) -> RegistryOptions:
        return options.with_extra(tree_like=True)

    @property
    def delimiter(self) -> str:
        return self._resolver.delimiter

    def _lookup(self, key: Key) -> Resolution | None:
        """Resolve without creating; any resolution failure is a miss."""
        try:
            return self._resolver.resolve(self._scope, key)
        except (MissingPathError, ComplexPathError):
            return None

    def set(self, key: Key, value: Any) -> None:
        self._validate_key(key)
        scope, terminal = self._resolver.resolve(self._scope, key, create=True)
        FlatStore(scope).set(terminal, value)

    def exists(self, key: Key) -> bool:
        self._validate_key(key)
        resolution = self._lookup(key)
        if resolution is None:
            return False
        return FlatStore(resolution.scope).exists(resolution.key)

    def is_empty(self, key: Key) -> bool:
        self._validate_key(key)
        resolution = self._lookup(key)
        if resolution is None:
            return True
        return FlatStore(resolution.scope).is_empty(resolution.key)

    def get(
        self,
        key: Key | None = None,
        default: Any = None,
        on_missing: OnMissing | None = OnMissing.RAISE,
    ) -> Any:
        """Get the value at a path.

        Behaves like FlatStore.get(), but a missing key is reported with
        the full path (``Missing key 'a/b/c'``) whichever level was
        missing. A path crossing a non-dict value raises ComplexPathError
        regardless of ``on_missing``.
        """
        self._validate_key(key, none_allowed=True)
        if key is None:
            return self._scope
        policy = OnMissing.coerce(on_missing)
        try:
            resolution = self._resolver.resolve(self._scope, key)
        except MissingPathError:
            resolution = None
        if resolution is not None:
            view = FlatStore(resolution.scope)
            if view.exists(resolution.key):
                return view.get(resolution.key)
        if default is not None:
            return default
        policy.handle(key)
        return None

    def delete(self, key: Key) -> None:
        self._validate_key(key)
        try:
            resolution = self._resolver.resolve(self._scope, key)
        except MissingPathError:
            return
        if resolution is not None:
            FlatStore(resolution.scope).delete(resolution.key)

    def get_branch(
        self,
        key: Key,
        options: Mapping[str, Any] | RegistryOptions | None = None,
    ) -> TreeStore:
        """New TreeStore seeded with a copy of the dict at ``key``.

        The branch inherits this store's options (and delimiter) unless
        ``options`` is given.
        """
        self._validate_key(key)
        return self._new_branch(self.get(key), key, options)
