# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Registry - Abstract base class shared by flat and tree stores."""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Iterator, Mapping

from ..exceptions import InvalidKeyError, InvalidScopeError
from ..middleware import Middleware, MiddlewareChain
from ..missing import OnMissing
from ..options import RegistryOptions

logger = logging.getLogger(__name__)

Key = str | int
Scope = dict


class Registry(ABC):
    """Common surface of all registries.

    Holds the root scope, the construction options and the middleware
    chain, and implements the container protocol over the root scope
    (iteration yields keys in insertion order, len() counts top-level
    keys). Subclasses implement the key operations.
    """

    __slots__ = ('_scope', '_options', '_middleware')

    def __init__(
        self,
        scope: Scope | None = None,
        options: Mapping[str, Any] | RegistryOptions | None = None,
    ) -> None:
        """Initialize a registry.

        Args:
            scope: Initial dict, kept by reference. Defaults to a new dict.
            options: RegistryOptions, a plain mapping or None for defaults.
        """
        self._scope = self._check_scope({} if scope is None else scope)
        self._options = self._init_options(RegistryOptions.from_mapping(options))
        self._middleware = MiddlewareChain()

    def _init_options(self, options: RegistryOptions) -> RegistryOptions:
        return options

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._scope.keys())})"

    def __len__(self) -> int:
        return len(self._scope)

    def __iter__(self) -> Iterator[Key]:
        return iter(self._scope)

    def __contains__(self, key: Any) -> bool:
        try:
            return self.exists(key)
        except InvalidKeyError:
            return False

    def items(self) -> Iterator[tuple[Key, Any]]:
        """Iterate over top-level (key, value) pairs."""
        return iter(self._scope.items())

    # ==================== Options & Middleware ====================

    @property
    def options(self) -> RegistryOptions:
        """Options the registry was built with."""
        return self._options

    def add_middleware(self, middleware: Middleware) -> None:
        self._middleware.register(middleware)

    # ==================== Validation ====================

    @staticmethod
    def _validate_key(key: Any, none_allowed: bool = False) -> None:
        """Raise InvalidKeyError unless key is a str or an int.

        bool is rejected even though it subclasses int.
        """
        if key is None and none_allowed:
            return
        if isinstance(key, bool) or not isinstance(key, (str, int)):
            raise InvalidKeyError(key)

    @staticmethod
    def _check_scope(scope: Any) -> Scope:
        if not isinstance(scope, dict):
            raise InvalidScopeError(
                f"scope must be a dict, not {type(scope).__name__}"
            )
        return scope

    # ==================== Operations ====================

    @abstractmethod
    def set(self, key: Key, value: Any) -> None:
        """Set value at key."""

    @abstractmethod
    def exists(self, key: Key) -> bool:
        """True if key is present, whatever its value."""

    @abstractmethod
    def is_empty(self, key: Key) -> bool:
        """True if key is absent or holds an empty value."""

    @abstractmethod
    def get(
        self,
        key: Key | None = None,
        default: Any = None,
        on_missing: OnMissing | None = OnMissing.RAISE,
    ) -> Any:
        """Value at key, the whole scope if key is None."""

    @abstractmethod
    def delete(self, key: Key) -> None:
        """Remove key; absent keys are ignored."""

    @abstractmethod
    def get_branch(
        self,
        key: Key,
        options: Mapping[str, Any] | RegistryOptions | None = None,
    ) -> Registry:
        """New registry of the same class seeded with a copy of the value at key."""

    def _new_branch(
        self,
        value: Any,
        key: Key,
        options: Mapping[str, Any] | RegistryOptions | None,
    ) -> Registry:
        if not isinstance(value, dict):
            raise InvalidScopeError(
                f"Value at '{key}' is {type(value).__name__}, not a dict"
            )
        return type(self)(
            copy.deepcopy(value),
            self._options if options is None else options,
        )

    def override(self, scope: Scope) -> None:
        """Replace the whole root scope."""
        self._scope = self._check_scope(scope)
        logger.debug("%s scope overridden with %d keys", type(self).__name__, len(scope))
