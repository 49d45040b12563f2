# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Middleware observers invoked during tree path resolution.

A middleware is an object registered on a registry whose handler methods
are called at lifecycle events. The only event today is ``SET_SCOPE``,
dispatched once per intermediate path segment before the resolver
descends into it. Handlers receive an envelope: a FlatStore holding
``key`` (the segment) and ``scope`` (the dict being descended from).

Example:
    >>> class Audit(Middleware):
    ...     def set_scope(self, envelope):
    ...         with self.disabled():
    ...             self.registry.set('audit/last', envelope.get('key'))
    ...
    >>> store.add_middleware(Audit(store))
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from enum import Enum
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from .store.base import Registry
    from .store.flat import FlatStore

logger = logging.getLogger(__name__)


class Event(Enum):
    """Lifecycle events; the value names the handler method."""

    SET_SCOPE = 'set_scope'

    @classmethod
    def from_qualified(cls, name: str) -> Event:
        """Map ``'Component::set_scope'`` (or a bare name) to an event."""
        return cls(name.rsplit('::', 1)[-1])


class Middleware:
    """Base class for registry observers.

    Subclasses override the handlers they care about; the others are
    no-ops. An observer that writes back into the registry it observes
    should do so inside ``disabled()`` (or between ``handle(False)`` and
    ``handle(True)``) so the write does not dispatch to itself again.
    """

    def __init__(self, registry: Registry) -> None:
        self.registry = registry
        self._enabled = True

    @property
    def enabled(self) -> bool:
        return self._enabled

    def handle(self, flag: bool) -> None:
        """Enable or disable handler calls."""
        self._enabled = bool(flag)

    @contextmanager
    def disabled(self) -> Iterator[None]:
        """Suppress handler calls for the duration of the block."""
        previous = self._enabled
        self._enabled = False
        try:
            yield
        finally:
            self._enabled = previous

    def process(self, event: Event, envelope: FlatStore) -> None:
        """Call the handler for ``event`` if enabled."""
        if not self._enabled:
            return
        handler = getattr(self, event.value, None)
        if callable(handler):
            handler(envelope)

    def set_scope(self, envelope: FlatStore) -> None:
        """Called before descending into an intermediate segment."""
        pass


class MiddlewareChain:
    """Ordered list of middleware observers."""

    __slots__ = ('_observers',)

    def __init__(self) -> None:
        self._observers: list[Middleware] = []

    def __len__(self) -> int:
        return len(self._observers)

    def __iter__(self) -> Iterator[Middleware]:
        return iter(self._observers)

    def __repr__(self) -> str:
        names = [type(observer).__name__ for observer in self._observers]
        return f"MiddlewareChain({names})"

    def register(self, observer: Middleware) -> None:
        if not isinstance(observer, Middleware):
            raise TypeError(
                f"observer must be a Middleware, not {type(observer).__name__}"
            )
        self._observers.append(observer)
        logger.debug("Registered middleware %s", type(observer).__name__)

    def dispatch(self, event: Event, envelope: FlatStore) -> None:
        """Invoke ``event`` on every observer in registration order."""
        for observer in self._observers:
            observer.process(event, envelope)
