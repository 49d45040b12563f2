# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreePathResolver - walks delimited paths through nested dicts.

Resolution turns ``'a/b/c'`` into the dict stored at ``a/b`` and the
terminal key ``'c'``. Paths are resolved from the root on every call;
nothing is cached between calls.

Per intermediate segment the resolver:

1. checks the segment holds a dict. If not:
   - create mode replaces/inserts an empty dict;
   - an absent (or None-valued) last intermediate segment is a soft
     miss (returns None);
   - an absent (or None-valued) earlier segment raises MissingPathError;
   - a present non-dict value raises ComplexPathError;
2. dispatches ``Event.SET_SCOPE`` with a fresh envelope;
3. descends into the nested dict by reference, so writes below are
   visible from the root.
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

from ..exceptions import ComplexPathError, MissingPathError
from ..middleware import Event, MiddlewareChain
from .base import Key, Scope
from .flat import FlatStore

logger = logging.getLogger(__name__)


class Resolution(NamedTuple):
    """Scope holding the terminal key, and the terminal key itself."""

    scope: Scope
    key: Key


class TreePathResolver:
    """Resolve delimited paths against a root dict."""

    __slots__ = ('delimiter', '_middleware')

    def __init__(self, delimiter: str, middleware: MiddlewareChain) -> None:
        self.delimiter = delimiter
        self._middleware = middleware

    def __repr__(self) -> str:
        return f"TreePathResolver(delimiter={self.delimiter!r})"

    def is_complex(self, key: Any) -> bool:
        return isinstance(key, str) and self.delimiter in key

    def resolve(self, root: Scope, key: Key, create: bool = False) -> Resolution | None:
        """Find the scope holding the terminal segment of ``key``.

        Args:
            root: The root dict of the store.
            key: Flat key or delimited path.
            create: If True, missing or non-dict intermediate segments are
                replaced by empty dicts.

        Returns:
            Resolution(scope, terminal_key), or None if the last
            intermediate segment is absent and create is False.

        Raises:
            MissingPathError: If an earlier intermediate segment is absent.
            ComplexPathError: If an intermediate segment holds a non-dict.
        """
        if not self.is_complex(key):
            return Resolution(root, key)

        *segments, terminal = key.split(self.delimiter)
        last_index = len(segments) - 1
        scope = root

        for index, segment in enumerate(segments):
            current = scope.get(segment)
            if not isinstance(current, dict):
                if create:
                    logger.debug("Creating scope '%s' for path '%s'", segment, key)
                    scope[segment] = {}
                elif current is None:
                    # absent and None-valued segments are both misses
                    if index == last_index:
                        return None
                    raise MissingPathError(key, segment)
                else:
                    raise ComplexPathError(key, segment)

            self._middleware.dispatch(
                Event.SET_SCOPE, FlatStore({'key': segment, 'scope': scope})
            )
            nested = scope.get(segment)
            if not isinstance(nested, dict):
                # a handler removed or replaced the segment
                raise ComplexPathError(key, segment)
            scope = nested

        return Resolution(scope, terminal)
