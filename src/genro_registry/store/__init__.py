# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Store package - flat and tree registries.

The package is organized into:
- base: Registry ABC with options, middleware and the container protocol
- flat: FlatStore over a single dict
- resolver: TreePathResolver walking delimited paths
- tree: TreeStore composing the resolver with FlatStore operations

Example:
    >>> from genro_registry import TreeStore
    >>> store = TreeStore()
    >>> store.set('config/name', 'MyApp')
    >>> store.get('config/name')
    'MyApp'
"""

from .base import Registry
from .flat import FlatStore, is_empty_value
from .resolver import Resolution, TreePathResolver
from .tree import TreeStore

__all__ = [
    "Registry",
    "FlatStore",
    "TreeStore",
    "TreePathResolver",
    "Resolution",
    "is_empty_value",
]
