# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Registry - In-memory key/value registries with tree paths.

A lightweight, zero-dependency library providing flat and hierarchical
registries with a uniform get/set/delete/exists/is_empty surface,
raise-or-warn handling of missing keys, and middleware observers
dispatched during path resolution.
"""

__version__ = "0.1.0"

from .exceptions import (
    ComplexPathError,
    InvalidKeyError,
    InvalidScopeError,
    MissingKeyError,
    MissingKeyWarning,
    MissingPathError,
    RegistryError,
)
from .middleware import Event, Middleware, MiddlewareChain
from .missing import MissingAction, OnMissing
from .options import RegistryOptions
from .store import FlatStore, Registry, TreePathResolver, TreeStore, is_empty_value

__all__ = [
    # Core classes
    "Registry",
    "FlatStore",
    "TreeStore",
    "TreePathResolver",
    "RegistryOptions",
    "is_empty_value",
    # Middleware
    "Event",
    "Middleware",
    "MiddlewareChain",
    # Missing-key policy
    "OnMissing",
    "MissingAction",
    # Exceptions
    "RegistryError",
    "InvalidKeyError",
    "MissingKeyError",
    "MissingPathError",
    "ComplexPathError",
    "InvalidScopeError",
    "MissingKeyWarning",
]
