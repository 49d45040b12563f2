# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Registry construction options."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

DEFAULT_DELIMITER = '/'


@dataclass(frozen=True)
class RegistryOptions:
    """Options recorded when a registry is built.

    Only ``delimiter`` is interpreted (by tree stores). Any other entry
    is kept in ``extra`` and handed back untouched by ``as_dict()``.

    Example:
        >>> opts = RegistryOptions.from_mapping({'delimiter': '~', 'owner': 'me'})
        >>> opts.delimiter
        '~'
        >>> opts.extra['owner']
        'me'
    """

    delimiter: str = DEFAULT_DELIMITER
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or not self.delimiter:
            raise ValueError(f"delimiter must be a non-empty string, not {self.delimiter!r}")
        object.__setattr__(self, 'extra', MappingProxyType(dict(self.extra)))

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | RegistryOptions | None) -> RegistryOptions:
        """Build options from a plain mapping, an instance or None."""
        if options is None:
            return cls()
        if isinstance(options, RegistryOptions):
            return options
        extra = dict(options)
        delimiter = extra.pop('delimiter', DEFAULT_DELIMITER)
        return cls(delimiter=delimiter, extra=extra)

    def with_extra(self, **entries: Any) -> RegistryOptions:
        """Return a copy with ``entries`` merged into ``extra``."""
        return replace(self, extra={**self.extra, **entries})

    def get(self, name: str, default: Any = None) -> Any:
        if name == 'delimiter':
            return self.delimiter
        return self.extra.get(name, default)

    def as_dict(self) -> dict[str, Any]:
        return {'delimiter': self.delimiter, **self.extra}
