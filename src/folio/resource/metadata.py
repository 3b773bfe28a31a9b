"""Resource metadata with lazily resolved defaults."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from folio.exceptions import TypeMismatchError

DefaultResolver = Callable[[str], Any]


class MetadataMap(dict[str, Any]):
    """Ordered mapping of explicit metadata backed by a default resolver.

    Lookups of keys that were never assigned are answered by the resolver,
    which is called on every such lookup and never stored. Membership tests,
    iteration and serialisation only see the keys that were set explicitly.

    >>> meta = MetadataMap({"title": "Hello"}, resolver=lambda key: f"default {key}")
    >>> meta["layout"]
    'default layout'
    >>> "layout" in meta
    False
    """

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        *,
        resolver: DefaultResolver | None = None,
        owner: str | None = None,
    ) -> None:
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise TypeMismatchError(owner or type(self).__name__, type(data).__name__)
        super().__init__(data)
        self.resolver = resolver

    def __missing__(self, key: str) -> Any:
        return self.resolve_default(key)

    def get(self, key: str, default: Any = None) -> Any:
        if key in self:
            return self[key]
        value = self.resolve_default(key)
        return default if value is None else value

    def resolve_default(self, key: str) -> Any:
        if self.resolver is None:
            return None
        return self.resolver(key)

    def explicit(self) -> dict[str, Any]:
        """Return a plain ``dict`` copy of the explicitly assigned keys."""
        return dict(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"
