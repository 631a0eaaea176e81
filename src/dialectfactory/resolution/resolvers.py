"""
Ordered resolver chain mapping database metadata to dialects.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from ..dialects import MariaDBDialect, MySQLDialect, PostgresDialect, SQLiteDialect
from ..dialects.base import Dialect, Version
from .info import ResolutionInfo

DialectResolver = Callable[[ResolutionInfo], Optional[Dialect]]

NO_MATCH = None


class ResolverChain:
    """
    Resolvers consulted in registration order; the first non-``None`` result wins.

    Exceptions raised by a resolver are not caught: a broken resolver fails the
    whole resolution attempt instead of being skipped.
    """

    def __init__(self, resolvers: Iterable[DialectResolver] | None = None) -> None:
        self._resolvers: List[DialectResolver] = list(resolvers or ())

    def register(self, resolver: DialectResolver, *, first: bool = False) -> None:
        if first:
            self._resolvers.insert(0, resolver)
        else:
            self._resolvers.append(resolver)

    def unregister(self, resolver: DialectResolver) -> None:
        try:
            self._resolvers.remove(resolver)
        except ValueError:
            raise ValueError(f"Resolver {resolver!r} is not registered") from None

    def resolvers(self) -> Tuple[DialectResolver, ...]:
        return tuple(self._resolvers)

    def resolve(self, info: ResolutionInfo) -> Optional[Dialect]:
        for resolver in self._resolvers:
            dialect = resolver(info)
            if dialect is not None:
                return dialect
        return NO_MATCH

    def __call__(self, info: ResolutionInfo) -> Optional[Dialect]:
        return self.resolve(info)

    def __len__(self) -> int:
        return len(self._resolvers)

    def __iter__(self) -> Iterator[DialectResolver]:
        return iter(tuple(self._resolvers))


class DatabaseNameResolver:
    """
    Matches a product name (case-insensitive) within an optional version range.

    ``min_version`` is inclusive, ``max_version`` exclusive. Info without a
    known major version only matches when no range is set.
    """

    def __init__(
        self,
        database_name: str,
        strategy: Callable[..., Any],
        *,
        min_version: Version | None = None,
        max_version: Version | None = None,
    ) -> None:
        self.database_name = database_name
        self.strategy = strategy
        self.min_version = min_version
        self.max_version = max_version

    def matches(self, info: ResolutionInfo) -> bool:
        if info.database_name.lower() != self.database_name.lower():
            return False
        if self.min_version is None and self.max_version is None:
            return True
        if info.major_version < 0:
            return False
        version = (info.major_version, max(info.minor_version, 0))
        if self.min_version is not None and version < self.min_version:
            return False
        if self.max_version is not None and version >= self.max_version:
            return False
        return True

    def __call__(self, info: ResolutionInfo) -> Optional[Dialect]:
        if not self.matches(info):
            return None
        from_info = getattr(self.strategy, "from_resolution_info", None)
        if from_info is not None:
            return from_info(info)
        return self.strategy()

    def __repr__(self) -> str:
        return (
            f"DatabaseNameResolver({self.database_name!r}, "
            f"min_version={self.min_version!r}, max_version={self.max_version!r})"
        )


def standard_resolvers() -> List[DialectResolver]:
    """
    Resolvers for the built-in dialects.
    """

    return [
        DatabaseNameResolver("MariaDB", MariaDBDialect),
        DatabaseNameResolver("MySQL", MySQLDialect),
        DatabaseNameResolver("PostgreSQL", PostgresDialect),
        DatabaseNameResolver("SQLite", SQLiteDialect),
    ]


def default_resolver_chain() -> ResolverChain:
    return ResolverChain(standard_resolvers())


__all__ = [
    "DatabaseNameResolver",
    "DialectResolver",
    "NO_MATCH",
    "ResolverChain",
    "default_resolver_chain",
    "standard_resolvers",
]
