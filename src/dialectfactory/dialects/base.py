"""
Dialect strategy interfaces describing backend-specific SQL behaviors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

Version = Tuple[int, int]


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags describing backend capabilities.
    """

    supports_returning: bool = False
    supports_savepoints: bool = True
    supports_partial_indexes: bool = False
    supports_schema_namespaces: bool = False


class Dialect(Protocol):
    """
    Strategy interface produced by dialect resolution.
    """

    @property
    def name(self) -> str: ...

    @property
    def param_style(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities: ...

    @property
    def version(self) -> Optional[Version]: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def limit_clause(self, limit: int | None, offset: int | None) -> str: ...

    def parameter_placeholder(self, position: int | None = None) -> str: ...

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str: ...


def version_from_info(info) -> Optional[Version]:
    """
    Extract a ``(major, minor)`` pair from resolution info, ``None`` when unknown.
    """

    if info.major_version < 0:
        return None
    return (info.major_version, max(info.minor_version, 0))


def at_least(version: Optional[Version], minimum: Version) -> bool:
    """
    Version gate treating an unknown version as the newest release.
    """

    if version is None:
        return True
    return version >= minimum
