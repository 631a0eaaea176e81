"""
MySQL and MariaDB dialect implementations.
"""

from __future__ import annotations

from typing import Final, Optional

from .base import DialectCapabilities, Version, at_least, version_from_info

# Largest unsigned BIGINT; MySQL has no OFFSET without LIMIT.
_NO_LIMIT = "18446744073709551615"


class _MySQLFamilyDialect:
    """
    SQL rendering shared by MySQL and MariaDB, using percent-style placeholders.
    """

    param_style: Final[str] = "pyformat"

    def __init__(self, version: Optional[Version] = None) -> None:
        self.version = version
        self.capabilities = self._capabilities(version)

    @classmethod
    def from_resolution_info(cls, info):
        return cls(version_from_info(info))

    @staticmethod
    def _capabilities(version: Optional[Version]) -> DialectCapabilities:
        raise NotImplementedError

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace("`", "``")
        return f"`{escaped}`"

    def format_table(self, table_name: str) -> str:
        if "." in table_name:
            schema, table = table_name.split(".", 1)
            return f"{self.quote_identifier(schema)}.{self.quote_identifier(table)}"
        return self.quote_identifier(table_name)

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if limit is not None:
            parts.append(f"LIMIT {limit}")
        if offset is not None:
            if limit is None:
                parts.append(f"LIMIT {_NO_LIMIT}")
            parts.append(f"OFFSET {offset}")
        return " ".join(parts)

    def parameter_placeholder(self, position: int | None = None) -> str:
        return "%s"

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str:
        null_clause = "" if nullable else " NOT NULL"
        return f"{self.quote_identifier(column)} {column_type}{null_clause}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(version={self.version!r})"


class MySQLDialect(_MySQLFamilyDialect):
    """
    MySQL dialect; no ``RETURNING`` support in any release.
    """

    name: Final[str] = "mysql"

    @staticmethod
    def _capabilities(version: Optional[Version]) -> DialectCapabilities:
        return DialectCapabilities(
            supports_returning=False,
            supports_savepoints=True,
            supports_partial_indexes=False,
            supports_schema_namespaces=True,
        )


class MariaDBDialect(_MySQLFamilyDialect):
    """
    MariaDB dialect; ``RETURNING`` is available from 10.5 onwards.
    """

    name: Final[str] = "mariadb"

    @staticmethod
    def _capabilities(version: Optional[Version]) -> DialectCapabilities:
        return DialectCapabilities(
            supports_returning=at_least(version, (10, 5)),
            supports_savepoints=True,
            supports_partial_indexes=False,
            supports_schema_namespaces=True,
        )
