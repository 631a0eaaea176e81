"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from typing import Final, Optional

from .base import DialectCapabilities, Version, at_least, version_from_info


class PostgresDialect:
    """
    PostgreSQL dialect using percent positional parameters.
    """

    name: Final[str] = "postgresql"
    param_style: Final[str] = "pyformat"

    def __init__(self, version: Optional[Version] = None) -> None:
        self.version = version
        self.capabilities = DialectCapabilities(
            supports_returning=at_least(version, (8, 2)),
            supports_savepoints=True,
            supports_partial_indexes=True,
            supports_schema_namespaces=True,
        )

    @classmethod
    def from_resolution_info(cls, info) -> "PostgresDialect":
        return cls(version_from_info(info))

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

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
            parts.append(f"OFFSET {offset}")
        return " ".join(parts)

    def parameter_placeholder(self, position: int | None = None) -> str:
        return "%s"

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str:
        null_clause = "" if nullable else " NOT NULL"
        return f"{self.quote_identifier(column)} {column_type}{null_clause}"

    def __repr__(self) -> str:
        return f"PostgresDialect(version={self.version!r})"
