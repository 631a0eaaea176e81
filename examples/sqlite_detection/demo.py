"""
SQLite example resolving a dialect from a live connection and from configuration.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Dict

from dialectfactory import (
    DIALECT,
    ConnectionResolutionInfoSource,
    DialectResolutionService,
)
from dialectfactory.dialects import Dialect


def detect_dialect(connection: sqlite3.Connection) -> Dialect:
    service = DialectResolutionService()
    return service.resolve({}, ConnectionResolutionInfoSource(connection))


def configured_dialect(reference: Any, connection: sqlite3.Connection | None = None) -> Dialect:
    service = DialectResolutionService()
    source = ConnectionResolutionInfoSource(connection) if connection is not None else None
    return service.resolve({DIALECT: reference}, source)


def run_demo(path: str = ":memory:") -> Dict[str, Any]:
    connection = sqlite3.connect(path)
    try:
        dialect = detect_dialect(connection)
        table = dialect.format_table("books")
        create_sql = (
            f"CREATE TABLE {table} ("
            f"{dialect.render_column_definition('id', 'INTEGER PRIMARY KEY', nullable=False)}, "
            f"{dialect.render_column_definition('title', 'TEXT', nullable=False)})"
        )
        connection.execute(create_sql)
        placeholder = dialect.parameter_placeholder()
        connection.executemany(
            f"INSERT INTO {table} (title) VALUES ({placeholder})",
            [("Dune",), ("Solaris",), ("Hyperion",)],
        )
        rows = connection.execute(
            f"SELECT title FROM {table} ORDER BY id {dialect.limit_clause(2, 1)}"
        ).fetchall()
        return {
            "dialect": dialect.name,
            "version": dialect.version,
            "supports_returning": dialect.capabilities.supports_returning,
            "titles": [row[0] for row in rows],
        }
    finally:
        connection.close()
