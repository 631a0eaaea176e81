"""
Built-in dialect strategies.
"""

from .base import Dialect, DialectCapabilities
from .mysql import MariaDBDialect, MySQLDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect

__all__ = [
    "Dialect",
    "DialectCapabilities",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "MariaDBDialect",
]
