"""
dialectfactory public package initialization.

Resolves the SQL dialect strategy for a database either from explicit
configuration or from the metadata reported by a live connection.
"""

from .dialects import (  # noqa: F401
    Dialect,
    DialectCapabilities,
    MariaDBDialect,
    MySQLDialect,
    PostgresDialect,
    SQLiteDialect,
)
from .errors import (  # noqa: F401
    ConfigurationError,
    ConstructionError,
    DialectError,
    ResolutionError,
    UnknownStrategyError,
)
from .resolution import (  # noqa: F401
    ConnectionResolutionInfoSource,
    DatabaseNameResolver,
    DialectResolutionService,
    DSNResolutionInfoSource,
    ResolutionInfo,
    ResolutionInfoSource,
    ResolverChain,
    StaticResolutionInfoSource,
    StrategyEntry,
    StrategyRegistry,
    resolve_dialect,
    resolve_dialect_from_env,
)
from .settings import DIALECT, DSN  # noqa: F401

__all__ = [
    "DIALECT",
    "DSN",
    "Dialect",
    "DialectCapabilities",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "MariaDBDialect",
    "DialectError",
    "ConfigurationError",
    "UnknownStrategyError",
    "ConstructionError",
    "ResolutionError",
    "ResolutionInfo",
    "ResolutionInfoSource",
    "StaticResolutionInfoSource",
    "ConnectionResolutionInfoSource",
    "DSNResolutionInfoSource",
    "ResolverChain",
    "DatabaseNameResolver",
    "StrategyEntry",
    "StrategyRegistry",
    "DialectResolutionService",
    "resolve_dialect",
    "resolve_dialect_from_env",
]
