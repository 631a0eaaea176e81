"""
Dialect resolution: explicit construction and metadata-driven detection.
"""

from .info import NO_VERSION, ResolutionInfo, ResolutionInfoSource, StaticResolutionInfoSource
from .resolvers import (
    NO_MATCH,
    DatabaseNameResolver,
    DialectResolver,
    ResolverChain,
    default_resolver_chain,
    standard_resolvers,
)
from .service import DialectResolutionService, resolve_dialect, resolve_dialect_from_env
from .sources import ConnectionResolutionInfoSource, DSNResolutionInfoSource
from .strategies import StrategyEntry, StrategyRegistry, default_registry

__all__ = [
    "NO_MATCH",
    "NO_VERSION",
    "ConnectionResolutionInfoSource",
    "DSNResolutionInfoSource",
    "DatabaseNameResolver",
    "DialectResolutionService",
    "DialectResolver",
    "ResolutionInfo",
    "ResolutionInfoSource",
    "ResolverChain",
    "StaticResolutionInfoSource",
    "StrategyEntry",
    "StrategyRegistry",
    "default_registry",
    "default_resolver_chain",
    "resolve_dialect",
    "resolve_dialect_from_env",
    "standard_resolvers",
]
