"""
Dialect resolution service choosing between explicit configuration and detection.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..dialects.base import Dialect
from ..errors import ConfigurationError, ResolutionError
from ..settings import DIALECT, DSN, is_blank, settings_from_env
from ..utils import get_logger
from .info import ResolutionInfoSource
from .resolvers import ResolverChain, default_resolver_chain
from .sources import DSNResolutionInfoSource
from .strategies import StrategyRegistry, default_registry


class DialectResolutionService:
    """
    Resolves the dialect to use for a configuration and optional connection metadata.

    An explicit :data:`~dialectfactory.settings.DIALECT` setting always wins;
    the resolver chain is consulted only when it is missing or blank. Every
    call returns a new dialect instance or raises a
    :class:`~dialectfactory.errors.DialectError`.
    """

    def __init__(
        self,
        strategies: Optional[StrategyRegistry] = None,
        resolver_chain: Optional[ResolverChain] = None,
    ) -> None:
        self.strategies = strategies if strategies is not None else default_registry()
        self.resolver_chain = (
            resolver_chain if resolver_chain is not None else default_resolver_chain()
        )
        self.logger = get_logger("resolution.service")

    def resolve(
        self,
        config_values: Mapping[str, Any],
        resolution_info_source: Optional[ResolutionInfoSource] = None,
    ) -> Dialect:
        reference = config_values.get(DIALECT)
        if not is_blank(reference):
            self.logger.debug("Using explicitly configured dialect %r", reference)
            return self.strategies.construct(reference, resolution_info_source)
        return self._determine(resolution_info_source)

    def _determine(self, resolution_info_source: Optional[ResolutionInfoSource]) -> Dialect:
        if resolution_info_source is None:
            raise ConfigurationError(
                "Unable to determine dialect without connection metadata: no connection "
                f"metadata available and no explicit dialect set (set '{DIALECT}')"
            )

        info = resolution_info_source.get_resolution_info()
        dialect = self.resolver_chain.resolve(info)
        if dialect is None:
            raise ResolutionError(
                f"Unable to determine dialect for {info.describe()} "
                f"(set '{DIALECT}' or register a dialect resolver)",
                database_name=info.database_name,
                major_version=info.major_version,
                minor_version=info.minor_version,
            )

        self.logger.info("Detected %s; using %r", info.describe(), dialect)
        return dialect


def resolve_dialect(
    config_values: Mapping[str, Any],
    resolution_info_source: Optional[ResolutionInfoSource] = None,
    *,
    service: Optional[DialectResolutionService] = None,
) -> Dialect:
    """
    Resolve a dialect with the default registry and resolver chain.
    """

    service = service or DialectResolutionService()
    return service.resolve(config_values, resolution_info_source)


def resolve_dialect_from_env(
    environ: Optional[Mapping[str, str]] = None,
    *,
    service: Optional[DialectResolutionService] = None,
) -> Dialect:
    """
    Resolve a dialect from ``DIALECTFACTORY_*`` environment variables.

    A configured DSN supplies the metadata used when no dialect is named.
    """

    settings = settings_from_env(environ)
    source: Optional[ResolutionInfoSource] = None
    if settings.get(DSN):
        source = DSNResolutionInfoSource(settings[DSN])
    return resolve_dialect(settings, source, service=service)


__all__ = ["DialectResolutionService", "resolve_dialect", "resolve_dialect_from_env"]
