"""
Strategy registry turning dialect references into dialect instances.

A reference is a short alias (``"postgres"``), a fully-qualified name
(``"package.module.Class"`` or ``"package.module:Class"``), or the class or
factory callable itself. Every resolved reference becomes a
:class:`StrategyEntry` holding a no-argument factory and, for dialects that
can adapt to the server they talk to, a metadata-aware factory.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from ..dialects import MariaDBDialect, MySQLDialect, PostgresDialect, SQLiteDialect
from ..dialects.base import Dialect
from ..errors import ConstructionError, ResolutionError, UnknownStrategyError
from ..utils import get_logger
from ..utils.naming import default_alias
from .info import ResolutionInfo, ResolutionInfoSource

logger = get_logger("resolution.strategies")


def qualified_name(obj: Any) -> str:
    module = getattr(obj, "__module__", None) or "<unknown>"
    qualname = getattr(obj, "__qualname__", None) or type(obj).__qualname__
    return f"{module}.{qualname}"


@dataclass(frozen=True)
class StrategyEntry:
    """
    Registry variant describing how to build one dialect.
    """

    name: str
    factory: Callable[[], Dialect]
    info_factory: Optional[Callable[[ResolutionInfo], Dialect]] = None
    aliases: Tuple[str, ...] = field(default=())

    @property
    def accepts_resolution_info(self) -> bool:
        return self.info_factory is not None

    @classmethod
    def for_class(cls, strategy: Callable[..., Any], *aliases: str) -> "StrategyEntry":
        """
        Build an entry from a dialect class or factory callable.

        Classes defining ``from_resolution_info`` become metadata-aware.
        """

        info_factory = getattr(strategy, "from_resolution_info", None)
        if not callable(info_factory):
            info_factory = None
        return cls(
            name=qualified_name(strategy),
            factory=strategy,
            info_factory=info_factory,
            aliases=tuple(aliases),
        )


class StrategyRegistry:
    """
    Alias table plus by-name lookup for dialect strategies.

    Lookups are read-only; register everything before sharing the registry
    between threads.
    """

    def __init__(self, entries: Iterable[StrategyEntry] | None = None) -> None:
        self._entries: Dict[str, StrategyEntry] = {}
        self._aliases: Dict[str, str] = {}
        for entry in entries or ():
            self.register(entry)

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #
    def register(self, entry: StrategyEntry) -> StrategyEntry:
        self._entries[entry.name] = entry
        for alias in entry.aliases:
            self._aliases[alias.lower()] = entry.name
        logger.debug("Registered dialect strategy %s (aliases=%s)", entry.name, entry.aliases)
        return entry

    def register_class(self, strategy: Callable[..., Any], *aliases: str) -> StrategyEntry:
        if not aliases:
            aliases = (default_alias(getattr(strategy, "__name__", "")),)
        return self.register(StrategyEntry.for_class(strategy, *aliases))

    def unregister(self, name_or_alias: str) -> StrategyEntry:
        entry = self.resolve_alias(name_or_alias) or self._entries.get(name_or_alias)
        if entry is None:
            raise UnknownStrategyError(name_or_alias)
        del self._entries[entry.name]
        self._aliases = {
            alias: name for alias, name in self._aliases.items() if name != entry.name
        }
        return entry

    def aliases(self) -> Dict[str, str]:
        return dict(self._aliases)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    # ------------------------------------------------------------------ #
    # Lookup
    # ------------------------------------------------------------------ #
    def resolve_alias(self, name: str) -> Optional[StrategyEntry]:
        target = self._aliases.get(name.strip().lower())
        if target is None:
            return None
        return self._entries[target]

    def resolve_by_name(self, name: str) -> StrategyEntry:
        name = name.strip()
        entry = self._entries.get(name)
        if entry is not None:
            return entry
        return StrategyEntry.for_class(self._import(name))

    def entry_for(self, reference: Any) -> StrategyEntry:
        if isinstance(reference, str):
            return self.resolve_alias(reference) or self.resolve_by_name(reference)
        if callable(reference):
            entry = self._entries.get(qualified_name(reference))
            if entry is not None and entry.factory is reference:
                return entry
            return StrategyEntry.for_class(reference)
        raise UnknownStrategyError(
            reference,
            f"Dialect reference must be a name or a class, got {type(reference).__name__}",
        )

    @staticmethod
    def _import(name: str) -> Callable[..., Any]:
        if ":" in name:
            module_name, _, attr_path = name.partition(":")
        else:
            module_name, _, attr_path = name.rpartition(".")
        if not module_name or not attr_path or module_name.startswith("."):
            raise UnknownStrategyError(name)
        try:
            target: Any = importlib.import_module(module_name)
            for attr in attr_path.split("."):
                target = getattr(target, attr)
        except (ImportError, AttributeError, TypeError, ValueError) as exc:
            raise UnknownStrategyError(name) from exc
        if not callable(target):
            raise UnknownStrategyError(name, f"Dialect reference [{name}] is not a class")
        return target

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    def construct(
        self,
        reference: Any,
        resolution_info_source: ResolutionInfoSource | None = None,
    ) -> Dialect:
        """
        Instantiate the dialect named by ``reference``.

        The metadata-aware factory is used only when a source is supplied and
        the entry provides one; otherwise the no-argument factory is called.
        Errors raised by the source itself propagate unchanged.
        """

        entry = self.entry_for(reference)
        info: ResolutionInfo | None = None
        if resolution_info_source is not None and entry.accepts_resolution_info:
            info = resolution_info_source.get_resolution_info()

        logger.debug(
            "Constructing dialect %s (metadata-aware=%s)", entry.name, info is not None
        )
        try:
            if info is not None:
                dialect = entry.info_factory(info)
            else:
                dialect = entry.factory()
        except Exception as exc:
            raise ConstructionError(entry.name, exc) from exc

        if dialect is None:
            raise ResolutionError(f"Unable to construct requested dialect [{reference}]")
        return dialect


def default_registry() -> StrategyRegistry:
    """
    Registry holding the built-in dialects under their usual aliases.
    """

    registry = StrategyRegistry()
    registry.register_class(SQLiteDialect, "sqlite", "sqlite3")
    registry.register_class(PostgresDialect, "postgres", "postgresql", "pg")
    registry.register_class(MySQLDialect, "mysql")
    registry.register_class(MariaDBDialect, "mariadb")
    return registry


__all__ = ["StrategyEntry", "StrategyRegistry", "default_registry", "qualified_name"]
