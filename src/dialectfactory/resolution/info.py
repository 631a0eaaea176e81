"""
Database identity facts consumed by dialect resolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

NO_VERSION = -1


@dataclass(frozen=True)
class ResolutionInfo:
    """
    Snapshot of the product name and version reported by a database.

    Only valid for the duration of the resolving call; sources backed by a
    live connection may produce a different snapshot later.
    """

    database_name: str
    major_version: int = NO_VERSION
    minor_version: int = NO_VERSION
    driver_name: Optional[str] = None
    driver_major_version: int = NO_VERSION
    driver_minor_version: int = NO_VERSION

    @property
    def version(self) -> Tuple[int, int]:
        return (self.major_version, self.minor_version)

    def describe(self) -> str:
        return f"{self.database_name} {self.major_version}.{self.minor_version}"


class ResolutionInfoSource(Protocol):
    """
    Anything able to produce a :class:`ResolutionInfo` on demand.
    """

    def get_resolution_info(self) -> ResolutionInfo: ...


class StaticResolutionInfoSource:
    """
    Source returning a fixed snapshot, useful when metadata is known up front.
    """

    def __init__(self, info: ResolutionInfo) -> None:
        self.info = info

    def get_resolution_info(self) -> ResolutionInfo:
        return self.info

    def __repr__(self) -> str:
        return f"StaticResolutionInfoSource({self.info!r})"
