"""
Resolution info sources backed by DB-API connections and DSN strings.
"""

from __future__ import annotations

import re
import sqlite3
import sys
from typing import Any, Optional, Tuple
from urllib.parse import parse_qs, urlparse

from ..errors import ConfigurationError
from ..utils import get_logger, time_call
from .info import NO_VERSION, ResolutionInfo

_VERSION_RE = re.compile(r"(\d+)(?:\.(\d+))?")

# DSN scheme -> product name as reported by the database itself.
_SCHEME_PRODUCTS = {
    "postgres": "PostgreSQL",
    "postgresql": "PostgreSQL",
    "mysql": "MySQL",
    "mariadb": "MariaDB",
    "sqlite": "SQLite",
}


def parse_version(value: str | None) -> Tuple[int, int]:
    """
    Parse the leading ``major.minor`` of a version string.

    Missing parts come back as ``NO_VERSION``.
    """

    if not value:
        return (NO_VERSION, NO_VERSION)
    match = _VERSION_RE.search(value)
    if match is None:
        return (NO_VERSION, NO_VERSION)
    major = int(match.group(1))
    minor = int(match.group(2)) if match.group(2) is not None else 0
    return (major, minor)


def split_server_version(value: int) -> Tuple[int, int]:
    """
    Split a libpq ``server_version`` integer (``140002``, ``90624``) into major/minor.
    """

    if value >= 100000:
        return (value // 10000, value % 10000)
    return (value // 10000, (value // 100) % 100)


class ConnectionResolutionInfoSource:
    """
    Reads product metadata from an open DB-API connection.

    Supports ``sqlite3``, psycopg 3, psycopg2, PyMySQL and mysqlclient. The
    connection is queried on every call; the caller keeps ownership of it.
    """

    def __init__(self, connection: Any, *, slow_ms: int = 100) -> None:
        self.connection = connection
        self.slow_ms = slow_ms
        self.logger = get_logger("resolution.sources")

    def get_resolution_info(self) -> ResolutionInfo:
        driver_name = self._driver_name()
        with time_call(
            "resolution.introspect",
            self.logger,
            threshold_ms=self.slow_ms,
            driver=driver_name,
        ):
            database_name, (major, minor) = self._probe()
        driver_major, driver_minor = parse_version(self._driver_version(driver_name))
        info = ResolutionInfo(
            database_name=database_name,
            major_version=major,
            minor_version=minor,
            driver_name=driver_name,
            driver_major_version=driver_major,
            driver_minor_version=driver_minor,
        )
        self.logger.debug("Connection reports %s via %s", info.describe(), driver_name)
        return info

    def _probe(self) -> Tuple[str, Tuple[int, int]]:
        connection = self.connection
        if isinstance(connection, sqlite3.Connection):
            row = connection.execute("SELECT sqlite_version()").fetchone()
            return "SQLite", parse_version(row[0])

        pg_info = getattr(connection, "info", None)
        if pg_info is not None and isinstance(getattr(pg_info, "server_version", None), int):
            vendor = getattr(pg_info, "vendor", None) or "PostgreSQL"
            return vendor, split_server_version(pg_info.server_version)

        server_version = getattr(connection, "server_version", None)
        if isinstance(server_version, int):
            return "PostgreSQL", split_server_version(server_version)

        get_server_info = getattr(connection, "get_server_info", None)
        if callable(get_server_info):
            raw = get_server_info()
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8", "replace")
            if "mariadb" in raw.lower():
                # MariaDB servers may prefix a fake "5.5.5-" for old clients.
                if raw.startswith("5.5.5-"):
                    raw = raw[len("5.5.5-") :]
                return "MariaDB", parse_version(raw)
            return "MySQL", parse_version(raw)

        raise ConfigurationError(
            f"Unable to read database metadata from connection of type "
            f"{type(connection).__module__}.{type(connection).__qualname__}"
        )

    def _driver_name(self) -> str:
        return type(self.connection).__module__.split(".", 1)[0]

    @staticmethod
    def _driver_version(driver_name: str) -> Optional[str]:
        if driver_name == "sqlite3":
            return sqlite3.sqlite_version
        module = sys.modules.get(driver_name)
        version = getattr(module, "__version__", None)
        return version if isinstance(version, str) else None

    def __repr__(self) -> str:
        return f"ConnectionResolutionInfoSource(driver={self._driver_name()!r})"


def redact_dsn(dsn: str) -> str:
    """
    Return the DSN with its password replaced by ``***``.

    Only the userinfo is rewritten; host and port text stay as written, so
    malformed ports and bracketed IPv6 hosts survive untouched.
    """

    scheme, sep, rest = dsn.partition("://")
    if not sep:
        return dsn
    end = len(rest)
    for delimiter in "/?#":
        index = rest.find(delimiter)
        if index != -1:
            end = min(end, index)
    netloc, tail = rest[:end], rest[end:]
    userinfo, at, hostport = netloc.rpartition("@")
    if not at:
        return dsn
    username, colon, _ = userinfo.partition(":")
    if not colon:
        return dsn
    return f"{scheme}://{username}:***@{hostport}{tail}"


class DSNResolutionInfoSource:
    """
    Derives resolution info from a connection URL without connecting.

    The product comes from the scheme (``postgresql+psycopg://`` counts as
    ``postgresql``); the version from an optional ``server_version`` query
    parameter.
    """

    def __init__(self, dsn: str) -> None:
        self.dsn = dsn
        self.logger = get_logger("resolution.sources")

    def get_resolution_info(self) -> ResolutionInfo:
        try:
            parsed = urlparse(self.dsn)
            parsed.port  # raises on non-numeric or out-of-range ports
        except ValueError as exc:
            raise ConfigurationError(f"Invalid DSN: {self.redacted()}") from exc
        if not parsed.scheme:
            raise ConfigurationError(f"DSN has no scheme: {self.redacted()}")
        base, _, driver = parsed.scheme.partition("+")
        database_name = _SCHEME_PRODUCTS.get(base.lower(), base)
        query = {key: values[0] for key, values in parse_qs(parsed.query).items()}
        major, minor = parse_version(query.get("server_version"))
        info = ResolutionInfo(
            database_name=database_name,
            major_version=major,
            minor_version=minor,
            driver_name=driver or None,
        )
        self.logger.debug("DSN %s describes %s", self.redacted(), info.describe())
        return info

    def redacted(self) -> str:
        return redact_dsn(self.dsn)

    def __repr__(self) -> str:
        return f"DSNResolutionInfoSource({self.redacted()!r})"


__all__ = [
    "ConnectionResolutionInfoSource",
    "DSNResolutionInfoSource",
    "parse_version",
    "redact_dsn",
    "split_server_version",
]
