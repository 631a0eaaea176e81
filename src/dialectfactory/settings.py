"""
Configuration keys and environment loading for dialect resolution.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Final, Mapping, Optional

DIALECT: Final[str] = "dialect"
DSN: Final[str] = "dsn"

ENV_PREFIX: Final[str] = "DIALECTFACTORY_"

_ENV_KEYS = {
    f"{ENV_PREFIX}DIALECT": DIALECT,
    f"{ENV_PREFIX}DSN": DSN,
}


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Collect resolution settings from environment variables.

    ``DIALECTFACTORY_DIALECT`` maps to :data:`DIALECT` and
    ``DIALECTFACTORY_DSN`` to :data:`DSN`. Unset or empty variables are left out.
    """

    source = os.environ if environ is None else environ
    settings: Dict[str, Any] = {}
    for env_var, key in _ENV_KEYS.items():
        value = source.get(env_var)
        if value and value.strip():
            settings[key] = value.strip()
    return settings


def is_blank(reference: Any) -> bool:
    """
    ``None`` and empty/whitespace strings count as blank; any other value does not.
    """

    if reference is None:
        return True
    if isinstance(reference, str):
        return not reference.strip()
    return False
