"""
Naming utilities for strategy aliases.
"""

import re


_FIRST_CAP_RE = re.compile("(.)([A-Z][a-z]+)")
_ALL_CAP_RE = re.compile("([a-z0-9])([A-Z])")


def camel_to_snake(name: str) -> str:
    """
    Convert ``CamelCase`` names to ``snake_case``.
    """
    step1 = _FIRST_CAP_RE.sub(r"\1_\2", name)
    return _ALL_CAP_RE.sub(r"\1_\2", step1).lower()


def default_alias(class_name: str, suffix: str = "_dialect") -> str:
    """
    Derive a short alias from a dialect class name.

    ``PostgresDialect`` becomes ``postgres``. Runs of capitals split the way
    :func:`camel_to_snake` splits them, so ``SQLiteDialect`` becomes ``sq_lite``;
    register such classes with explicit aliases.
    """
    snake = camel_to_snake(class_name)
    if snake.endswith(suffix) and snake != suffix.lstrip("_"):
        snake = snake[: -len(suffix)]
    return snake
