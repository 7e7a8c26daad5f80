"""Undefined-propagation combinator.

Expression authors chain optional lookups (``$truncate(a.missing.field)``)
without null checks. Every passthrough function therefore returns ``None``
when its primary argument is missing, before any delegate library runs.

Python 3.13+. Zero external dependencies.
"""

import functools
from collections.abc import Callable

__all__ = ["is_passthrough", "undefined_passthrough"]

# Attribute set on wrapped functions so registries can report the convention.
_PASSTHROUGH_ATTR = "_jsonata_undefined_passthrough"


def undefined_passthrough[**P, R](func: Callable[P, R]) -> Callable[P, R | None]:
    """Short-circuit func to ``None`` when its first argument is ``None``.

    A call with no positional arguments counts as a missing primary argument.

    Example:
        >>> @undefined_passthrough
        ... def shout(value: str) -> str:
        ...     return value.upper()
        >>> shout(None) is None
        True
        >>> shout("hi")
        'HI'
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R | None:
        if not args or args[0] is None:
            return None
        return func(*args, **kwargs)

    setattr(wrapper, _PASSTHROUGH_ATTR, True)
    return wrapper


def is_passthrough(func: object) -> bool:
    """Check if a callable was wrapped by undefined_passthrough."""
    return getattr(func, _PASSTHROUGH_ATTR, False) is True
