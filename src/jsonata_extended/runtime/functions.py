"""Default extension functions and host registration.

Builds registries from the EXTENSION_FUNCTIONS table and binds them into a
host expression engine.

Example:
    >>> class Host:
    ...     def __init__(self):
    ...         self.bound = {}
    ...     def register_function(self, name, implementation, signature):
    ...         self.bound[name] = signature
    >>> host = Host()
    >>> register(host)
    >>> host.bound["truncate"]
    '<s?o?:s>'

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from jsonata_extended.introspection import language_info
from jsonata_extended.parsing import (
    decode_uuid,
    encode_uuid,
    moment,
    moment_duration,
    parse_path,
    parse_url,
    shorten_uuid,
    unshorten_uuid,
)
from jsonata_extended.text import html_to_text, mustache, truncate, unicode_to_ascii

from .function_bridge import ExtensionRegistry, JsonataHost
from .function_metadata import EXTENSION_FUNCTIONS

__all__ = ["create_default_registry", "get_shared_registry", "register"]

logger = logging.getLogger(__name__)

# Python name -> implementation for every row of EXTENSION_FUNCTIONS.
_IMPLEMENTATIONS: dict[str, Callable[..., Any]] = {
    func.__name__: func
    for func in (
        html_to_text,
        shorten_uuid,
        unshorten_uuid,
        encode_uuid,
        decode_uuid,
        truncate,
        language_info,
        parse_url,
        parse_path,
        moment,
        moment_duration,
        mustache,
        unicode_to_ascii,
    )
}


def create_default_registry() -> ExtensionRegistry:
    """Create a new ExtensionRegistry holding every extension function.

    Each call returns a fresh, unfrozen instance; register custom functions
    on it freely.

    See Also:
        get_shared_registry: Returns a shared frozen registry.
    """
    registry = ExtensionRegistry()
    for meta in EXTENSION_FUNCTIONS.values():
        registry.register(
            _IMPLEMENTATIONS[meta.python_name],
            name=meta.name,
            signature=meta.signature,
            passthrough=meta.passthrough,
        )
    logger.debug("Created default registry with %d functions", len(registry))
    return registry


# Module-level cached default registry.
# Initialized lazily on first access to avoid import-time side effects.
_SHARED_REGISTRY: ExtensionRegistry | None = None


def get_shared_registry() -> ExtensionRegistry:
    """Get a shared, frozen ExtensionRegistry with every extension function.

    Immutability:
        The returned registry is FROZEN. Calling register() on it raises
        TypeError. To add custom functions, use copy() or
        create_default_registry().

    Returns:
        Frozen shared ExtensionRegistry.

    Example:
        >>> shared = get_shared_registry()
        >>> shared is get_shared_registry()
        True
        >>> mine = shared.copy()
        >>> mine.register(lambda value=None: value, name="echo")
    """
    # pylint: disable=global-statement
    global _SHARED_REGISTRY  # noqa: PLW0603
    if _SHARED_REGISTRY is None:
        _SHARED_REGISTRY = create_default_registry()
        _SHARED_REGISTRY.freeze()
    return _SHARED_REGISTRY


def register(host: JsonataHost | None) -> None:
    """Bind every extension function into a host expression engine.

    Args:
        host: Object exposing ``register_function(name, implementation,
            signature)``; for example a compiled expression

    Raises:
        InvalidHostError: "Invalid JSONata Expression" if host is None or
            has no callable register_function
    """
    get_shared_registry().bind(host)
