"""Function bridge between Python implementations and the host engine.

Provides the mapping layer between two naming and calling conventions:
    - Python: snake_case function names, keyword defaults, None for missing
    - Host: camelCase function names with a declared signature string

Architecture:
    - ExtensionRegistry: collects FunctionDescriptors, binds them to a host
    - Host names default to the camelCase form of the Python name
    - Declared signatures are checked against ``inspect.signature`` when a
      function is registered, so a drifting implementation fails loudly

Example:
    # Python function (snake_case):
    def shorten_uuid(value, base="base36"):
        ...

    # Expression (camelCase):
    $shortenUuid(id, "base62")

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from inspect import Parameter, signature
from typing import Any, Protocol, runtime_checkable

from jsonata_extended.core import is_passthrough
from jsonata_extended.diagnostics import ErrorTemplate, InvalidHostError, SignatureMismatchError

from .function_metadata import ParamType, Signature, optional

__all__ = ["ExtensionRegistry", "FunctionDescriptor", "JsonataHost"]

logger = logging.getLogger(__name__)

_POSITIONAL_KINDS = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)


@runtime_checkable
class JsonataHost(Protocol):
    """Protocol for expression engines that accept extra functions.

    Any object with a callable ``register_function(name, implementation,
    signature)`` qualifies.
    """

    def register_function(
        self,
        name: str,
        implementation: Callable[..., Any],
        signature: str,
        /,
    ) -> None:
        ...  # pragma: no cover  # Protocol stub - not executable


@dataclass(frozen=True, slots=True)
class FunctionDescriptor:
    """Registered function with its host calling convention.

    Attributes:
        python_name: Function name in Python (snake_case)
        name: Function name in the host (unique within a registry)
        implementation: The Python callable
        signature: Declared calling convention
        passthrough: Whether a missing first argument returns None
    """

    python_name: str
    name: str
    implementation: Callable[..., Any]
    signature: Signature
    passthrough: bool


def _positional_arity(func: Callable[..., Any]) -> tuple[int, int | None]:
    """(min, max) positional arguments func accepts; max None if unbounded."""
    minimum = 0
    maximum: int | None = 0
    for param in signature(func).parameters.values():
        if param.kind is Parameter.VAR_POSITIONAL:
            maximum = None
        elif param.kind in _POSITIONAL_KINDS:
            if param.default is Parameter.empty:
                minimum += 1
            if maximum is not None:
                maximum += 1
    return minimum, maximum


def _describe_arity(minimum: int, maximum: int | None) -> str:
    if maximum is None:
        return f"{minimum} or more"
    if minimum == maximum:
        return str(minimum)
    return f"{minimum} to {maximum}"


class ExtensionRegistry:
    """Manages Python to host function bindings.

    Supports dict-like introspection:
        - list_functions(): List all registered host names
        - get_function_info(name): Get function descriptor
        - __iter__: Iterate over host names
        - __len__: Count registered functions
        - __contains__: Check if function exists (supports 'in' operator)

    Memory Optimization:
        Uses __slots__ for memory efficiency (avoids per-instance __dict__).

    Example:
        >>> registry = ExtensionRegistry()
        >>> registry.register(lambda value=None: value, name="echo")
        >>> "echo" in registry
        True
        >>> len(registry)
        1
    """

    __slots__ = ("_frozen", "_functions")

    def __init__(self) -> None:
        """Initialize empty function registry."""
        self._functions: dict[str, FunctionDescriptor] = {}
        self._frozen = False

    def register(
        self,
        func: Callable[..., Any],
        *,
        name: str | None = None,
        signature: Signature | str | None = None,
        passthrough: bool | None = None,
    ) -> None:
        """Register a Python function for host use.

        Args:
            func: Python function to register
            name: Host function name (default: camelCase of func.__name__)
            signature: Declared calling convention, as a Signature or as
                mini-language text (default: one optional parameter per
                positional parameter, any type, returning any)
            passthrough: Whether a missing first argument returns None
                (default: detected from the undefined_passthrough decorator)

        Raises:
            TypeError: If the registry is frozen
            SignatureMismatchError: If signature text is malformed, or the
                declared parameter count does not fit func

        Example:
            >>> def shorten_uuid(value=None, base="base36"):
            ...     return value
            >>> registry = ExtensionRegistry()
            >>> registry.register(shorten_uuid, signature="<s?s?:s>")
            >>> registry.get_function_info("shortenUuid").signature.render()
            '<s?s?:s>'
        """
        if self._frozen:
            msg = "Cannot modify frozen registry"
            raise TypeError(msg)

        python_name = getattr(func, "__name__", "unknown")
        if name is None:
            name = self._to_camel_case(python_name.strip("_"))
        if passthrough is None:
            passthrough = is_passthrough(func)

        impl_min, impl_max = _positional_arity(func)
        if passthrough:
            # the decorator answers a call with no arguments itself
            impl_min = 0

        if signature is None:
            count = impl_max if impl_max is not None else impl_min
            signature = Signature(tuple(optional(ParamType.ANY) for _ in range(count)), ParamType.ANY)
        elif isinstance(signature, str):
            signature = Signature.parse(signature)

        declared_max = signature.max_args
        fits = impl_min <= signature.min_args and (
            impl_max is None or (declared_max is not None and declared_max <= impl_max)
        )
        if not fits:
            raise SignatureMismatchError(
                ErrorTemplate.signature_arity_mismatch(
                    name,
                    len(signature.params),
                    _describe_arity(impl_min, impl_max),
                )
            )

        if name in self._functions:
            logger.debug("Replacing registered function '%s'", name)
        self._functions[name] = FunctionDescriptor(
            python_name=python_name,
            name=name,
            implementation=func,
            signature=signature,
            passthrough=passthrough,
        )

    def bind(self, host: JsonataHost | None) -> None:
        """Bind every registered function into host.

        Calls ``host.register_function(name, implementation, signature)``
        once per function, in registration order.

        Raises:
            InvalidHostError: If host is None or has no callable
                register_function
        """
        register_function = getattr(host, "register_function", None)
        if host is None or not callable(register_function):
            raise InvalidHostError(ErrorTemplate.invalid_host())

        for descriptor in self._functions.values():
            rendered = descriptor.signature.render()
            logger.debug("Binding '%s' as %s", descriptor.name, rendered)
            register_function(descriptor.name, descriptor.implementation, rendered)

    def freeze(self) -> None:
        """Prevent further registrations."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        """Whether register() is disabled."""
        return self._frozen

    def has_function(self, name: str) -> bool:
        """Check if function is registered.

        Args:
            name: Host function name

        Returns:
            True if function is registered
        """
        return name in self._functions

    def get_python_name(self, name: str) -> str | None:
        """Get Python function name for a host function name."""
        descriptor = self._functions.get(name)
        return descriptor.python_name if descriptor else None

    def list_functions(self) -> list[str]:
        """List all registered host function names, in registration order."""
        return list(self._functions.keys())

    def get_function_info(self, name: str) -> FunctionDescriptor | None:
        """Get function descriptor by host name.

        Example:
            >>> registry = ExtensionRegistry()
            >>> def parse_path(value=None): return value
            >>> registry.register(parse_path)
            >>> registry.get_function_info("parsePath").python_name
            'parse_path'
        """
        return self._functions.get(name)

    def get_callable(self, name: str) -> Callable[..., Any] | None:
        """Get the underlying callable for a registered function."""
        descriptor = self._functions.get(name)
        return descriptor.implementation if descriptor else None

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(ExtensionRegistry())
            'ExtensionRegistry(functions=0)'
        """
        return f"ExtensionRegistry(functions={len(self._functions)})"

    def copy(self) -> ExtensionRegistry:
        """Create an unfrozen shallow copy of this registry.

        Descriptors are shared (they are immutable); adding functions to the
        copy does not affect the original.
        """
        new_registry = ExtensionRegistry()
        new_registry._functions = self._functions.copy()
        return new_registry

    @staticmethod
    def _to_camel_case(snake_case: str) -> str:
        """Convert Python snake_case to host camelCase.

        Examples:
            >>> ExtensionRegistry._to_camel_case("shorten_uuid")
            'shortenUuid'
            >>> ExtensionRegistry._to_camel_case("truncate")
            'truncate'
        """
        components = snake_case.split("_")
        return components[0] + "".join(comp.capitalize() for comp in components[1:])

