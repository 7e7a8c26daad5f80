"""Extension runtime: signatures, registries and host binding.

Python 3.13+.
"""

from .function_bridge import ExtensionRegistry, FunctionDescriptor, JsonataHost
from .function_metadata import (
    EXTENSION_FUNCTIONS,
    FunctionCategory,
    FunctionMetadata,
    Modifier,
    ParamSpec,
    ParamType,
    Signature,
)
from .functions import create_default_registry, get_shared_registry, register

__all__ = [
    "EXTENSION_FUNCTIONS",
    "ExtensionRegistry",
    "FunctionCategory",
    "FunctionDescriptor",
    "FunctionMetadata",
    "JsonataHost",
    "Modifier",
    "ParamSpec",
    "ParamType",
    "Signature",
    "create_default_registry",
    "get_shared_registry",
    "register",
]
