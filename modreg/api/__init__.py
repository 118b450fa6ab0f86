"""API module for modreg"""

from .exceptions import (
    ConfigurationError,
    ConstructionError,
    FieldBindingError,
    ModregError,
    NamespaceAlreadyRegisteredError,
)
from .modreg_sdk import Modreg

__all__ = [
    "ConfigurationError",
    "ConstructionError",
    "FieldBindingError",
    "Modreg",
    "ModregError",
    "NamespaceAlreadyRegisteredError",
]
