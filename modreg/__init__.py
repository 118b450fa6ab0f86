"""
modreg - declarative field registration

Scans annotated class fields, gates them through a feature switch, builds
them with pluggable factories and registers the results. The same scan binds
configuration fields to a persisted (namespace, category, name) store.
"""

from .api.exceptions import (
    ConfigurationError,
    ConstructionError,
    FieldBindingError,
    ModregError,
    NamespaceAlreadyRegisteredError,
)
from .api.modreg_sdk import Modreg
from .config import ConfigRegistry, FileStore, MemoryStore, ModConfig, PropertyBinding, SetResult
from .core.annotations import (
    NO_TILE_ENTITY,
    ConfigProperty,
    IgnoreFeature,
    RegisterBlock,
    RegisterItem,
    RegisterTileEntity,
    UnlocalizedName,
)
from .core.scanner import FieldSlot, iter_fields, process_annotations
from .factories import FactoryRegistry
from .gates import EntryKind, FeatureManager
from .registration import HostRegistry, RegisterableBlock, register_blocks, register_items

__version__ = "0.1.0"
__all__ = [
    "NO_TILE_ENTITY",
    "ConfigProperty",
    "ConfigRegistry",
    "ConfigurationError",
    "ConstructionError",
    "EntryKind",
    "FactoryRegistry",
    "FeatureManager",
    "FieldBindingError",
    "FieldSlot",
    "FileStore",
    "HostRegistry",
    "IgnoreFeature",
    "MemoryStore",
    "ModConfig",
    "Modreg",
    "ModregError",
    "NamespaceAlreadyRegisteredError",
    "PropertyBinding",
    "RegisterBlock",
    "RegisterItem",
    "RegisterTileEntity",
    "RegisterableBlock",
    "SetResult",
    "UnlocalizedName",
    "iter_fields",
    "process_annotations",
    "register_blocks",
    "register_items",
]
