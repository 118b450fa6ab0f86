"""
modreg Config Module

Binds annotated configuration fields to a persisted (category, name) store,
one property table per namespace.

Example usage:

    from typing import Annotated
    from modreg.config import ConfigRegistry, MemoryStore
    from modreg.core.annotations import ConfigProperty

    class Settings:
        max_size: Annotated[int, ConfigProperty("general", "maxSize")] = 10

    configs = ConfigRegistry()
    mod_config = configs.register("mymod", MemoryStore(), Settings)
    mod_config.get_property("GENERAL", "maxsize").value  # 10
"""

from .binding import PropertyBinding, SetResult
from .registry import CONFIG_VALUE_TYPES, ConfigRegistry, ModConfig
from .store import ConfigStore, FileStore, MemoryStore

__all__ = [
    "CONFIG_VALUE_TYPES",
    "ConfigRegistry",
    "ConfigStore",
    "FileStore",
    "MemoryStore",
    "ModConfig",
    "PropertyBinding",
    "SetResult",
]
