"""
modreg Registration Module

Scans holder classes for ``RegisterItem`` / ``RegisterBlock`` fields, builds
the entries and hands them to a registration target.

Example usage:

    from modreg.registration import HostRegistry, register_items
    target = HostRegistry()
    register_items(Items, "mymod", FeatureManager(), FactoryRegistry("items"), target, Item)
    target.entries.get("mymod.pickaxe")
"""

from .blocks import BlockProcessor, RegisterableBlock, register_blocks
from .items import ItemProcessor, register_items
from .naming import dot_name, resolve_unlocalized_name, underscore_name
from .target import HostRegistry, RegistrationTarget

__all__ = [
    "BlockProcessor",
    "HostRegistry",
    "ItemProcessor",
    "RegisterableBlock",
    "RegistrationTarget",
    "dot_name",
    "register_blocks",
    "register_items",
    "resolve_unlocalized_name",
    "underscore_name",
]
