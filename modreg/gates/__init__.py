"""
modreg Gates Module

Feature gates decide whether a named entry is registered at all. The scanner
asks the gate before any factory is called; a disabled entry leaves its
holder field untouched.

Example usage:

    from modreg.gates import EntryKind, FeatureManager
    features = FeatureManager(switches={EntryKind.ITEM: {"pickaxe": False}})
    features.is_item_enabled("pickaxe")  # False
"""

from .feature_gate import EntryKind, FeatureGate, FeatureManager

__all__ = [
    "EntryKind",
    "FeatureGate",
    "FeatureManager",
]
