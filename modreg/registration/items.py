from dataclasses import dataclass
from typing import Any, List

from ..core.annotations import RegisterItem
from ..core.scanner import FieldSlot, process_annotations
from ..factories.factory import FactoryRegistry
from ..gates.feature_gate import EntryKind, FeatureGate
from .naming import apply_unlocalized_name, dot_name, resolve_unlocalized_name
from .target import RegistrationTarget


@dataclass
class ItemProcessor:
    """Registers simple entries as ``namespace.name``."""

    namespace: str
    features: FeatureGate
    target: RegistrationTarget

    def entry_name(self, tag: RegisterItem, slot: FieldSlot) -> str:
        return tag.name

    def is_enabled(self, name: str) -> bool:
        return self.features.is_entry_enabled(EntryKind.ITEM, name)

    def process(self, entry: Any, tag: RegisterItem, slot: FieldSlot) -> None:
        name = dot_name(self.namespace, tag.name)
        self.target.register_entry(name, entry)

        unlocalized_name = resolve_unlocalized_name(self.namespace, tag.name, tag.unlocalized_name)
        if unlocalized_name is not None:
            apply_unlocalized_name(entry, unlocalized_name)


def register_items(
    holder: type,
    namespace: str,
    features: FeatureGate,
    factories: FactoryRegistry,
    target: RegistrationTarget,
    item_type: type,
) -> List[str]:
    """Construct and register every ``RegisterItem`` field of ``holder``.

    Returns the names of the holder fields that were filled in.
    """
    return process_annotations(
        holder,
        item_type,
        RegisterItem,
        factories,
        ItemProcessor(namespace, features, target),
    )
