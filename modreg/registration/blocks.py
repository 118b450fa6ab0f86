from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional

from ..core.annotations import NO_TILE_ENTITY, RegisterBlock
from ..core.scanner import FieldSlot, process_annotations
from ..factories.factory import FactoryRegistry
from ..gates.feature_gate import EntryKind, FeatureGate
from .naming import apply_unlocalized_name, resolve_unlocalized_name, underscore_name
from .target import RegistrationTarget


class RegisterableBlock(ABC):
    """Blocks that want a callback once they have been registered."""

    @abstractmethod
    def setup_block(
        self,
        namespace: str,
        name: str,
        tile_entity: Optional[type],
        item_block: Optional[type],
    ) -> None:
        pass


@dataclass
class BlockProcessor:
    """
    Registers compound entries as ``namespace_name``.

    Besides the block itself this registers its tile entity under the same id,
    runs the ``RegisterableBlock`` hook and registers nested tile entities
    under their own ``namespace_name`` ids.
    """

    namespace: str
    features: FeatureGate
    target: RegistrationTarget

    def entry_name(self, tag: RegisterBlock, slot: FieldSlot) -> str:
        return tag.name

    def is_enabled(self, name: str) -> bool:
        return self.features.is_entry_enabled(EntryKind.BLOCK, name)

    def process(self, entry: Any, tag: RegisterBlock, slot: FieldSlot) -> None:
        name = tag.name
        item_block = tag.item_block
        tile_entity = tag.tile_entity
        if tile_entity is NO_TILE_ENTITY:
            tile_entity = None

        block_name = underscore_name(self.namespace, name)
        self.target.register_entry(block_name, entry, item_block)

        unlocalized_name = resolve_unlocalized_name(self.namespace, name, tag.unlocalized_name)
        if unlocalized_name is not None:
            apply_unlocalized_name(entry, unlocalized_name)

        if tile_entity is not None:
            self.target.register_record_type(tile_entity, block_name)

        if isinstance(entry, RegisterableBlock):
            entry.setup_block(self.namespace, name, tile_entity, item_block)

        for te in tag.tile_entities:
            self.target.register_record_type(te.cls, underscore_name(self.namespace, te.name))


def register_blocks(
    holder: type,
    namespace: str,
    features: FeatureGate,
    factories: FactoryRegistry,
    target: RegistrationTarget,
    block_type: type,
) -> List[str]:
    """Construct and register every ``RegisterBlock`` field of ``holder``."""
    return process_annotations(
        holder,
        block_type,
        RegisterBlock,
        factories,
        BlockProcessor(namespace, features, target),
    )
