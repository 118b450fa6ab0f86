import logging
from enum import Enum
from typing import Dict, Mapping, Optional, Protocol

from ..core.config_manager import ConfigManager


class EntryKind(str, Enum):
    """Channels a feature gate is queried on."""

    ITEM = "items"
    BLOCK = "blocks"


class FeatureGate(Protocol):
    def is_entry_enabled(self, kind: EntryKind, name: str) -> bool: ...


class FeatureManager:
    """Feature gate backed by per-kind enable/disable switches.

    Names without an explicit switch fall back to ``default_enabled``.
    Lookups are case-insensitive.
    """

    def __init__(
        self,
        default_enabled: bool = True,
        switches: Optional[Mapping[EntryKind, Mapping[str, bool]]] = None,
    ):
        self.default_enabled = default_enabled
        self.logger = logging.getLogger(__name__)
        self._switches: Dict[EntryKind, Dict[str, bool]] = {kind: {} for kind in EntryKind}
        for kind, values in (switches or {}).items():
            for name, enabled in values.items():
                self.set_enabled(kind, name, enabled)

    @classmethod
    def from_config(cls, config_manager: ConfigManager) -> "FeatureManager":
        """Build a manager from the ``features`` section of the settings."""
        features = config_manager.settings().features
        return cls(
            default_enabled=features.default_enabled,
            switches={EntryKind.ITEM: features.items, EntryKind.BLOCK: features.blocks},
        )

    def set_enabled(self, kind: EntryKind, name: str, enabled: bool) -> None:
        self._switches[EntryKind(kind)][name.lower()] = bool(enabled)

    def is_entry_enabled(self, kind: EntryKind, name: str) -> bool:
        return self._switches[EntryKind(kind)].get(name.lower(), self.default_enabled)

    def is_item_enabled(self, name: str) -> bool:
        return self.is_entry_enabled(EntryKind.ITEM, name)

    def is_block_enabled(self, name: str) -> bool:
        return self.is_entry_enabled(EntryKind.BLOCK, name)

    def disabled(self, kind: EntryKind) -> list[str]:
        """Names explicitly switched off for ``kind``."""
        return [name for name, enabled in self._switches[EntryKind(kind)].items() if not enabled]
