"""Main modreg service class

Bundles the namespace registry, feature gate, factory registries and
registration target that one process initialisation works with.
"""

from pathlib import Path
from typing import FrozenSet, List, Optional

from ..config.registry import ConfigRegistry, ModConfig
from ..config.store import ConfigStore
from ..core.config_manager import ConfigManager
from ..core.logger_setup import setup_logging
from ..factories.factory import FactoryRegistry
from ..gates.feature_gate import FeatureGate, FeatureManager
from ..registration.blocks import register_blocks
from ..registration.items import register_items
from ..registration.target import HostRegistry, RegistrationTarget


class Modreg:
    """Registration service, created once at start-up and passed around.

    Every collaborator can be swapped for another implementation of the same
    protocol.
    """

    def __init__(
        self,
        features: Optional[FeatureGate] = None,
        target: Optional[RegistrationTarget] = None,
        item_factories: Optional[FactoryRegistry] = None,
        block_factories: Optional[FactoryRegistry] = None,
    ):
        """Initialize modreg.

        Args:
            features: Feature gate, defaults to everything enabled
            target: Registration target, defaults to an in-memory HostRegistry
            item_factories: Factories for item entries
            block_factories: Factories for block entries
        """
        self.configs = ConfigRegistry()
        self.features = features if features is not None else FeatureManager()
        self.target = target if target is not None else HostRegistry()
        self.item_factories = item_factories or FactoryRegistry("items")
        self.block_factories = block_factories or FactoryRegistry("blocks")

    @classmethod
    def from_settings(cls, config_manager: ConfigManager, configure_logging: bool = True) -> "Modreg":
        """Create a service whose feature gate and logging come from settings.

        Args:
            config_manager: Loaded ConfigManager
            configure_logging: Also set up the ``modreg`` logger
        """
        if configure_logging:
            setup_logging(config_manager)
        return cls(features=FeatureManager.from_config(config_manager))

    # ---- Configuration namespaces ----
    def register_namespace(
        self,
        namespace: str,
        store: ConfigStore,
        holder: type,
        config_file: Optional[Path] = None,
    ) -> ModConfig:
        return self.configs.register(namespace, store, holder, config_file)

    def get_namespace(self, namespace: str) -> Optional[ModConfig]:
        return self.configs.get(namespace)

    def list_namespaces(self) -> FrozenSet[str]:
        return self.configs.namespaces()

    # ---- Object registration ----
    def register_items(self, holder: type, namespace: str, item_type: type) -> List[str]:
        return register_items(holder, namespace, self.features, self.item_factories, self.target, item_type)

    def register_blocks(self, holder: type, namespace: str, block_type: type) -> List[str]:
        return register_blocks(holder, namespace, self.features, self.block_factories, self.target, block_type)
