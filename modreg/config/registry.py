"""Per-namespace property tables and the registry that owns them.

A ``ConfigRegistry`` is created once at start-up and passed to every caller
that registers or looks up configuration. Each namespace is scanned exactly
once; registering it a second time is an error.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

from ..api.exceptions import ConfigurationError, NamespaceAlreadyRegisteredError
from ..core.annotations import MISSING, ConfigProperty
from ..core.scanner import FieldSlot, iter_fields, process_annotations
from .binding import MULTI_VALUE_TYPES, PropertyBinding
from .store import ConfigStore

logger = logging.getLogger(__name__)

# Field types eligible for configuration binding
CONFIG_VALUE_TYPES = (bool, int, float, str) + MULTI_VALUE_TYPES


class ModConfig:
    """Configuration of one namespace: its store, holder and property table.

    Lookups fold case on category and name. Listing returns names with the
    case they were declared with.
    """

    def __init__(
        self,
        namespace: str,
        store: ConfigStore,
        holder: type,
        config_file: Optional[Path] = None,
    ):
        self.namespace = namespace
        self.holder = holder
        self.config_file = config_file
        self._store = store
        self._properties: Dict[str, Dict[str, PropertyBinding]] = {}

    def _add(self, binding: PropertyBinding) -> None:
        row = self._properties.setdefault(binding.category.lower(), {})
        existing = row.get(binding.name.lower())
        if existing is not None:
            raise ConfigurationError(
                f"Property {binding.category}.{binding.name} in '{self.namespace}' is declared by "
                f"both {existing.field_name} and {binding.field_name}"
            )
        row[binding.name.lower()] = binding

    def save(self) -> bool:
        """Flush the store if it holds unsaved changes. Returns True if flushed."""
        if not self._store.has_changed():
            return False
        self._store.save()
        return True

    def reload(self) -> None:
        """Re-sync every bound field from the store."""
        for binding in self.properties():
            binding.update_value_from_store()

    def categories(self) -> List[str]:
        return [next(iter(row.values())).category for row in self._properties.values()]

    def names(self, category: str) -> List[str]:
        return [b.name for b in self._properties.get(category.lower(), {}).values()]

    def get_property(self, category: str, name: str) -> Optional[PropertyBinding]:
        return self._properties.get(category.lower(), {}).get(name.lower())

    def properties(self) -> List[PropertyBinding]:
        return [b for row in self._properties.values() for b in row.values()]

    def __len__(self) -> int:
        return sum(len(row) for row in self._properties.values())

    def __repr__(self) -> str:
        return f"ModConfig(namespace={self.namespace!r}, properties={len(self)})"


class _ConfigProcessor:
    """Turns each tagged configuration field into a PropertyBinding."""

    def __init__(self, mod_config: ModConfig, store: ConfigStore):
        self.mod_config = mod_config
        self.store = store

    def entry_name(self, tag: ConfigProperty, slot: FieldSlot) -> str:
        return tag.name or slot.name

    def is_enabled(self, name: str) -> bool:
        return True

    def process(self, entry: Any, tag: ConfigProperty, slot: FieldSlot) -> None:
        binding = PropertyBinding(
            namespace=self.mod_config.namespace,
            store=self.store,
            slot=slot,
            category=tag.category,
            name=self.entry_name(tag, slot),
            default=entry,
            comment=tag.comment,
        )
        self.mod_config._add(binding)


def _seed_default(tag: ConfigProperty, slot: FieldSlot) -> Any:
    # the tag default wins over the class body value
    value = tag.default if tag.default is not MISSING else slot.read()
    return None if value is MISSING else value


def _snapshot_fields(holder: type) -> Dict[str, Any]:
    return {slot.name: vars(holder).get(slot.name, MISSING) for slot in iter_fields(holder)}


def _restore_fields(holder: type, snapshot: Dict[str, Any]) -> None:
    for name, value in snapshot.items():
        if value is not MISSING:
            setattr(holder, name, value)
        elif name in vars(holder):
            delattr(holder, name)


class ConfigRegistry:
    """Process-wide map from namespace id to its ModConfig."""

    def __init__(self) -> None:
        self._configs: Dict[str, ModConfig] = {}

    def register(
        self,
        namespace: str,
        store: ConfigStore,
        holder: type,
        config_file: Optional[Path] = None,
    ) -> ModConfig:
        """
        Scan ``holder`` and bind its configuration fields to ``store``.

        Every property is collected and its stored value checked before any
        value is loaded. If that fails the holder fields are put back and the
        store is left untouched, so the namespace can be registered again.

        Raises:
            NamespaceAlreadyRegisteredError: If the namespace is already registered
            ConfigurationError: On a duplicate property or an invalid stored value
        """
        key = namespace.lower()
        if key in self._configs:
            raise NamespaceAlreadyRegisteredError(namespace)

        mod_config = ModConfig(namespace, store, holder, config_file)
        snapshot = _snapshot_fields(holder)
        try:
            process_annotations(
                holder,
                CONFIG_VALUE_TYPES,
                ConfigProperty,
                None,
                _ConfigProcessor(mod_config, store),
                seed=_seed_default,
                warn_untagged=False,
            )
            for binding in mod_config.properties():
                binding.check_stored_value()
        except Exception:
            _restore_fields(holder, snapshot)
            raise

        mod_config.reload()
        self._configs[key] = mod_config
        logger.info(f"Registered {len(mod_config)} properties for namespace '{namespace}'")
        return mod_config

    def get(self, namespace: str) -> Optional[ModConfig]:
        return self._configs.get(namespace.lower())

    def namespaces(self) -> FrozenSet[str]:
        return frozenset(self._configs)

    def __contains__(self, namespace: object) -> bool:
        return isinstance(namespace, str) and namespace.lower() in self._configs

    def __len__(self) -> int:
        return len(self._configs)
