"""Registration targets that constructed entries are handed to."""

import logging
from typing import Any, Dict, Optional, Protocol

from ..core.registry import Registry

logger = logging.getLogger(__name__)


class RegistrationTarget(Protocol):
    def register_entry(self, name: str, instance: Any, companion: Optional[type] = None) -> None: ...

    def register_record_type(self, record_type: type, name: str) -> None: ...


class HostRegistry:
    """In-memory registration target.

    Keeps registered entries, their companion types and record types by fully
    qualified name and rejects duplicates.
    """

    def __init__(self, name: str = "host"):
        self.name = name
        self.entries = Registry(f"{name} entries")
        self.record_types = Registry(f"{name} record types")
        self._companions: Dict[str, type] = {}

    def register_entry(self, name: str, instance: Any, companion: Optional[type] = None) -> None:
        self.entries.add(name, instance)
        if companion is not None:
            self._companions[name] = companion
        logger.debug(f"Registered entry {name}")

    def register_record_type(self, record_type: type, name: str) -> None:
        self.record_types.add(name, record_type)
        logger.debug(f"Registered record type {record_type.__name__} as {name}")

    def companion(self, name: str) -> Optional[type]:
        return self._companions.get(name)

    def entries_for(self, namespace: str) -> Dict[str, Any]:
        """Entries registered under ``namespace`` by either naming scheme."""
        found = self.entries.with_prefix(f"{namespace}.")
        found.update(self.entries.with_prefix(f"{namespace}_"))
        return found

    def __repr__(self) -> str:
        return (
            f"HostRegistry(name={self.name!r}, entries={len(self.entries)}, "
            f"record_types={len(self.record_types)})"
        )
