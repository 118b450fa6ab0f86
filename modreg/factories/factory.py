"""
Factory registry for constructing registered entries.

A factory registry holds optional per-name construction callables. Entries
without a custom factory are built by calling their declared field type with
no arguments.
"""
import logging
from typing import Any, Callable, Generic, Optional, TypeVar

from ..api.exceptions import ConstructionError
from ..core.registry import Registry

T = TypeVar("T")

Factory = Callable[[], Optional[T]]


class FactoryRegistry(Generic[T]):
    """
    Factory registry for one kind of entry (e.g. items or blocks).
    Names are matched case-insensitively, like feature switches.

    A custom factory may return None, which tells the scanner to skip the
    entry without treating it as an error.
    """

    def __init__(self, kind: str = "entries"):
        self.kind = kind
        self._factories = Registry(f"{kind} factories", case_insensitive=True)
        self.logger = logging.getLogger(__name__)

    def register(self, name: str, factory: Factory[T], overwrite: bool = False) -> None:
        """
        Register a custom factory.

        Args:
            name: Entry name the factory builds (e.g. 'pickaxe')
            factory: Zero-argument callable returning the entry or None
            overwrite: Replace an existing factory for the same name
        """
        self._factories.add(name, factory, overwrite=overwrite)

    def decorator(self, name: str) -> Callable[[Factory[T]], Factory[T]]:
        """Return a decorator that registers a factory under `name`."""
        return self._factories.register(name)

    def has_custom_factory(self, name: str) -> bool:
        return name in self._factories

    def get_available_factories(self) -> list[str]:
        return list(self._factories.keys())

    def construct(self, name: str, declared_type: Any) -> Optional[T]:
        """
        Construct the entry for `name`.

        Args:
            name: Entry name resolved from the field's tag
            declared_type: Type the holder field is declared as

        Returns:
            The new entry, or None if a custom factory declined to build one

        Raises:
            ConstructionError: If construction fails or yields the wrong type
        """
        factory = self._factories.get(name)
        try:
            if factory is not None:
                entry = factory()
            else:
                entry = declared_type()
        except Exception as e:
            raise ConstructionError(
                f"Failed to construct {self.kind} entry '{name}' of type {declared_type!r}"
            ) from e

        if entry is None:
            self.logger.debug(f"Factory for '{name}' returned no instance")
            return None

        if isinstance(declared_type, type) and not isinstance(entry, declared_type):
            raise ConstructionError(
                f"Factory for '{name}' returned {type(entry).__name__}, "
                f"expected {declared_type.__name__}"
            )
        return entry
