"""Small name -> object registry with decorator support.

Used as the storage behind the factory registry and the in-memory host
registry. Keys are kept as given; a registry created with
``case_insensitive=True`` folds them to lower case on every access.

Example
    factories = Registry("factories")

    @factories.register("pickaxe")
    def make_pickaxe():
        ...

    assert factories.get("pickaxe") is make_pickaxe
    assert "pickaxe" in factories
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class Registry:
    """A generic registry rejecting duplicate names unless asked to overwrite."""

    def __init__(self, name: str = "registry", *, case_insensitive: bool = False) -> None:
        self._name = name
        self._case_insensitive = case_insensitive
        self._items: Dict[str, Any] = {}

    def _key(self, name: str) -> str:
        return name.lower() if self._case_insensitive else name

    # ---- Registration ----
    def register(self, name: Optional[str] = None) -> Callable[[T], T]:
        """Decorator to register an item under ``name``.

        If ``name`` is None, the class/function name is used.
        """

        def _decorator(obj: T) -> T:
            key = name or getattr(obj, "__name__", None)
            if not key:
                raise ValueError("Cannot infer name for registration; provide a name explicitly.")
            self.add(str(key), obj)
            return obj

        return _decorator

    def add(self, name: str, obj: Any, overwrite: bool = False) -> None:
        """Programmatically register an item."""
        key = self._key(name)
        if not overwrite and key in self._items:
            raise KeyError(f"{self._name}: '{name}' is already registered")
        self._items[key] = obj

    # ---- Lookup ----
    def get(self, name: str, default: Any = None) -> Any:
        return self._items.get(self._key(name), default)

    def require(self, name: str) -> Any:
        """Get an item or raise a KeyError if missing."""
        key = self._key(name)
        if key not in self._items:
            raise KeyError(f"{self._name}: '{name}' is not registered")
        return self._items[key]

    def __getitem__(self, name: str) -> Any:
        return self.require(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._items

    def keys(self) -> Iterable[str]:
        return self._items.keys()

    def items(self) -> Iterable[tuple[str, Any]]:
        return self._items.items()

    def with_prefix(self, prefix: str) -> Dict[str, Any]:
        """Items whose key starts with ``prefix`` (e.g. ``"mymod."``)."""
        prefix = self._key(prefix)
        return {k: v for k, v in self._items.items() if k.startswith(prefix)}

    # ---- Introspection ----
    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Registry(name={self._name!r}, items={len(self._items)})"
