"""Fully qualified name helpers shared by the entry processors."""

from typing import Any, Optional

from ..core.annotations import DisplayName, UnlocalizedName


def dot_name(namespace: str, name: str) -> str:
    return f"{namespace}.{name}"


def underscore_name(namespace: str, name: str) -> str:
    return f"{namespace}_{name}"


def resolve_unlocalized_name(namespace: str, name: str, override: DisplayName) -> Optional[str]:
    """Resolve the display name for an entry, or None when no override applies.

    ``DEFAULT`` derives it from the entry name; an explicit string is
    namespaced the same way.
    """
    if override is UnlocalizedName.NONE:
        return None
    if override is UnlocalizedName.DEFAULT:
        return dot_name(namespace, name)
    return dot_name(namespace, override)


def apply_unlocalized_name(entry: Any, unlocalized_name: str) -> None:
    setter = getattr(entry, "set_unlocalized_name", None)
    if callable(setter):
        setter(unlocalized_name)
    else:
        entry.unlocalized_name = unlocalized_name
