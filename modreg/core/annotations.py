"""Metadata tags attached to holder fields through ``typing.Annotated``.

Tags are plain frozen dataclasses. A holder declares them next to the field
type, and the scanner reads them back without any further parsing::

    class Items:
        pickaxe: Annotated[Item, RegisterItem("pickaxe")] = None
        debug_stick: Annotated[Item, IgnoreFeature()] = None

    class Settings:
        max_size: Annotated[int, ConfigProperty("general", "maxSize")] = 10
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple, Type, Union


class _Missing:
    """Sentinel for 'no value supplied'."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class UnlocalizedName(Enum):
    """Display name override states that are not an explicit string."""

    NONE = "[none]"
    DEFAULT = "[default]"


DisplayName = Union[UnlocalizedName, str]


class NoTileEntity:
    """Marker type meaning 'this block has no tile entity'."""


NO_TILE_ENTITY = NoTileEntity


@dataclass(frozen=True)
class IgnoreFeature:
    """Excludes a field from scanning even if it carries a valid tag."""


@dataclass(frozen=True)
class RegisterItem:
    name: str
    unlocalized_name: DisplayName = UnlocalizedName.DEFAULT


@dataclass(frozen=True)
class RegisterTileEntity:
    name: str
    cls: type


@dataclass(frozen=True)
class RegisterBlock:
    """Tag for compound block entries.

    ``item_block`` is the companion type handed to the registration target,
    ``tile_entity`` the record type registered under the block id and
    ``tile_entities`` extra record types registered under their own names.
    """

    name: str
    unlocalized_name: DisplayName = UnlocalizedName.DEFAULT
    item_block: Optional[type] = None
    tile_entity: Optional[Type[Any]] = NO_TILE_ENTITY
    tile_entities: Tuple[RegisterTileEntity, ...] = ()


@dataclass(frozen=True)
class ConfigProperty:
    """Tag for configuration fields.

    ``name`` defaults to the field name and ``default`` to the value assigned
    in the class body.
    """

    category: str
    name: Optional[str] = None
    comment: str = ""
    default: Any = MISSING
