"""Tests for item and block registration"""

from typing import Annotated, Optional
from unittest.mock import Mock

import pytest

from modreg.core.annotations import (
    NO_TILE_ENTITY,
    IgnoreFeature,
    RegisterBlock,
    RegisterItem,
    RegisterTileEntity,
    UnlocalizedName,
)
from modreg.gates import EntryKind
from modreg.registration import (
    RegisterableBlock,
    register_blocks,
    register_items,
    resolve_unlocalized_name,
)


class Item:
    def __init__(self):
        self.unlocalized_name = None

    def set_unlocalized_name(self, name):
        self.unlocalized_name = name


class Pickaxe(Item):
    pass


class Block:
    unlocalized_name = None


class Furnace(Block, RegisterableBlock):
    def __init__(self):
        self.setup_calls = []

    def setup_block(self, namespace, name, tile_entity, item_block):
        self.setup_calls.append((namespace, name, tile_entity, item_block))


class FurnaceItem:
    pass


class FurnaceTile:
    pass


class CoreTile:
    pass


class TestUnlocalizedName:
    """Test cases for display name resolution"""

    def test_none(self):
        assert resolve_unlocalized_name("mymod", "pickaxe", UnlocalizedName.NONE) is None

    def test_default(self):
        assert resolve_unlocalized_name("mymod", "pickaxe", UnlocalizedName.DEFAULT) == "mymod.pickaxe"

    def test_explicit(self):
        assert resolve_unlocalized_name("mymod", "pickaxe", "pick") == "mymod.pick"


class TestRegisterItems:
    """Test cases for simple entry registration"""

    def test_default_display_name(self, features, item_factories, target):
        """Items register as namespace.name and get the same display name"""

        class Items:
            pickaxe: Annotated[Pickaxe, RegisterItem("pickaxe", UnlocalizedName.DEFAULT)] = None

        assert register_items(Items, "mymod", features, item_factories, target, Item) == ["pickaxe"]

        assert target.entries.get("mymod.pickaxe") is Items.pickaxe
        assert isinstance(Items.pickaxe, Pickaxe)
        assert Items.pickaxe.unlocalized_name == "mymod.pickaxe"

    def test_display_name_variants(self, features, item_factories, target):
        """No override leaves the display name unset; explicit overrides are namespaced"""

        class Items:
            plain: Annotated[Item, RegisterItem("plain", UnlocalizedName.NONE)] = None
            fancy: Annotated[Item, RegisterItem("fancy", "shiny")] = None

        register_items(Items, "mymod", features, item_factories, target, Item)

        assert Items.plain.unlocalized_name is None
        assert Items.fancy.unlocalized_name == "mymod.shiny"
        assert set(target.entries_for("mymod")) == {"mymod.plain", "mymod.fancy"}

    def test_optional_item(self, features, item_factories, target):
        """Fields declared Optional are registered like plain ones"""

        class Items:
            pickaxe: Annotated[Optional[Pickaxe], RegisterItem("pickaxe")] = None
            shovel: Annotated[Item | None, RegisterItem("shovel")] = None

        assert register_items(Items, "mymod", features, item_factories, target, Item) == ["pickaxe", "shovel"]
        assert isinstance(Items.pickaxe, Pickaxe)
        assert target.entries.get("mymod.shovel") is Items.shovel
        assert Items.shovel.unlocalized_name == "mymod.shovel"

    def test_disabled_item(self, features, target):
        """Disabled items are neither built nor registered"""
        features.set_enabled(EntryKind.ITEM, "pickaxe", False)
        factories = Mock()

        class Items:
            pickaxe: Annotated[Item, RegisterItem("pickaxe")] = None

        assert register_items(Items, "mymod", features, factories, target, Item) == []
        factories.construct.assert_not_called()
        assert Items.pickaxe is None
        assert len(target.entries) == 0

    def test_custom_factory_may_skip(self, features, item_factories, target):
        """A factory returning None skips the entry"""
        item_factories.register("pickaxe", lambda: None)

        class Items:
            pickaxe: Annotated[Item, RegisterItem("pickaxe")] = None
            shovel: Annotated[Item, RegisterItem("shovel")] = None

        assert register_items(Items, "mymod", features, item_factories, target, Item) == ["shovel"]
        assert "mymod.pickaxe" not in target.entries

    def test_ignored_item(self, features, item_factories, target):
        """Ignored fields are never registered"""

        class Items:
            debug: Annotated[Item, IgnoreFeature(), RegisterItem("debug")] = None

        register_items(Items, "mymod", features, item_factories, target, Item)
        assert Items.debug is None
        assert len(target.entries) == 0


class TestRegisterBlocks:
    """Test cases for compound entry registration"""

    def test_furnace_with_nested_tile_entity(self, features, block_factories, target):
        """Blocks use underscore ids, register companions, record types and run the hook"""

        class Blocks:
            furnace: Annotated[
                Furnace,
                RegisterBlock(
                    "furnace",
                    item_block=FurnaceItem,
                    tile_entity=FurnaceTile,
                    tile_entities=(RegisterTileEntity("core", CoreTile),),
                ),
            ] = None

        assert register_blocks(Blocks, "mymod", features, block_factories, target, Block) == ["furnace"]

        furnace = Blocks.furnace
        assert target.entries.get("mymod_furnace") is furnace
        assert target.companion("mymod_furnace") is FurnaceItem
        assert target.record_types.get("mymod_furnace") is FurnaceTile
        assert target.record_types.get("mymod_core") is CoreTile
        assert furnace.unlocalized_name == "mymod.furnace"
        assert furnace.setup_calls == [("mymod", "furnace", FurnaceTile, FurnaceItem)]

    def test_no_tile_entity_sentinel(self, features, block_factories, target):
        """The 'no tile entity' marker is treated as absent"""

        class Blocks:
            stone: Annotated[Block, RegisterBlock("stone", UnlocalizedName.NONE, tile_entity=NO_TILE_ENTITY)] = None

        register_blocks(Blocks, "mymod", features, block_factories, target, Block)

        assert "mymod_stone" in target.entries
        assert len(target.record_types) == 0
        assert target.companion("mymod_stone") is None
        assert Blocks.stone.unlocalized_name is None

    def test_hook_receives_normalized_tile_entity(self, features, block_factories, target):
        """Blocks without a tile entity get None in the setup hook"""

        class Blocks:
            furnace: Annotated[Furnace, RegisterBlock("furnace", "oven")] = None

        register_blocks(Blocks, "mymod", features, block_factories, target, Block)

        assert Blocks.furnace.setup_calls == [("mymod", "furnace", None, None)]
        assert Blocks.furnace.unlocalized_name == "mymod.oven"

    def test_disabled_block_skips_nested_entries(self, features, block_factories, target):
        """Nested tile entities are only registered with their enabled block"""
        features.set_enabled(EntryKind.BLOCK, "FURNACE", False)

        class Blocks:
            furnace: Annotated[
                Furnace,
                RegisterBlock("furnace", tile_entities=(RegisterTileEntity("core", CoreTile),)),
            ] = None

        assert register_blocks(Blocks, "mymod", features, block_factories, target, Block) == []
        assert len(target.record_types) == 0

    def test_duplicate_entry_rejected(self, features, block_factories, target):
        """The host registry refuses a second entry with the same id"""

        class Blocks:
            first: Annotated[Block, RegisterBlock("stone")] = None
            second: Annotated[Block, RegisterBlock("stone")] = None

        with pytest.raises(KeyError, match="already registered"):
            register_blocks(Blocks, "mymod", features, block_factories, target, Block)
