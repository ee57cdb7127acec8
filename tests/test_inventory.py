import pytest

from battlestar.inventory import Inventory
from battlestar.items import Armour, Item, ItemType, Potion, Weapon, WeaponType
from battlestar.stack import ItemStack


def _sword(damage=10, name="Sword", when=0.0):
    return Weapon(name, "A basic sword", damage, WeaponType.SWORD, when)


def _potion(name="Health Potion", amount=20, when=0.0):
    return Potion(name, "Restores health", amount, when)


def _armour(name="Helmet", stat=10, when=0.0):
    return Armour(name, "Protective helmet", stat, when)


def test_new_inventory_is_empty():
    inventory = Inventory()
    assert len(inventory) == 0
    assert inventory.is_empty() is True
    assert str(inventory) == ""


def test_empty_serialization_pins_header():
    assert Inventory().serialize() == "0\n10\n"


def test_add_stores_a_copy():
    sword = _sword()
    inventory = Inventory()
    inventory.add(sword)
    stored = inventory.get(0)
    assert len(inventory) == 1
    assert stored.name == sword.name
    sword.name = "Renamed"
    assert inventory.get(0).name == "Sword"


def test_add_missing_item_raises():
    with pytest.raises(ValueError):
        Inventory().add(None)


def test_matching_potions_share_a_stack():
    inventory = Inventory()
    inventory.add(_potion())
    inventory.add(_potion())
    assert len(inventory) == 1
    inventory.remove(_potion())
    assert len(inventory) == 1
    inventory.remove(_potion())
    assert inventory.is_empty()


def test_add_with_quantity_needs_that_many_removals():
    inventory = Inventory()
    inventory.add(_potion(), 3)
    inventory.remove_named("Health Potion")
    inventory.remove_named("Health Potion")
    assert len(inventory) == 1
    inventory.remove_named("Health Potion")
    assert inventory.is_empty()


def test_weapons_with_different_damage_do_not_stack():
    inventory = Inventory()
    inventory.add(_sword(10))
    inventory.add(_sword(11))
    assert len(inventory) == 2
    assert inventory.count_named("Sword") == 2


def test_generic_items_never_stack():
    inventory = Inventory()
    inventory.add(Item(ItemType.POTION, "Mock"))
    inventory.add(Item(ItemType.POTION, "Mock"))
    assert len(inventory) == 2


def test_weapon_stack_removed_whole():
    inventory = Inventory()
    inventory.add(_sword())
    inventory.add(_sword())
    assert len(inventory) == 1
    inventory.remove(_sword())
    assert inventory.is_empty()


def test_find_and_find_named():
    inventory = Inventory()
    inventory.add(_armour())
    inventory.add(_sword(name="Helmet"))
    assert inventory.find(_armour()) == 0
    assert inventory.find(_armour(stat=99)) is None
    assert inventory.find(None) is None
    assert inventory.find_named("Helmet") == 0
    assert inventory.find_named("Helmet", ItemType.WEAPON) == 1
    assert inventory.find_named("Helmet", ItemType.POTION) is None
    assert inventory.find_named("Missing") is None


def test_remove_named_with_type():
    inventory = Inventory()
    inventory.add(_armour())
    inventory.add(_sword(name="Helmet"))
    inventory.remove_named("Helmet", ItemType.WEAPON)
    assert len(inventory) == 1
    assert inventory.get(0).item_type is ItemType.ARMOUR


def test_remove_keeps_remaining_order():
    inventory = Inventory()
    for name in ["a", "b", "c"]:
        inventory.add(_potion(name))
    inventory.remove_named("a")
    assert [inventory.get(i).name for i in range(len(inventory))] == ["b", "c"]


def test_remove_from_empty_raises():
    inventory = Inventory()
    with pytest.raises(IndexError):
        inventory.remove(_sword())
    with pytest.raises(IndexError):
        inventory.remove_named("Sword")


def test_remove_absent_raises():
    inventory = Inventory()
    inventory.add(_sword())
    with pytest.raises(ValueError):
        inventory.remove(_potion())
    with pytest.raises(ValueError):
        inventory.remove_named("Nothing")
    with pytest.raises(ValueError):
        inventory.remove_named("Sword", ItemType.ARMOUR)


def test_get_invalid_index_raises():
    inventory = Inventory()
    inventory.add(_sword())
    with pytest.raises(IndexError):
        inventory.get(-1)
    with pytest.raises(IndexError):
        inventory.get(1)


def test_full_inventory_grows_when_adding():
    inventory = Inventory(capacity=2)
    inventory.add(_potion("a"))
    inventory.add(_potion("b"))
    assert inventory.is_full() is True
    inventory.add(_potion("c"))
    assert len(inventory) == 3
    assert inventory.is_full() is False


def test_increase_capacity():
    inventory = Inventory(capacity=1)
    inventory.add(_potion())
    assert inventory.is_full()
    inventory.increase_capacity(1)
    assert not inventory.is_full()


def test_increase_capacity_by_percent_truncates():
    inventory = Inventory(capacity=3)
    inventory.add(_potion("a"))
    inventory.add(_potion("b"))
    assert not inventory.is_full()
    inventory.increase_capacity_by_percent(0.5)
    assert inventory.is_full()


def test_sort_alphabetically():
    inventory = Inventory()
    names = ["Warhammer", "Antidote", "Longbow", "Excalibur"]
    for name in names:
        inventory.add(_potion(name))
    inventory.sort_alphabetically()
    assert [inventory.get(i).name for i in range(len(inventory))] == sorted(names)


def test_latest_and_oldest_first():
    inventory = Inventory()
    for name, when in [("b", 2.0), ("c", 3.0), ("a", 1.0)]:
        inventory.add(_potion(name, when=when))
    inventory.latest_first()
    latest = [inventory.get(i).time_earned for i in range(len(inventory))]
    assert latest == sorted(latest, reverse=True)
    inventory.oldest_first()
    oldest = [inventory.get(i).time_earned for i in range(len(inventory))]
    assert oldest == sorted(oldest)


def test_type_listings():
    inventory = Inventory()
    sword, potion, armour = _sword(), _potion(), _armour()
    for item in (sword, potion, armour):
        inventory.add(item)
    assert inventory.weapons_text() == str(ItemStack(sword))
    assert inventory.potions_text() == str(ItemStack(potion))
    assert inventory.armour_text() == str(ItemStack(armour))


def test_str_lists_numbered_stacks():
    inventory = Inventory()
    sword, potion = _sword(), _potion()
    inventory.add(sword)
    inventory.add(potion)
    expected = f"Item 0:\n{ItemStack(sword)}\nItem 1:\n{ItemStack(potion)}\n"
    assert str(inventory) == expected


def test_copy_is_independent():
    original = Inventory()
    original.add(_armour())
    duplicate = original.copy()
    assert str(duplicate) == str(original)
    original.remove_named("Helmet")
    assert original.is_empty()
    assert len(duplicate) == 1
    assert duplicate.capacity == original.capacity


def test_serialize_round_trip():
    inventory = Inventory(capacity=4)
    inventory.add(_sword(when=1.5))
    inventory.add(_potion(when=2.25), 2)
    inventory.add(_armour(when=3.0))
    restored = Inventory.deserialize(inventory.serialize())
    assert str(restored) == str(inventory)
    assert len(restored) == len(inventory)
    assert restored.capacity == inventory.capacity
    assert restored.serialize() == inventory.serialize()


def test_serialize_marks_each_record():
    inventory = Inventory()
    inventory.add(_sword())
    inventory.add(_potion())
    assert inventory.serialize().count("|END_ITEM|\n") == 2


@pytest.mark.parametrize(
    "data",
    ["", "abc\n10\n", "3\n2\n", "0\n0\n", "-1\n10\n", "1\n10\n"],
)
def test_deserialize_rejects_bad_data(data):
    with pytest.raises(ValueError):
        Inventory.deserialize(data)


def test_deserialize_rejects_size_mismatch():
    inventory = Inventory()
    inventory.add(_sword())
    text = inventory.serialize().replace("1\n", "2\n", 1)
    with pytest.raises(ValueError):
        Inventory.deserialize(text)