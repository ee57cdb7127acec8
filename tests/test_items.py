import pytest

from battlestar.items import (
    Armour,
    Item,
    ItemType,
    Potion,
    Weapon,
    WeaponType,
    parse_item,
)


class _Target:
    def __init__(self):
        self.calls = []

    def take_damage(self, amount):
        self.calls.append(("take_damage", amount))

    def heal(self, amount):
        self.calls.append(("heal", amount))

    def equip_armour(self, armour):
        self.calls.append(("equip_armour", armour))


@pytest.mark.parametrize(
    "weapon_type, effect",
    [(WeaponType.SWORD, 0), (WeaponType.BOW, -5), (WeaponType.STAFF, -10)],
)
def test_weapon_speed_effect_follows_type(weapon_type, effect):
    weapon = Weapon("w", "d", 10, weapon_type, 0)
    assert weapon.speed_effect == effect


def test_changing_weapon_type_keeps_speed_effect():
    weapon = Weapon("w", "d", 10, WeaponType.BOW, 0)
    weapon.weapon_type = WeaponType.SWORD
    assert weapon.speed_effect == -5


def test_default_items():
    weapon = Weapon()
    armour = Armour()
    potion = Potion()
    assert (weapon.name, weapon.damage, weapon.weapon_type) == ("Default Weapon", 0, WeaponType.SWORD)
    assert (armour.name, armour.armour_stat) == ("Default Armour", 0)
    assert (potion.name, potion.recovery_amount) == ("Default Potion", 0)
    assert weapon.item_type is ItemType.WEAPON
    assert armour.item_type is ItemType.ARMOUR
    assert potion.item_type is ItemType.POTION


def test_explicit_time_is_kept():
    potion = Potion("p", "d", 5, 2.5)
    assert potion.time_earned == 2.5


@pytest.mark.parametrize("given", [None, -1.0])
def test_missing_time_uses_elapsed_clock(given):
    first = Item(ItemType.POTION, "a", "", given)
    second = Item(ItemType.POTION, "b", "", given)
    assert first.time_earned >= 0
    assert second.time_earned >= first.time_earned


def test_potion_text():
    potion = Potion("Health Potion", "Restores health", 20, 0)
    assert str(potion) == (
        "Name: Health Potion\n"
        "Description: Restores health\n"
        "Type: POTION\n"
        "Recovery Amount: 20\n"
    )


def test_armour_text_uses_armor_label():
    armour = Armour("God", "Divine Armour of the Gods", 10, 0)
    assert str(armour).splitlines() == [
        "Name: God",
        "Description: Divine Armour of the Gods",
        "Type: ARMOR",
        "Armour Stat: 10",
    ]


def test_weapon_text_shows_numeric_type():
    weapon = Weapon("Longbow", "precise", 60, WeaponType.BOW, 0)
    lines = str(weapon).splitlines()
    assert lines[2] == "Type: WEAPON"
    assert lines[3] == "Damage: 60"
    assert lines[4] == f"Weapon Type: {int(WeaponType.BOW)}"


def test_potion_serialize_layout():
    potion = Potion("Health Potion", "Restores health", 20, 1.5)
    assert potion.serialize() == "2\nHealth Potion\nRestores health\n1.5\n20"


def test_weapon_round_trip():
    weapon = Weapon("Excalibur", "legendary", 100, WeaponType.STAFF, 3.25)
    back = Weapon.deserialize(weapon.serialize())
    assert (back.name, back.description, back.damage, back.weapon_type, back.speed_effect, back.time_earned) == (
        "Excalibur", "legendary", 100, WeaponType.STAFF, weapon.speed_effect, 3.25
    )


def test_armour_round_trip():
    armour = Armour("Helmet", "Protective helmet", 10, 0.75)
    back = Armour.deserialize(armour.serialize())
    assert (back.name, back.description, back.armour_stat, back.time_earned) == (
        "Helmet", "Protective helmet", 10, 0.75
    )


def test_potion_round_trip_with_empty_description():
    potion = Potion("Antidote", "", 25, 4.0)
    back = Potion.deserialize(potion.serialize())
    assert (back.name, back.description, back.recovery_amount) == ("Antidote", "", 25)


def test_generic_item_round_trip():
    item = Item(ItemType.ARMOUR, "Cloak", "light", 2.0)
    back = Item.deserialize(item.serialize())
    assert (back.item_type, back.name, back.description, back.time_earned) == (
        ItemType.ARMOUR, "Cloak", "light", 2.0
    )


def test_deserialize_wrong_type_raises():
    armour = Armour("Helmet", "hat", 10, 0)
    with pytest.raises(ValueError):
        Potion.deserialize(armour.serialize())


@pytest.mark.parametrize("data", ["", "garbage", "2\nname\ndesc\nsoon\n20", "1\na\nb\n0.0\nx"])
def test_deserialize_bad_data_raises(data):
    with pytest.raises(ValueError):
        parse_item(data)


def test_parse_item_dispatches_on_type():
    samples = [
        Weapon("w", "d", 5, WeaponType.BOW, 0),
        Armour("a", "d", 6, 0),
        Potion("p", "d", 7, 0),
    ]
    parsed = [parse_item(item.serialize()) for item in samples]
    assert [type(item) for item in parsed] == [Weapon, Armour, Potion]
    assert [item.name for item in parsed] == ["w", "a", "p"]


def test_parse_item_unknown_type_raises():
    with pytest.raises(ValueError):
        parse_item("7\nname\ndesc\n0.0\n1")


def test_clone_is_independent():
    weapon = Weapon("Sword", "sharp", 75, WeaponType.SWORD, 0)
    twin = weapon.clone()
    twin.damage += 10
    assert weapon.damage == 75
    assert twin.damage == 85
    assert type(twin) is Weapon
    assert twin.time_earned == weapon.time_earned


def test_weapon_use_deals_damage():
    target = _Target()
    Weapon("Sword", "sharp", 30, WeaponType.SWORD, 0).use(target)
    assert target.calls == [("take_damage", 30)]


def test_potion_use_heals():
    target = _Target()
    Potion("Health Potion", "Restores health", 20, 0).use(target)
    assert target.calls == [("heal", 20)]


def test_armour_use_equips_itself():
    target = _Target()
    armour = Armour("Helmet", "hat", 10, 0)
    armour.use(target)
    assert target.calls == [("equip_armour", armour)]


def test_generic_item_use_has_no_effect():
    target = _Target()
    Item(ItemType.WEAPON, "stick").use(target)
    assert target.calls == []