import pytest

from battlestar.character import Character
from battlestar.combat import Combat
from battlestar.items import Weapon


def _enemy(name, health=100):
    enemy = Character(name)
    enemy.health = health
    return enemy


def _armed(character, damage):
    character.equip_weapon(Weapon())
    character.damage = damage
    return character


def _first_choice(options):
    return options[0][0]


def test_start_battle_with_one_enemy():
    player = _armed(Character("Player"), 200)
    enemy = _armed(_enemy("Enemy"), 10)
    combat = Combat([player, enemy], _first_choice)
    combat.start_battle()
    assert player.is_alive
    assert not enemy.is_alive
    assert not combat.enemies_remain()


def test_player_dies_during_combat():
    player = _armed(Character("Player"), 10)
    player.health = 50
    strong = _armed(_enemy("Strong Enemy", 100), 60)
    combat = Combat([player, strong], _first_choice)
    combat.start_battle()
    assert not player.is_alive
    assert strong.is_alive
    assert combat.player_dead()


def test_player_attacks_and_chooses_target():
    player = _armed(Character("Player"), 100)
    enemy1 = _armed(_enemy("Enemy1", 80), 1)
    enemy2 = _armed(_enemy("Enemy2", 60), 1)
    combat = Combat([player, enemy1, enemy2], lambda options: options[-1][0])
    combat.start_battle()
    assert enemy2.health < 60
    assert player.is_alive


def test_remove_fighter():
    player = Character("Player")
    enemy1 = _enemy("Enemy1")
    enemy2 = _enemy("Enemy2")
    combat = Combat([player, enemy1, enemy2])
    combat.remove_fighter("Enemy1")
    assert [fighter.name for fighter in combat.fighters] == ["Player", "Enemy2"]


def test_player_decides_who_to_attack_after_invalid_choice():
    player = Character("Player")
    enemy = _enemy("Enemy")
    answers = iter([0, 1])
    asked = []

    def choose(options):
        asked.append(list(options))
        return next(answers)

    combat = Combat([player, enemy], choose)
    assert combat.choose_target() == 1
    assert len(asked) == 2


def test_choose_target_skips_dead_enemies():
    player = Character("Player")
    dead = _enemy("Enemy1", 0)
    alive = _enemy("Enemy2", 40)
    seen = []

    def choose(options):
        seen.extend(index for index, _ in options)
        return 2

    combat = Combat([player, dead, alive], choose)
    assert combat.choose_target() == 2
    assert seen == [2]


def test_choose_target_without_enemies_raises():
    combat = Combat([Character("Player")], _first_choice)
    with pytest.raises(ValueError):
        combat.choose_target()


def test_start_battle_without_fighters_raises():
    with pytest.raises(ValueError):
        Combat([]).start_battle()


def test_enemies_remain_and_player_dead():
    player = Character("Player")
    combat = Combat([player, _enemy("Enemy")])
    assert combat.enemies_remain()
    assert not combat.player_dead()
    player.health = 0
    assert combat.player_dead()


def test_combat_keeps_its_own_fighter_list():
    fighters = [Character("Player"), _enemy("Enemy1")]
    combat = Combat(fighters)
    combat.remove_fighter("Enemy1")
    assert len(fighters) == 2
    assert len(combat.fighters) == 1