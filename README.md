# battlestar

A small text-based role-playing game played in the terminal. You walk
through a 4x4 grid of rooms, clear out enemies for experience, pick up
potions, weapons and armour, and save your progress to a file to continue
later.

## Installing

```
pip install .
```

## Playing

```
battlestar
```

`battlestar --help` shows the usage; the command takes no options. The
game reads its answers from standard input and ends when input runs out.

The main menu offers:

1. **Start Game**: type `New Game` or `Load Game` (case-insensitive).
   A new game asks for your weapon type (1 = Sword, 2 = Staff, 3 = Bow;
   anything else gives Sword). Load Game asks for the name of a save file.
2. **Settings**: type a difficulty, `Rookie`, `Elite` or `Battlestar`
   (case-insensitive). The menu remembers the choice; a new game itself
   always starts at Elite difficulty.
3. **Exit**

In a game you type one of these commands:

| Command  | What it does                                                  |
|----------|---------------------------------------------------------------|
| `save`   | Save to `savefile.json`, then continue (1) or return to the menu (2) |
| `quit`   | Leave the game                                                |
| `move`   | Move `up`, `down`, `left` or `right`                          |
| `pickup` | Pick up every item in the current room                        |
| `equip`  | Equip a weapon or armour from your inventory by its exact name |
| `use`    | Drink a potion from your inventory by its exact name          |
| `print`  | Show your inventory                                           |

The map is laid out the same way in every new game: eight rooms hold one
or two enemies, the last room holds the Super Enemy, and potions, weapons
of your chosen type, armour, a super weapon and a super armour are spread
over the other rooms.

Moving into a room with enemies clears them and gives you the room's
experience. While your experience is over 100, 100 points are spent to
raise your health and damage by 10% and your inventory's capacity by 25%.

A weapon can only be equipped if it suits your attack type: melee
characters wield swords, ranged characters bows and staffs. The player
starts as a ranged character.

## What it does not do

- Entering a room with enemies does not start a fight: the enemies are
  simply removed and you always win. `battlestar.combat.Combat` can run a
  turn-based battle in code, but the game loop does not use it.
- The save file is a plain line-based text format, despite its `.json`
  name; it cannot be read by JSON tools.

## Using the pieces in code

The game is built from modules you can use on their own:

- `battlestar.items`: `Item`, `Potion`, `Weapon`, `Armour`, `ItemType`,
  `WeaponType`, `parse_item`
- `battlestar.stack`: `ItemStack`, a quantity of one item
- `battlestar.inventory`: `Inventory`, stacks of items with a capacity
  that doubles when full, lookup by item or by name, and sorting
- `battlestar.sorting`: `compare`, `ItemSorter`, `InsertionSort`,
  `MergeSort`, `CompareBy`, `SortOrder`
- `battlestar.character`: `Character`, `AttackType`
- `battlestar.heap`: `heapify_up`, `heapify_down`, `heapsort`, ordering
  fighters by speed
- `battlestar.combat`: `Combat`, a battle where the first fighter is the
  player; pass `choose` to pick targets without reading standard input
- `battlestar.difficulty`: `Difficulty`, `Level`
- `battlestar.room` and `battlestar.gamemap`: `Room`, `GameMap`
- `battlestar.persistence`: `save_state`, `load_state`, `SavedState`,
  `TextState`
- `battlestar.menu`: `MainMenu`; `battlestar.game`: `Game`, `GameState`,
  `main`

```python
from battlestar.character import Character
from battlestar.items import Potion

hero = Character("Hero")
hero.pick_up(Potion("Health Potion", "Restores health", 20))
hero.use_item("Health Potion")
print(hero.health)  # 120
```

Every stateful piece can be written out as text and read back:

```python
from battlestar.gamemap import GameMap
from battlestar.items import WeaponType

world = GameMap()
world.distribute(WeaponType.BOW)
copy = GameMap.deserialize(world.serialize())
print(len(copy), copy.room_has_enemies(15))  # 16 True
```

## Running the tests

```
pip install ".[test]"
pytest
```