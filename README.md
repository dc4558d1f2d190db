# textrpg

This is a small turn-based role-playing game that runs in the terminal.
The game text is in Korean.

You start by creating a hero. A main menu then lets you view your
stats, rest at the town inn, trade potions in the shop and hunt
monsters. Once you are strong enough you can challenge the boss.

## Installing

```
pip install .
```

## Playing

```
textrpg
```

`textrpg --help` shows the command's usage. The command has no other
options.

The title menu offers:

1. Start a game. The game asks for a character name, and the name must not be blank.
2. Quit.

The in-game menu offers:

1. Character status: level, health, attack, experience, gold, kills and carried items.
2. Town: pay 5 gold at the inn to restore full health.
3. Shop: buy a health potion (`체력 포션`) for 10 gold or a strength elixir
   (`힘의 영약`) for 20 gold. You can sell them back for 6 and 12 gold.
4. Hunting ground: fight a random monster from the tier that fits your level.
   Levels 1–4 meet the low tier, 5–7 the middle tier and 8 and up the high tier.
5. Boss: needs level 2 or higher.
6. Battle log: monsters defeated, by name, plus total gold earned and items used in battle.
7. Quit.

### Battles

In a battle you either attack or use an item from your bag. A monster hits
for its base attack plus 0–10. On its turn the boss uses its corruption
skill 30% of the time, which adds 20 more damage.

Each win gives:

- 35–55 experience and 20–30 gold.
- A potion drop: a health potion 70% of the time, otherwise a strength elixir.
- After a normal monster, an offer to visit the shop.

A health potion restores full health. A strength elixir raises attack by
20 for good. Every 100 experience raises your level, up to level 10.

### How a game ends

- Falling in battle shows a game-over screen and ends the program.
- Defeating the boss shows a victory screen and ends the program with exit status 0.

When the game is played on a terminal it waits for Enter between screens.
It clears the screen with ANSI escape codes.

## Using the pieces in code

The game logic lives in plain classes that you can drive directly:

```python
import random

from textrpg.character import Character
from textrpg.items import HealthPotion
from textrpg.monsters import Goblin

hero = Character("Ari")
hero.add_item(HealthPotion())

goblin = Goblin(hero.level)
goblin.take_damage(hero.attack)
print(goblin.is_dead())

hero.take_damage(goblin.attack_damage(random.Random(1)))
hero.use_item_by_name("체력 포션")
```

- `textrpg.items`: `Item`, `HealthPotion` and `AttackPotion`.
- `textrpg.character`: `Character`.
  - Its messages go through its `echo` callable, which is `print` by default.
  - `status_report()` returns the status sheet as text.
  - `use_item` and `remove_item` raise `IndexError` for a bad index.
  - `use_item_by_name` raises `LookupError` when no carried item has that name.
  - `Character.get_instance()` and `Character.reset_instance()` manage the one
    character that the running game shares.
- `textrpg.monsters`: `Monster`, the twelve regular monsters and `Boss`.
  - `Monster.attack_damage` and the boss skills take an optional random
    generator with a `randrange` method.
- `textrpg.gamemanager`: `GameManager`, which runs battles, the shop, the town
  inn and the statistics.
  - It takes a random generator, a `read` callable that returns one input token
    per call, and a `write` callable.
  - When `read` is given, it does not pause or clear the screen.
- `textrpg.game`: the title menu (`main`), `create_character(read, write)` and
  `start_game_loop(manager, player, read, write)`.
  - These read one line per call, so a whole game can be scripted.
  - `start_game_loop` returns `True` when the player quits and `False` when the
    player dies. It raises `SystemExit(0)` once the boss is defeated.

## What it does not do

The game keeps nothing between runs. It has no save or load, and the
character and battle log are lost when the program exits.

## Running the tests

```
pip install .[test]
pytest
```