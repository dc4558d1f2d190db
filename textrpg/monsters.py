"""Monsters met in the hunting grounds, and the final boss."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from textrpg.character import Character

DAMAGE_VARIANCE = 10
BOSS_SKILL_BONUS = 20


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


class Monster:
    """A monster with a name, health and base attack."""

    def __init__(self, name: str, health: int, attack: int) -> None:
        self.name = name
        self.health = health
        self.attack = attack

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"health={self.health}, attack={self.attack})"
        )

    def attack_damage(self, rng: _RandRange | None = None) -> int:
        """Damage for one hit: base attack plus 0 to 10."""
        rng = rng if rng is not None else random
        return self.attack + rng.randrange(DAMAGE_VARIANCE + 1)

    def take_damage(self, damage: int) -> None:
        self.health = max(self.health - damage, 0)

    def is_dead(self) -> bool:
        return self.health <= 0


# Low tier: player levels 1-4.
class Goblin(Monster):
    def __init__(self, player_level: int) -> None:
        super().__init__("고블린", 35 + 5 * player_level, 5 + 10 * player_level)


class Werewolf(Monster):
    def __init__(self, player_level: int) -> None:
        super().__init__("웨어 울프", 45 + 5 * player_level, 10 + 10 * player_level)


class Lizardman(Monster):
    def __init__(self, player_level: int) -> None:
        super().__init__("리자드맨", 60 + 5 * player_level, 15 + 10 * player_level)


class Harpy(Monster):
    def __init__(self, player_level: int) -> None:
        super().__init__("하피", 75 + 5 * player_level, 20 + 10 * player_level)


# Middle tier: player levels 5-7.
class Gargoyle(Monster):
    def __init__(self, player_level: int) -> None:
        super().__init__("가고일", 250 + 3 * player_level, 60 + 6 * player_level)


class Dryad(Monster):
    def __init__(self, player_level: int) -> None:
        super().__init__("드라이어드", 200 + 3 * player_level, 75 + 6 * player_level)


class Lich(Monster):
    def __init__(self, player_level: int) -> None:
        super().__init__("리치", 180 + 3 * player_level, 85 + 6 * player_level)


class Vampire(Monster):
    def __init__(self, player_level: int) -> None:
        super().__init__("뱀파이어", 220 + 3 * player_level, 65 + 6 * player_level)


# High tier: player levels 8 and up.
class IronGolem(Monster):
    def __init__(self, player_level: int) -> None:
        super().__init__("아이언 골렘", 650 + 2 * player_level, 90 + 4 * player_level)


class Griffon(Monster):
    def __init__(self, player_level: int) -> None:
        super().__init__("그리폰", 400 + 2 * player_level, 110 + 4 * player_level)


class Nightmare(Monster):
    def __init__(self, player_level: int) -> None:
        super().__init__("나이트 메어", 380 + 2 * player_level, 120 + 4 * player_level)


class Manticore(Monster):
    def __init__(self, player_level: int) -> None:
        super().__init__("만티코어", 550 + 2 * player_level, 120 + 4 * player_level)


class Boss(Monster):
    """The final boss. Its stats do not depend on the player's level."""

    def __init__(self, player_level: int) -> None:
        super().__init__("미켈라의 칼날 말레니아", 200, 1)
        self.intro = f"몸은 금빛을 잃고, 피는 부패하니....[{self.name}]패배를 모르는 싸움을...."

    def corruption_skill(self, player: Character, rng: _RandRange | None = None) -> int:
        """Hit the player with the corruption skill; return the damage dealt."""
        damage = self.attack_damage(rng) + BOSS_SKILL_BONUS
        player.echo("==========================================")
        player.echo("[MONSTER TURN]")
        player.echo(f"{self.name}의 스킬 [부패] 시전!!")
        player.take_damage(damage)
        player.echo(
            f"{self.name}이(가) {player.name}에게[{damage}]피해를 입혔다."
            f"(남은 체력: {player.health})"
        )
        player.echo("==========================================\n")
        return damage

    def use_special_skill(self, player: Character, rng: _RandRange | None = None) -> int:
        """Announce and perform the special skill; return the damage dealt."""
        player.echo("보스의 [자세]가 이상합니다.")
        player.echo("==========================================\n")
        return self.corruption_skill(player, rng)