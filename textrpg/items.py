"""Consumable items that a character can carry and use."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from textrpg.character import Character

HEALTH_POTION_NAME = "체력 포션"
ATTACK_POTION_NAME = "힘의 영약"
ATTACK_POTION_BONUS = 20


class Item:
    """An item with a name and, by default, no effect."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    def use(self, character: Character) -> None:
        """Apply the item's effect to the character."""
        character.echo("[아이템 사용] 효과가 없는 아이템입니다.")


class HealthPotion(Item):
    """Restores the character to full health."""

    def __init__(self) -> None:
        super().__init__(HEALTH_POTION_NAME)

    def use(self, character: Character) -> None:
        character.heal(character.max_health)
        character.echo("[아이템 사용] 체력이 모두 회복되었습니다!")


class AttackPotion(Item):
    """Permanently raises the character's attack."""

    def __init__(self) -> None:
        super().__init__(ATTACK_POTION_NAME)

    def use(self, character: Character) -> None:
        character.add_attack(ATTACK_POTION_BONUS)
        character.echo(f"[아이템 사용] 공격력이 {ATTACK_POTION_BONUS} 증가했습니다!")