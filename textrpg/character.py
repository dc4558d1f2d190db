"""The player character: stats, experience, gold and inventory."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Callable, ClassVar

if TYPE_CHECKING:
    from textrpg.items import Item

MAX_LEVEL = 10
EXP_PER_LEVEL = 100


class Character:
    """A player character. One shared instance is kept for the running game."""

    _instance: ClassVar[Character | None] = None

    def __init__(self, name: str) -> None:
        self.name = name
        self.level = 1
        self.max_health = 200
        self.health = 200
        self.attack = 30
        self.exp = 0
        self.gold = 0
        self.defeated_monsters = 0
        self.inventory: list[Item] = []
        self.echo: Callable[[str], None] = print

        self.echo(f"\n[{self.name}]")
        self.echo(f"레벨: {self.level}")
        self.echo(f"체력: {self.health}")
        self.echo(f"공격력: {self.attack}")

    def __repr__(self) -> str:
        return f"Character(name={self.name!r}, level={self.level})"

    @classmethod
    def get_instance(cls, name: str = "") -> Character:
        """Return the shared character, creating it with ``name`` if needed."""
        if cls._instance is None:
            cls._instance = cls(name)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared character."""
        cls._instance = None

    def status_report(self) -> str:
        """Return the status sheet as text."""
        lines = [
            "===== 캐릭터 상태 =====",
            f"이름: {self.name}",
            f"레벨: {self.level}",
            f"체력: {self.health}/{self.max_health}",
            f"공격력: {self.attack}",
            f"경험치: {self.exp}/{EXP_PER_LEVEL}",
            f"골드: {self.gold}",
            f"처치한 몬스터: {self.defeated_monsters}마리",
            "보유 아이템:",
        ]
        if not self.inventory:
            lines.append(" - 없음")
        else:
            counts = Counter(item.name for item in self.inventory)
            lines.extend(
                f"{number}. {name} x{count}"
                for number, (name, count) in enumerate(sorted(counts.items()), start=1)
            )
        lines.append("========================")
        return "\n".join(lines)

    def display_status(self) -> None:
        for line in self.status_report().split("\n"):
            self.echo(line)

    def level_up(self) -> None:
        """Raise the level by one, up to the level cap."""
        if self.level >= MAX_LEVEL:
            return
        self.level += 1
        self.max_health += self.level * 20
        self.attack += self.level * 5
        self.health = self.max_health
        self.echo("[레벨업!]")
        self.echo(f"레벨: {self.level}")
        self.echo(f"체력: {self.health}")
        self.echo(f"공격력: {self.attack}")

    def is_dead(self) -> bool:
        return self.health <= 0

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.inventory):
            raise IndexError("잘못된 인덱스입니다.")

    def use_item(self, index: int) -> None:
        """Use the item at ``index`` and remove it from the inventory."""
        self._check_index(index)
        item = self.inventory[index]
        item.use(self)
        del self.inventory[index]

    def add_item(self, item: Item) -> None:
        self.inventory.append(item)

    def remove_item(self, index: int) -> Item:
        """Remove and return the item at ``index``."""
        self._check_index(index)
        return self.inventory.pop(index)

    def heal(self, amount: int) -> None:
        self.health = min(self.health + amount, self.max_health)

    def add_attack(self, amount: int) -> None:
        self.attack += amount

    def add_gold(self, amount: int) -> None:
        self.gold += amount
        self.echo(f"[Gold +{amount}] 현재 골드: {self.gold}")

    def spend_gold(self, amount: int) -> bool:
        """Pay ``amount`` if there is enough gold; report whether it was paid."""
        if self.gold >= amount:
            self.gold -= amount
            return True
        return False

    def add_exp(self, amount: int) -> None:
        self.exp += amount
        self.echo(f"[EXP +{amount}] 현재 경험치: {self.exp}")
        while self.exp >= EXP_PER_LEVEL:
            self.exp -= EXP_PER_LEVEL
            self.level_up()

    def increment_defeated_monsters(self) -> None:
        self.defeated_monsters += 1

    def take_damage(self, amount: int) -> None:
        self.health = max(self.health - amount, 0)

    def full_heal(self) -> None:
        self.health = self.max_health

    def use_item_by_name(self, item_name: str) -> None:
        """Use the first carried item called ``item_name``."""
        index = next(
            (i for i, item in enumerate(self.inventory) if item.name == item_name),
            None,
        )
        if index is None:
            raise LookupError("해당 아이템을 보유하고 있지 않습니다.")
        self.use_item(index)