"""Battles, the town inn, the shop and the running game statistics."""

from __future__ import annotations

import random
import sys
from collections import Counter, deque
from typing import TYPE_CHECKING, Callable, Protocol

from textrpg.items import ATTACK_POTION_NAME, HEALTH_POTION_NAME, AttackPotion, HealthPotion
from textrpg.monsters import (
    Boss,
    Dryad,
    Gargoyle,
    Goblin,
    Griffon,
    Harpy,
    IronGolem,
    Lich,
    Lizardman,
    Manticore,
    Monster,
    Nightmare,
    Vampire,
    Werewolf,
)

if TYPE_CHECKING:
    from textrpg.character import Character

INN_PRICE = 5
HEALTH_POTION_PRICE = 10
ATTACK_POTION_PRICE = 20
HEALTH_POTION_SELL_PRICE = 6
ATTACK_POTION_SELL_PRICE = 12
LINE = "=========================================="

_LOW_TIER = (Goblin, Werewolf, Lizardman, Harpy)
_MIDDLE_TIER = (Gargoyle, Dryad, Lich, Vampire)
_HIGH_TIER = (IronGolem, Manticore, Griffon, Nightmare)


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


class _StdinTokens:
    """Hands out whitespace-separated tokens from standard input."""

    def __init__(self) -> None:
        self._pending: deque[str] = deque()

    def __call__(self) -> str:
        while not self._pending:
            self._pending.extend(input().split())
        return self._pending.popleft()


class GameManager:
    """Runs battles and the shop, and keeps statistics for the session."""

    def __init__(
        self,
        rng: _RandRange | None = None,
        read: Callable[[], str] | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self._interactive = read is None
        self.read: Callable[[], str] = read if read is not None else _StdinTokens()
        self.write: Callable[[str], None] = write if write is not None else print
        self.kill_log: dict[str, int] = {}
        self.total_gold_earned = 0
        self.total_item_used = 0

    # Terminal helpers -------------------------------------------------------

    def _pause(self) -> None:
        if self._interactive:
            try:
                input("계속하려면 엔터 키를 누르세요...")
            except EOFError:
                pass

    def _clear(self) -> None:
        if self._interactive:
            sys.stdout.write("\033[2J\033[H")
            sys.stdout.flush()

    def _read_int(self) -> int | None:
        try:
            return int(self.read())
        except ValueError:
            return None

    # Monster creation -------------------------------------------------------

    def generate_monster(self, level: int) -> Monster:
        """Pick a random monster from the tier that fits the player's level."""
        if level < 5:
            tier = _LOW_TIER
        elif level < 8:
            tier = _MIDDLE_TIER
        else:
            tier = _HIGH_TIER
        return tier[self.rng.randrange(len(tier))](level)

    def generate_boss(self, level: int) -> Boss:
        boss = Boss(level)
        self.write(boss.intro)
        return boss

    # Battle -----------------------------------------------------------------

    def battle(self, player: Character, monster: Monster) -> None:
        """Fight until the player or the monster falls."""
        self.write(f"\n!! 야생의 {monster.name}이(가) 나타났다! !!")
        self._pause()
        self._clear()
        while not player.is_dead() and not monster.is_dead():
            self._clear()
            self.write("[PLAYER TURN]")
            self.write("1. 공격")
            self.write("2. 아이템 사용")
            self.write("선택: ")
            choice = self._read_int()

            if choice == 1:
                self._player_attack(player, monster)
            elif choice == 2:
                self._use_item_in_battle(player)
                continue
            else:
                self.write("잘못된 선택입니다.")
                continue

            if monster.is_dead():
                if self._reward(player, monster):
                    return
                break

            self.write(LINE)
            self.write("[MONSTER TURN]")
            if isinstance(monster, Boss) and self.rng.randrange(10) < 3:
                monster.use_special_skill(player, self.rng)
            else:
                self._monster_attack(player, monster)
            if player.is_dead():
                return
            self._pause()
        self._pause()

    def _player_attack(self, player: Character, monster: Monster) -> None:
        damage = player.attack
        self.write(f"\n{LINE}")
        self.write("[PLAYER TURN]")
        self.write(f"{player.name}의 공격!")
        monster.take_damage(damage)
        self.write(f">> {monster.name}에게 {damage}의 데미지!")
        self.write(f">> 남은 체력 : {monster.health}")
        self.write(f"{LINE}\n")

    def _monster_attack(self, player: Character, monster: Monster) -> None:
        damage = monster.attack_damage(self.rng)
        self.write(f"{monster.name}의 공격!")
        player.take_damage(damage)
        self.write(f">> {player.name}에게 {damage}의 데미지!")
        self.write(f">> 남은 체력 :{player.health}")
        self.write(f"{LINE}\n")

    def _use_item_in_battle(self, player: Character) -> None:
        self.display_inventory(player)
        self.write("아이템 번호를 선택하세요. (EXIT: 0): ")
        token = self.read()
        if token == "0":
            self.write("인벤토리 종료")
            return
        try:
            index = int(token) - 1
        except ValueError:
            index = -1
        if not 0 <= index < len(player.inventory):
            self.write("잘못된 인덱스입니다.")
            self._pause()
            return
        player.use_item(index)
        self.add_item_use_log()
        self._pause()

    def _reward(self, player: Character, monster: Monster) -> bool:
        """Hand out the spoils; return True when the fallen monster was the boss."""
        self.write(f"{monster.name}을(를) 처치했다! ")
        player.increment_defeated_monsters()
        self.increment_kill_log(monster.name)
        player.add_exp(self.rng.randrange(21) + 35)
        gold = self.rng.randrange(11) + 20
        player.add_gold(gold)
        self.add_gold_log(gold)
        if self.rng.randrange(10) < 7:
            player.add_item(HealthPotion())
        else:
            player.add_item(AttackPotion())

        if isinstance(monster, Boss):
            return True

        self.show_player_status(player)
        self.write("\n상점을 방문하시겠습니까? (Y/N): ")
        answer = self.read()[:1]
        if answer in ("Y", "y"):
            self.go_store(player)
        elif answer not in ("N", "n"):
            self.write("잘못된 선택입니다")
        return False

    # Menus and status ---------------------------------------------------------

    def show_player_status(self, player: Character) -> None:
        self.write("\n--- 내 정보 ---")
        self.write(player.status_report())
        self.write("---------------")

    def display_inventory(self, player: Character) -> None:
        """List carried items grouped by name, in the order first picked up."""
        self.write("\n--- 인벤토리 ---")
        if not player.inventory:
            self.write("가방이 비어있습니다.")
        else:
            counts = Counter(item.name for item in player.inventory)
            for number, (name, count) in enumerate(counts.items(), start=1):
                self.write(f"{number}. {name} x{count}")
        self.write("----------------")

    def go_to_town(self, player: Character) -> None:
        """Rest at the inn for a fee and recover all health."""
        if player.spend_gold(INN_PRICE):
            player.full_heal()
            self.write(
                "마을의 여관에서 편안하게 휴식하여 모든 체력을 회복하고, "
                f"{INN_PRICE} 골드를 지불했습니다."
            )
        else:
            self.write(f"골드가 부족하여 여관에서 쉴 수 없습니다. (필요 골드: {INN_PRICE})")
            self.write(f"현재 보유 골드: {player.gold} 골드")

    # Statistics ---------------------------------------------------------------

    def increment_kill_log(self, name: str) -> None:
        self.kill_log[name] = self.kill_log.get(name, 0) + 1

    def add_gold_log(self, amount: int) -> None:
        self.total_gold_earned += amount

    def add_item_use_log(self) -> None:
        self.total_item_used += 1

    def show_statistics(self) -> None:
        self.write("\n===== 게임 통계 =====")
        self.write(">> 몬스터 처치 내역")
        for name, count in sorted(self.kill_log.items()):
            self.write(f"- {name}: {count}마리")
        self.write(f"\n>> 총 골드 획득량: {self.total_gold_earned} G")
        self.write(f">> 총 아이템 사용 횟수: {self.total_item_used}회")

    # Shop ---------------------------------------------------------------------

    def go_store(self, player: Character) -> None:
        """Shop menu: buy, sell, or leave."""
        self._clear()
        while True:
            self.write("==== 상점 ====")
            self.write(f"현재 골드: {player.gold}")
            self.write("1.아이템 구매")
            self.write("2.아이템 판매")
            self.write("3.상점 나가기")
            self.write("선택: ")
            choice = self._read_int()
            if choice is None:
                self._clear()
                self.write("잘못된 입력입니다.")
                continue
            if choice == 1:
                self.buy_store(player)
                self._clear()
            elif choice == 2:
                self.sell_store(player)
                self._clear()
            elif choice == 3:
                return
            else:
                self.write("잘못된 입력입니다.")

    def buy_store(self, player: Character) -> None:
        self._clear()
        self.write("좋은물건을 골라보시지요")
        self.write(f"현재 골드: {player.gold}")
        self.write(f"1.체력 포션____{HEALTH_POTION_PRICE}골드")
        self.write(f"2.힘의 영약____{ATTACK_POTION_PRICE}골드")
        self.write("3.상점 나가기")
        self.write("선택: ")
        choice = self._read_int()
        if choice == 1:
            self._buy(player, HealthPotion(), HEALTH_POTION_PRICE)
        elif choice == 2:
            self._buy(player, AttackPotion(), ATTACK_POTION_PRICE)
        elif choice == 3:
            return
        else:
            self.write("잘못된 선택입니다.")
            self._pause()

    def _buy(self, player: Character, item, price: int) -> None:
        if player.spend_gold(price):
            player.add_item(item)
            self.write(f"{item.name}을 구매했습니다")
        else:
            self.write("골드가 모자라군")
            self._pause()

    def sell_store(self, player: Character) -> None:
        self._clear()
        self.write("어떤물건을 파실건가요")
        self.write(f"현재 골드: {player.gold}")
        if not player.inventory:
            self.write(" - 팔 물건 없음")
            self._pause()
            return
        prices = {
            ATTACK_POTION_NAME: ATTACK_POTION_SELL_PRICE,
            HEALTH_POTION_NAME: HEALTH_POTION_SELL_PRICE,
        }
        for number, item in enumerate(player.inventory, start=1):
            if item.name in prices:
                self.write(f"{number}. {item.name}____{prices[item.name]}골드")
        self.write("0.상점 나가기")
        self.write("선택: ")
        choice = self._read_int()
        if choice == 0:
            return
        if choice is not None and 0 < choice <= len(player.inventory):
            index = choice - 1
            item = player.inventory[index]
            price = (
                ATTACK_POTION_SELL_PRICE
                if item.name == ATTACK_POTION_NAME
                else HEALTH_POTION_SELL_PRICE
            )
            player.add_gold(price)
            player.remove_item(index)
        else:
            self.write("잘못된 선택입니다.")