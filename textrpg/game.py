"""Title screen, character creation and the main game menu."""

from __future__ import annotations

import argparse
import sys
import time
from enum import IntEnum
from typing import Callable

from textrpg.character import Character
from textrpg.gamemanager import GameManager

BOSS_REQUIRED_LEVEL = 2
STAR_LINE = "\n★ ========== ★ ========== ★ ========== ★"

_VICTORY_BANNER = (
    "===    =====   =       =======    ===    ======     ===",
    "===   =     =  =       =         =   =   =     =    ===",
    "===   =        =       ======   =======  ======     ===",
    "===   =     =  =       =        =     =  =    =     ===",
    "===    =====   ======= =======  =     =  =     =    ===",
)

_GAME_OVER_BANNER = (
    "=== GGGGG  AAA  M     M EEEEE      OOOOO  V       V EEEEE  RRRRR  ===",
    "=== G     A   A MM   MM E         O     O  V     V  E      R    R ===",
    "=== G GGG AAAAA M M M M EEEEE     O     O   V   V   EEEEE  RRRRR  ===",
    "=== G   G A   A M  M  M E         O     O    V V    E      R   R  ===",
    "=== GGGGG A   A M     M EEEEE      OOOOO      V     EEEEE  R    R ===",
)


class StartChoice(IntEnum):
    """Options on the title menu."""

    START_GAME = 1
    EXIT = 2


def _pause(interactive: bool) -> None:
    if interactive:
        try:
            input("계속하려면 엔터 키를 누르세요...")
        except EOFError:
            pass


def _clear(interactive: bool) -> None:
    if interactive:
        sys.stdout.write("\033[2J\033[H")
        sys.stdout.flush()


def _read_menu_choice(read: Callable[[], str], write: Callable[[str], None]) -> int:
    """Read lines until one starts with a whole number."""
    while True:
        tokens = read().split()
        if not tokens:
            continue
        try:
            return int(tokens[0])
        except ValueError:
            write("잘못된 입력입니다.: ")


def create_character(
    read: Callable[[], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> Character:
    """Ask for a name until it is not blank, then create the shared character."""
    interactive = read is None
    read = read if read is not None else input
    write = write if write is not None else print

    while True:
        _clear(interactive)
        write("==============================")
        write("        [캐릭터 생성]         ")
        write("==============================")
        write("이름을 입력하세요: ")
        name = read()
        if name.strip(" "):
            break
        write("\n[오류] 이름은 공백으로만 구성될 수 없습니다. 다시 입력해주세요.")
        _pause(interactive)

    _clear(interactive)
    write(f"[{name}]\n\n캐릭터 이름 등록 완료!")
    write(STAR_LINE)
    player = Character.get_instance(name)
    player.echo = write
    write(STAR_LINE)
    _pause(interactive)
    return player


def start_game_loop(
    manager: GameManager,
    player: Character,
    read: Callable[[], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> bool:
    """Run the main menu.

    Returns True when the player quits and False when the player dies.
    Defeating the boss ends the program with exit status 0.
    """
    interactive = read is None
    read = read if read is not None else input
    write = write if write is not None else print
    player.echo = write

    while True:
        _clear(interactive)
        write("\n===== 텍스트 RPG =====")
        write("1. 캐릭터 스탯 보기")
        write("2. 마을로 가기")
        write("3. 상점")
        write("4. 사냥터")
        write("5. 보스")
        write("6. 전투 기록 보기")
        write("7. 게임 종료")
        write("메뉴를 선택하세요: ")
        choice = _read_menu_choice(read, write)

        if choice == 1:
            write(player.status_report())
            _pause(interactive)
        elif choice == 2:
            manager.go_to_town(player)
            _pause(interactive)
        elif choice == 3:
            manager.go_store(player)
            _pause(interactive)
        elif choice == 4:
            monster = manager.generate_monster(player.level)
            manager.battle(player, monster)
            if player.is_dead():
                write("\n당신은 사냥터에서 쓰러졌습니다...")
                _pause(interactive)
                return False
        elif choice == 5:
            if player.level < BOSS_REQUIRED_LEVEL:
                write(
                    "\n레벨이 부족하여 보스에게 도전할 수 없습니다. "
                    f"(필요 레벨: {BOSS_REQUIRED_LEVEL})"
                )
                _pause(interactive)
                continue
            write("\n보스에게 도전합니다!")
            boss = manager.generate_boss(player.level)
            manager.battle(player, boss)
            if player.is_dead():
                write("\n 당신은 보스에게 패배했습니다... ")
                _pause(interactive)
                return False
            write("\n축하합니다! 보스를 처치했습니다!")
            _pause(interactive)
            _clear(interactive)
            for line in _VICTORY_BANNER:
                write(line)
            write("\n\n === 이제 돌아가십시오. === \n")
            if interactive:
                time.sleep(3)
            raise SystemExit(0)
        elif choice == 6:
            manager.show_statistics()
            _pause(interactive)
        elif choice == 7:
            return True
        else:
            write("잘못된 선택입니다.")
            _pause(interactive)


def main(argv: list[str] | None = None) -> int:
    """Start the game on the terminal."""
    argparse.ArgumentParser(prog="textrpg", description="A small text role-playing game.").parse_args(argv)
    manager = GameManager()
    try:
        print("=====================================")
        print("          <16TEAM_Text RPG>          ")
        print("=====================================")
        _pause(True)

        while True:
            _clear(True)
            print("==============[Text RPG]=============")
            print("            1. 게임시작              ")
            print("            2. 종료하기              ")
            print("=====================================")
            tokens = input().split()
            try:
                choice = StartChoice(int(tokens[0]))
            except (IndexError, ValueError):
                continue

            if choice is StartChoice.EXIT:
                return 0

            Character.reset_instance()
            player = create_character()
            if not start_game_loop(manager, player):
                _clear(True)
                for line in _GAME_OVER_BANNER:
                    print(line)
                print("\n\n === 프로그램을 종료합니다. === \n")
                _pause(True)
                return 0
    except (EOFError, KeyboardInterrupt):
        print()
        return 0