import random

import pytest

from textrpg.character import Character
from textrpg.game import StartChoice, create_character, main, start_game_loop
from textrpg.gamemanager import GameManager


@pytest.fixture(autouse=True)
def _fresh_character():
    Character.reset_instance()
    yield
    Character.reset_instance()


def feed(*items):
    pending = list(items)

    def read():
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read


def make_setup(*items, seed=0):
    read = feed(*items)
    out = []
    manager = GameManager(rng=random.Random(seed), read=read, write=out.append)
    player = Character("Hero")
    return manager, player, read, out


def test_create_character_rejects_blank_name():
    out = []
    player = create_character(feed("   ", "Hero"), out.append)
    assert player.name == "Hero"
    assert any("공백으로만" in line for line in out)
    assert Character.get_instance() is player


def test_create_character_keeps_existing_instance():
    first = create_character(feed("Alpha"), [].append)
    second = create_character(feed("Beta"), [].append)
    assert second is first
    assert second.name == "Alpha"


def test_quit_returns_true():
    manager, player, read, out = make_setup("7")
    assert start_game_loop(manager, player, read, out.append) is True


def test_non_number_is_rejected_then_quit():
    manager, player, read, out = make_setup("abc", "7")
    assert start_game_loop(manager, player, read, out.append) is True
    assert "잘못된 입력입니다.: " in out


def test_unknown_choice_reported():
    manager, player, read, out = make_setup("9", "7")
    assert start_game_loop(manager, player, read, out.append) is True
    assert "잘못된 선택입니다." in out


def test_status_shown():
    manager, player, read, out = make_setup("1", "7")
    start_game_loop(manager, player, read, out.append)
    assert player.status_report() in out


def test_town_without_gold():
    manager, player, read, out = make_setup("2", "7")
    start_game_loop(manager, player, read, out.append)
    assert any("골드가 부족하여" in line for line in out)
    assert player.gold == 0


def test_town_with_gold_heals():
    manager, player, read, out = make_setup("2", "7")
    player.gold = 10
    player.take_damage(50)
    start_game_loop(manager, player, read, out.append)
    assert player.health == player.max_health
    assert player.gold == 5


def test_boss_requires_level():
    manager, player, read, out = make_setup("5", "7")
    assert start_game_loop(manager, player, read, out.append) is True
    assert any("레벨이 부족하여" in line for line in out)


def test_statistics_shown():
    manager, player, read, out = make_setup("6", "7")
    start_game_loop(manager, player, read, out.append)
    assert "\n===== 게임 통계 =====" in out


def test_dying_in_hunting_ground_returns_false():
    manager, player, read, out = make_setup("4", "1")
    player.health = 1
    assert start_game_loop(manager, player, read, out.append) is False
    assert player.is_dead()
    assert any("사냥터에서 쓰러졌습니다" in line for line in out)


def test_losing_to_boss_returns_false():
    manager, player, read, out = make_setup("5", "1")
    player.level = 2
    player.attack = 1
    player.health = 1
    assert start_game_loop(manager, player, read, out.append) is False
    assert any("보스에게 패배했습니다" in line for line in out)


def test_defeating_boss_ends_program():
    manager, player, read, out = make_setup("5", "1")
    player.level = 2
    player.attack = 1000
    with pytest.raises(SystemExit) as excinfo:
        start_game_loop(manager, player, read, out.append)
    assert excinfo.value.code == 0
    assert player.defeated_monsters == 1
    assert "\n축하합니다! 보스를 처치했습니다!" in out


def test_main_exit_choice(monkeypatch):
    answers = iter(["", str(int(StartChoice.EXIT))])
    monkeypatch.setattr("builtins.input", lambda *args: next(answers))
    assert main([]) == 0


def test_main_ignores_invalid_then_exits(monkeypatch):
    answers = iter(["", "abc", "9", "2"])
    consumed = []

    def fake_input(*args):
        value = next(answers)
        consumed.append(value)
        return value

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0
    assert consumed == ["", "abc", "9", "2"]


def test_main_end_of_input(monkeypatch):
    def fake_input(*args):
        raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0