import pytest

from textrpg.character import Character
from textrpg.items import AttackPotion, HealthPotion, Item


@pytest.fixture
def hero():
    character = Character("hero")
    messages = []
    character.echo = messages.append
    character.messages = messages
    return character


@pytest.fixture
def fresh_singleton():
    Character.reset_instance()
    yield
    Character.reset_instance()


def test_initial_stats(hero):
    assert hero.level == 1
    assert hero.health == 200
    assert hero.max_health == 200
    assert hero.attack == 30
    assert hero.exp == 0
    assert hero.gold == 0
    assert hero.defeated_monsters == 0
    assert hero.inventory == []


def test_constructor_announces_character(capsys):
    Character("용사")
    out = capsys.readouterr().out
    assert "[용사]" in out
    assert "레벨: 1" in out
    assert "공격력: 30" in out


def test_singleton_returns_same_instance(fresh_singleton):
    first = Character.get_instance("용사")
    second = Character.get_instance()
    assert first is second
    assert second.name == "용사"


def test_reset_instance_creates_new_character(fresh_singleton):
    first = Character.get_instance("용사")
    Character.reset_instance()
    second = Character.get_instance("전사")
    assert second is not first
    assert second.name == "전사"


def test_level_up_raises_stats_and_heals(hero):
    hero.take_damage(50)
    old_max, old_attack = hero.max_health, hero.attack
    hero.level_up()
    assert hero.level == 2
    assert hero.max_health - old_max == hero.level * 20
    assert hero.attack - old_attack == hero.level * 5
    assert hero.health == hero.max_health
    assert hero.messages[0] == "[레벨업!]"


def test_level_is_capped_at_ten(hero):
    for _ in range(20):
        hero.level_up()
    assert hero.level == 10
    max_health, attack = hero.max_health, hero.attack
    hero.level_up()
    assert (hero.level, hero.max_health, hero.attack) == (10, max_health, attack)


def test_add_exp_below_threshold_keeps_level(hero):
    hero.add_exp(99)
    assert hero.level == 1
    assert hero.exp == 99


def test_add_exp_levels_up_at_hundred(hero):
    hero.add_exp(100)
    assert hero.level == 2
    assert hero.exp == 0


def test_add_exp_can_level_several_times(hero):
    hero.add_exp(250)
    assert hero.level == 3
    assert hero.exp == 50


def test_heal_does_not_exceed_max(hero):
    hero.take_damage(30)
    hero.heal(1000)
    assert hero.health == hero.max_health


def test_take_damage_clamps_at_zero(hero):
    hero.take_damage(10_000)
    assert hero.health == 0
    assert hero.is_dead()


def test_alive_after_partial_damage(hero):
    hero.take_damage(199)
    assert not hero.is_dead()


def test_full_heal(hero):
    hero.take_damage(120)
    hero.full_heal()
    assert hero.health == hero.max_health


def test_gold_spending(hero):
    hero.add_gold(15)
    assert hero.spend_gold(10) is True
    assert hero.gold == 5
    assert hero.spend_gold(10) is False
    assert hero.gold == 5


def test_add_gold_reports(hero):
    hero.add_gold(7)
    assert hero.messages[-1] == "[Gold +7] 현재 골드: 7"


def test_defeated_monsters_counter(hero):
    hero.increment_defeated_monsters()
    hero.increment_defeated_monsters()
    assert hero.defeated_monsters == 2


def test_use_item_applies_and_removes(hero):
    hero.add_item(AttackPotion())
    before = hero.attack
    hero.use_item(0)
    assert hero.attack == before + 20
    assert hero.inventory == []


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_use_item_rejects_bad_index(hero, index):
    hero.add_item(HealthPotion())
    with pytest.raises(IndexError):
        hero.use_item(index)
    assert len(hero.inventory) == 1


def test_remove_item_returns_item(hero):
    potion = HealthPotion()
    hero.add_item(potion)
    assert hero.remove_item(0) is potion
    assert hero.inventory == []


def test_remove_item_rejects_bad_index(hero):
    with pytest.raises(IndexError):
        hero.remove_item(0)


def test_use_item_by_name_uses_first_match(hero):
    hero.add_item(HealthPotion())
    hero.add_item(AttackPotion())
    before = hero.attack
    hero.use_item_by_name("힘의 영약")
    assert hero.attack == before + 20
    assert [item.name for item in hero.inventory] == ["체력 포션"]


def test_use_item_by_name_missing(hero):
    hero.add_item(HealthPotion())
    with pytest.raises(LookupError):
        hero.use_item_by_name("힘의 영약")
    assert len(hero.inventory) == 1


def test_status_report_empty_inventory(hero):
    report = hero.status_report()
    assert " - 없음" in report
    assert report.startswith("===== 캐릭터 상태 =====")
    assert "이름: hero" in report


def test_status_report_groups_items_sorted(hero):
    hero.add_item(AttackPotion())
    hero.add_item(HealthPotion())
    hero.add_item(HealthPotion())
    lines = hero.status_report().split("\n")
    assert "1. 체력 포션 x2" in lines
    assert "2. 힘의 영약 x1" in lines


def test_display_status_echoes_report(hero):
    hero.add_item(Item("돌멩이"))
    hero.display_status()
    assert "\n".join(hero.messages) == hero.status_report()