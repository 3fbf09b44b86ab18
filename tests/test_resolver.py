import random

import pytest

from dnd_dice_roll.dice import default_rng, resolve, roll_from_args, roll_tokens
from dnd_dice_roll.errors import InvalidSides
from dnd_dice_roll.models import DieSpec, RollMode

from conftest import ConstantRandom, ScriptedRandom


@pytest.mark.parametrize("sides", [2, 6, 20, 100])
def test_lowest_face(sides):
    [result] = resolve(DieSpec(count=1, sides=sides), ConstantRandom(1))
    assert result.kept_value == 1


@pytest.mark.parametrize("sides", [2, 6, 20, 100])
def test_highest_face(sides):
    [result] = resolve(DieSpec(count=1, sides=sides), ConstantRandom())
    assert result.kept_value == sides


def test_draws_use_closed_range():
    rng = ScriptedRandom([1, 2, 3])
    resolve(DieSpec(count=3, sides=8), rng)
    assert rng.calls == [(1, 8)] * 3


def test_seeded_rolls_stay_in_range():
    rng = random.Random(1234)
    spec = DieSpec(count=200, sides=6, mode=RollMode.ADVANTAGE)
    for r in resolve(spec, rng):
        assert 1 <= r.discarded_value <= r.kept_value <= 6


def test_normal_roll_has_no_discarded_value():
    [result] = resolve(DieSpec(count=1, sides=20), ScriptedRandom([11]))
    assert result.label == "d20"
    assert result.kept_value == 11
    assert result.discarded_value is None
    assert result.display == "11"


def test_advantage_keeps_higher():
    rng = ScriptedRandom([3, 17])
    [result] = resolve(DieSpec(count=1, sides=20, mode=RollMode.ADVANTAGE), rng)
    assert result.label == "d20a"
    assert result.kept_value == 17
    assert result.discarded_value == 3
    assert result.display == "17 (3)"
    assert len(rng.calls) == 2


def test_disadvantage_keeps_lower():
    [result] = resolve(
        DieSpec(count=1, sides=20, mode=RollMode.DISADVANTAGE), ScriptedRandom([3, 17])
    )
    assert result.label == "d20d"
    assert result.kept_value == 3
    assert result.discarded_value == 17


def test_advantage_tie_is_not_an_error():
    [result] = resolve(DieSpec(count=1, sides=20, mode=RollMode.ADVANTAGE), ScriptedRandom([10, 10]))
    assert result.kept_value == result.discarded_value == 10


def test_advantage_with_count_draws_twice_per_die():
    rng = ScriptedRandom([1, 5, 6, 2])
    results = resolve(DieSpec(count=2, sides=6, mode=RollMode.ADVANTAGE), rng)
    assert [(r.kept_value, r.discarded_value) for r in results] == [(5, 1), (6, 2)]


def test_modifier_is_reported_on_every_row():
    results = resolve(DieSpec(count=3, sides=6, modifier=2), ScriptedRandom([1, 2, 3]))
    assert [r.modifier_applied for r in results] == [2, 2, 2]


def test_end_to_end_total_applies_modifier_once_per_token():
    report = roll_tokens(["4d6", "1d8-2"], ScriptedRandom([4, 2, 1, 6, 5]))

    rows = [(r.label, r.kept_value) for r in report.results]
    assert rows == [("d6", 4), ("d6", 2), ("d6", 1), ("d6", 6), ("d8", 5)]
    assert report.groups[1].modifier == -2
    assert report.total == 16


def test_group_modifier_is_not_multiplied_by_count():
    report = roll_tokens(["4d6+2"], ScriptedRandom([1, 1, 1, 1]))
    assert report.groups[0].subtotal == 6
    assert report.total == 6


def test_bad_token_aborts_before_any_draw():
    rng = ScriptedRandom([])
    with pytest.raises(InvalidSides):
        roll_tokens(["1d20", "1d1"], rng)
    assert rng.calls == []


def test_no_tokens_totals_zero():
    report = roll_tokens([], ScriptedRandom([]))
    assert report.results == []
    assert report.total == 0


def test_default_rng_with_seed_is_reproducible():
    a = roll_tokens(["10d20a"], default_rng(42))
    b = roll_tokens(["10d20a"], default_rng(42))
    assert a == b


def test_payload_groups_and_total():
    payload = roll_from_args(["4d6", "1d8-2"], rng=ScriptedRandom([4, 2, 1, 6, 5]))

    assert payload["input"] == ["4d6", "1d8-2"]
    assert payload["total"] == 16
    assert [g["subtotal"] for g in payload["groups"]] == [13, 3]
    assert payload["groups"][1]["modifier"] == -2
    assert payload["groups"][0]["rolls"][0] == {"label": "d6", "kept": 4, "discarded": None}
    assert payload["explanation"] == "4d6: [4, 2, 1, 6] => 13; 1d8-2: [5] -2 => 3 => 16"
    assert payload["rng"]["source"] == "ScriptedRandom"


def test_payload_advantage_rows():
    payload = roll_from_args(["d20a"], rng=random.Random(3))
    row = payload["groups"][0]["rolls"][0]
    assert payload["groups"][0]["mode"] == "advantage"
    assert row["kept"] >= row["discarded"]
