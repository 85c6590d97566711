import math

import pytest

from tiptime.config import COST_CEILING
from tiptime.model.tip import TipRate, InputError, TipResult, compute_tip, parse_cost, calculate_tip


@pytest.mark.parametrize(
    "rate,multiplier",
    [
        (TipRate.FIFTEEN, 0.15),
        (TipRate.EIGHTEEN, 0.18),
        (TipRate.TWENTY, 0.20),
    ],
)
def test_rate_multipliers(rate, multiplier):
    assert rate.multiplier == multiplier


@pytest.mark.parametrize("button_id", [-1, 0, 16, 25, 100])
def test_unknown_button_id_defaults_to_fifteen(button_id):
    assert TipRate.from_button_id(button_id) is TipRate.FIFTEEN


def test_known_button_ids():
    assert TipRate.from_button_id(20) is TipRate.TWENTY
    assert TipRate.from_button_id(18) is TipRate.EIGHTEEN
    assert TipRate.from_button_id(15) is TipRate.FIFTEEN


@pytest.mark.parametrize("cost", [0.01, 1.0, 12.34, 50.5, 999.99, 100000.0])
@pytest.mark.parametrize("rate", list(TipRate))
def test_tip_without_round_up_is_plain_product(cost, rate):
    assert compute_tip(cost, rate, round_up=False) == cost * rate.multiplier


@pytest.mark.parametrize("cost", [0.01, 1.0, 12.34, 50.5, 999.99, 100000.0])
@pytest.mark.parametrize("rate", list(TipRate))
def test_round_up_gives_ceiling(cost, rate):
    raw = cost * rate.multiplier
    tip = compute_tip(cost, rate, round_up=True)
    assert tip == math.ceil(raw)
    assert tip.is_integer()
    assert tip >= raw


def test_compute_is_idempotent():
    first = compute_tip(73.21, TipRate.EIGHTEEN, round_up=True)
    second = compute_tip(73.21, TipRate.EIGHTEEN, round_up=True)
    assert first == second


def test_compute_rejects_non_finite_and_negative_cost():
    with pytest.raises(ValueError):
        compute_tip(float("nan"), TipRate.FIFTEEN, False)
    with pytest.raises(ValueError):
        compute_tip(float("inf"), TipRate.FIFTEEN, False)
    with pytest.raises(ValueError):
        compute_tip(-1.0, TipRate.FIFTEEN, False)


@pytest.mark.parametrize(
    "text",
    [None, "", "   ", "abc", "12,50", "0", "0.0", "-0", "-5", "nan", "inf", "-inf",
     "1_000", "５０", "0x10", "."],
)
def test_parse_cost_rejects_invalid_or_zero(text):
    assert parse_cost(text) == (None, InputError.MISSING_OR_ZERO_COST)


@pytest.mark.parametrize("text", ["100000.01", "200000", "1e9"])
def test_parse_cost_rejects_too_high(text):
    assert parse_cost(text) == (None, InputError.COST_TOO_HIGH)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("50", 50.0),
        (" 50.50 ", 50.5),
        ("100000", COST_CEILING),
        ("1e3", 1000.0),
        ("5.", 5.0),
        ("+.5", 0.5),
    ],
)
def test_parse_cost_accepts(text, expected):
    assert parse_cost(text) == (expected, None)


def test_scenario_fifty_at_twenty_percent():
    result = calculate_tip("50", TipRate.TWENTY, round_up=False)
    assert result.ok
    assert result.tip == pytest.approx(10.0)


def test_scenario_round_up_at_eighteen_percent():
    raw = calculate_tip("50.50", TipRate.EIGHTEEN, round_up=False)
    assert raw.tip == pytest.approx(9.09)

    rounded = calculate_tip("50.50", TipRate.EIGHTEEN, round_up=True)
    assert rounded == TipResult(tip=10.0)


def test_scenario_non_numeric_is_rejected():
    result = calculate_tip("abc", TipRate.FIFTEEN, round_up=False)
    assert not result.ok
    assert result.tip == 0.0
    assert result.error is InputError.MISSING_OR_ZERO_COST
    assert str(result.error) == "Please, insert a valid value"


def test_scenario_cost_too_high_is_rejected():
    result = calculate_tip("200000", TipRate.FIFTEEN, round_up=True)
    assert result == TipResult(tip=0.0, error=InputError.COST_TOO_HIGH)
    assert str(result.error) == "Cost too high"


def test_zero_cost_is_rejected():
    assert calculate_tip("0", TipRate.TWENTY, round_up=True) == TipResult(0.0, InputError.MISSING_OR_ZERO_COST)
