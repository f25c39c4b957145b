"""Test province shortfall, profit and the running production total."""

import math

import pytest

from katas.errors import TotalProductionDrift
from katas.market import Province, parse_int
from katas.samples import sample_province_data


def _asia() -> Province:
    return Province(sample_province_data())


def _no_producers() -> Province:
    return Province({"name": "No producers", "producers": [], "demand": 30, "price": 20})


def test_shortfall():
    assert _asia().shortfall == 5, "25 produced against demand 30"
    print("✅ Shortfall: PASS")


def test_profit():
    asia = _asia()
    assert asia.demand_cost == 270
    assert asia.demand_value == 500
    assert asia.profit == 230, "500 value minus 270 cost"
    print("✅ Profit: PASS")


def test_change_production():
    """Raising one producer's output flips shortfall to surplus."""
    asia = _asia()
    asia.producers[0].set_production(20)

    assert asia.total_production == 36
    assert asia.shortfall == -6
    assert asia.profit == 292


def test_zero_demand():
    asia = _asia()
    asia.set_demand(0)

    assert asia.shortfall == -25
    assert asia.profit == 0


def test_negative_demand():
    """Negative demand pushes a negative contribution into the cheapest producer."""
    asia = _asia()
    assert asia.set_demand(-1) == -1

    assert asia.shortfall == -26
    assert asia.demand_cost == -10
    assert asia.profit == -10


def test_empty_string_demand():
    asia = _asia()
    asia.set_demand("")

    assert math.isnan(asia.shortfall)
    assert math.isnan(asia.profit)


def test_string_demand_and_price_coerced():
    asia = _asia()
    assert asia.set_demand("30 units") == 30
    assert asia.set_price(" 20") == 20
    assert asia.profit == 230, "500 value minus 270 cost"


def test_no_producers():
    province = _no_producers()

    assert province.total_production == 0
    assert province.shortfall == 30
    assert province.profit == 0


def test_producers_is_a_copy():
    asia = _asia()
    asia.producers.clear()
    assert len(asia.producers) == 3


def test_allocation_cheapest_first():
    """Ties on cost keep insertion order; Attalia covers the remainder."""
    rows = _asia().allocation()

    assert [r.producer for r in rows] == ["Byzantium", "Sinope", "Attalia"]
    assert [r.contribution for r in rows] == [9, 6, 10]
    assert [r.charge for r in rows] == [90, 60, 120]


def test_allocation_stops_when_demand_met():
    asia = _asia()
    asia.set_demand(12)
    rows = asia.allocation()

    assert [r.contribution for r in rows] == [9, 3, 0]
    assert asia.demand_cost == 120


def test_cost_change_reorders_allocation():
    asia = _asia()
    asia.producers[1].set_cost("5")

    assert [r.producer for r in asia.allocation()][0] == "Attalia"
    assert asia.demand_cost == 10 * 5 + 9 * 10 + 6 * 10


def test_non_numeric_production_is_zero():
    asia = _asia()
    assert asia.producers[2].set_production("lots") == 0
    assert asia.total_production == 19
    asia.check_total_production()


def test_missing_production_defaults_to_zero():
    province = Province({
        "name": "Sparse",
        "producers": [{"name": "Idle", "cost": 3}, {"name": "Busy", "cost": 4, "production": 7}],
        "demand": 10,
        "price": 5,
    })
    assert province.producers[0].production == 0
    assert province.total_production == 7


def test_derived_values_idempotent():
    asia = _asia()
    first = (asia.shortfall, asia.satisfied_demand, asia.demand_value, asia.demand_cost, asia.profit)
    second = (asia.shortfall, asia.satisfied_demand, asia.demand_value, asia.demand_cost, asia.profit)
    assert first == second


def test_total_production_never_drifts():
    """Incremental updates always match the sum recomputed from scratch."""
    asia = _asia()
    for index, value in [(0, 20), (1, "7"), (2, ""), (0, 3), (1, -4), (2, 12.9), (0, None)]:
        asia.producers[index].set_production(value)
        assert asia.total_production == asia.recomputed_total_production(), f"drift after {value!r}"
        asia.check_total_production()

    assert asia.total_production == 0 + (-4) + 12


def test_drift_detected():
    asia = _asia()
    asia._adjust_total_production(1)

    with pytest.raises(TotalProductionDrift):
        asia.check_total_production()


def test_snapshot_not_mutated():
    data = sample_province_data()
    Province(data).producers[0].set_production(99)
    assert data["producers"][0]["production"] == 9


def test_numeric_string_snapshot():
    """Snapshot numbers given as strings are read the same as ints."""
    province = Province({
        "name": "Asia",
        "producers": [
            {"name": "Byzantium", "cost": "10", "production": "9"},
            {"name": "Attalia", "cost": "12", "production": "10"},
            {"name": "Sinope", "cost": "10", "production": "6"},
        ],
        "demand": "30",
        "price": "20",
    })

    assert province.total_production == 25
    assert province.shortfall == 5
    assert province.profit == 230, "same as the all-int snapshot"
    province.check_total_production()


def test_non_numeric_snapshot():
    """Unreadable snapshot numbers become NaN instead of raising."""
    province = Province({
        "name": "Garbled",
        "producers": [
            {"name": "Byzantium", "cost": "cheap", "production": "lots"},
            {"name": "Sinope", "cost": 10, "production": 6},
        ],
        "demand": "abc",
        "price": 20,
    })

    assert province.producers[0].production == 0
    assert province.total_production == 6
    assert math.isnan(province.demand)
    assert math.isnan(province.shortfall)
    assert math.isnan(province.demand_cost)
    assert math.isnan(province.profit)


def test_non_numeric_snapshot_cost():
    province = Province({
        "name": "Odd cost",
        "producers": [{"name": "Sinope", "cost": "n/a", "production": 6}],
        "demand": 30,
        "price": 20,
    })

    assert province.shortfall == 24
    assert math.isnan(province.demand_cost)
    assert math.isnan(province.profit)


@pytest.mark.parametrize("value, expected", [
    (30, 30),
    ("30", 30),
    ("  -7", -7),
    ("+4", 4),
    ("12abc", 12),
    (3.9, 3),
    (-3.9, -3),
    ("0x1A", 26),
    ("-0X1a", -26),
    ("0x1Azz", 26),
    ("012", 12),
])
def test_parse_int(value, expected):
    assert parse_int(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "0x", "0xZ", None, float("nan"), True])
def test_parse_int_not_a_number(value):
    assert math.isnan(parse_int(value))


if __name__ == "__main__":
    test_shortfall()
    test_profit()
    test_change_production()
    test_negative_demand()
    test_total_production_never_drifts()
    print("🎉 All tests PASSED!")
