"""Province market model: producers supplying demand, cheapest first."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Union

from .errors import TotalProductionDrift

Number = Union[int, float]

_LEADING_INT = re.compile(r"\s*([+-]?)(?:(0[xX])([0-9a-fA-F]*)|(\d*))")


def parse_int(value: Any) -> Number:
    """
    Leading integer of ``value``, or NaN when there is none.

    Floats truncate toward zero; strings are read up to the first non-digit
    (" 12abc" -> 12), a "0x" prefix reads hex ("0x1A" -> 26), and "", "abc"
    or a bare "0x" give NaN.
    """
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return math.trunc(value) if math.isfinite(value) else math.nan
    sign, hex_prefix, hex_digits, digits = _LEADING_INT.match(str(value)).groups()
    if hex_prefix:
        if not hex_digits:
            return math.nan
        result = int(hex_digits, 16)
    elif digits:
        result = int(digits)
    else:
        return math.nan
    return -result if sign == "-" else result


def _min(a: Number, b: Number) -> Number:
    # NaN wins, as in ordinary arithmetic
    if _is_nan(a) or _is_nan(b):
        return math.nan
    return min(a, b)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _production_or_zero(value: Any) -> Number:
    amount = parse_int(value)
    return 0 if _is_nan(amount) else amount


@dataclass(frozen=True)
class Allocation:
    producer: str
    cost: Number
    production: Number
    contribution: Number
    charge: Number


class Producer:
    def __init__(self, province: "Province", data: Dict[str, Any]):
        # back-reference only; the province owns its producers
        self._province = province
        self._name = data["name"]
        self._cost = parse_int(data["cost"])
        self._production = _production_or_zero(data.get("production"))

    @property
    def name(self) -> str:
        return self._name

    @property
    def cost(self) -> Number:
        return self._cost

    def set_cost(self, value: Any) -> Number:
        self._cost = parse_int(value)
        return self._cost

    @property
    def production(self) -> Number:
        return self._production

    def set_production(self, value: Any) -> Number:
        """Store coerced production (NaN -> 0) and push the delta to the province."""
        new_production = _production_or_zero(value)
        self._province._adjust_total_production(new_production - self._production)
        self._production = new_production
        return self._production

    def __repr__(self) -> str:
        return f"Producer({self._name!r}, cost={self._cost!r}, production={self._production!r})"


class Province:
    """
    A market with a demand level, a price and the producers supplying it.

    ``total_production`` is a running total: every production change on a
    producer adjusts it by the delta instead of summing again.
    """

    def __init__(self, doc: Dict[str, Any]):
        self._name = doc["name"]
        self._producers: List[Producer] = []
        self._total_production: Number = 0
        self._demand = parse_int(doc["demand"])
        self._price = parse_int(doc["price"])

        for producer in doc["producers"]:
            self.add_producer(Producer(self, producer))

    def add_producer(self, producer: Producer) -> None:
        self._producers.append(producer)
        self._total_production += producer.production

    def _adjust_total_production(self, delta: Number) -> None:
        self._total_production += delta

    @property
    def name(self) -> str:
        return self._name

    @property
    def producers(self) -> List[Producer]:
        return list(self._producers)

    @property
    def total_production(self) -> Number:
        return self._total_production

    @property
    def demand(self) -> Number:
        return self._demand

    def set_demand(self, value: Any) -> Number:
        self._demand = parse_int(value)
        return self._demand

    @property
    def price(self) -> Number:
        return self._price

    def set_price(self, value: Any) -> Number:
        self._price = parse_int(value)
        return self._price

    @property
    def shortfall(self) -> Number:
        return self._demand - self._total_production

    @property
    def satisfied_demand(self) -> Number:
        return _min(self._demand, self._total_production)

    @property
    def demand_value(self) -> Number:
        return self.satisfied_demand * self._price

    def allocation(self) -> List[Allocation]:
        """Walk producers cheapest first, each covering what demand remains."""
        remaining = self._demand
        rows = []
        for producer in sorted(self._producers, key=lambda p: p.cost):
            contribution = _min(remaining, producer.production)
            remaining -= contribution
            rows.append(Allocation(
                producer=producer.name,
                cost=producer.cost,
                production=producer.production,
                contribution=contribution,
                charge=contribution * producer.cost,
            ))
        return rows

    @property
    def demand_cost(self) -> Number:
        result = 0
        for row in self.allocation():
            result += row.charge
        return result

    @property
    def profit(self) -> Number:
        return self.demand_value - self.demand_cost

    def recomputed_total_production(self) -> Number:
        return sum(p.production for p in self._producers)

    def check_total_production(self) -> None:
        """Raise TotalProductionDrift if the running total disagrees with the producers."""
        expected = self.recomputed_total_production()
        if self._total_production != expected:
            raise TotalProductionDrift(
                f"{self._name}: running total {self._total_production} != {expected}"
            )
