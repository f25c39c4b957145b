"""Tabular summaries of statements and province allocations."""

from dataclasses import asdict
from typing import Any, Dict, Mapping

import pandas as pd

from .billing import Invoice, Play, statement_rows
from .market import Province

STATEMENT_COLUMNS = ["play", "audience", "amount", "credits"]
ALLOCATION_COLUMNS = ["producer", "cost", "production", "contribution", "charge"]


def statement_frame(invoice: Invoice, plays: Mapping[str, Play]) -> pd.DataFrame:
    """One row per performance in invoice order (amount in cents)."""
    return pd.DataFrame(statement_rows(invoice, plays), columns=STATEMENT_COLUMNS)


def allocation_frame(province: Province) -> pd.DataFrame:
    """Producers in allocation order with what each contributes to demand."""
    rows = [asdict(row) for row in province.allocation()]
    return pd.DataFrame(rows, columns=ALLOCATION_COLUMNS)


def province_summary(province: Province) -> Dict[str, Any]:
    return {
        "name": province.name,
        "demand": province.demand,
        "price": province.price,
        "total_production": province.total_production,
        "shortfall": province.shortfall,
        "satisfied_demand": province.satisfied_demand,
        "demand_value": province.demand_value,
        "demand_cost": province.demand_cost,
        "profit": province.profit,
    }
