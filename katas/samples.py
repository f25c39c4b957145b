"""Sample catalog, invoices and province snapshot used by demos and tests."""

from typing import Any, Dict, List


def sample_plays() -> Dict[str, Dict[str, str]]:
    return {
        "hamlet": {"name": "Hamlet", "type": "tragedy"},
        "as-like": {"name": "As You Like It", "type": "comedy"},
        "othello": {"name": "Othello", "type": "tragedy"},
    }


def sample_invoices() -> List[Dict[str, Any]]:
    return [
        {
            "customer": "BigCo",
            "performances": [
                {"playID": "hamlet", "audience": 55},
                {"playID": "as-like", "audience": 35},
                {"playID": "othello", "audience": 40},
            ],
        }
    ]


def sample_province_data() -> Dict[str, Any]:
    """Fresh snapshot each call; Province mutates what it builds, not this."""
    return {
        "name": "Asia",
        "producers": [
            {"name": "Byzantium", "cost": 10, "production": 9},
            {"name": "Attalia", "cost": 12, "production": 10},
            {"name": "Sinope", "cost": 10, "production": 6},
        ],
        "demand": 30,
        "price": 20,
    }
