"""Theater pricing closures: per-category charges and volume credits."""

from typing import Any, Callable, Dict

from .errors import UnknownPlayCategory


def make_performance_pricer(category: str) -> Callable[[int], Dict[str, int]]:
    """
    Factory function that returns a closure pricing one play category.

    Private state:
    - rates: category-specific, hidden

    Returns pricer callable taking an audience size and returning the
    charge (in cents) and volume credits for that performance.
    """
    # PRIVATE: category-specific rates (cents)
    rates = {
        "tragedy": {
            "base": 40000, "threshold": 30, "bonus": 0,
            "per_extra_seat": 1000, "per_seat": 0, "credit_divisor": None,
        },
        "comedy": {
            "base": 30000, "threshold": 20, "bonus": 10000,
            "per_extra_seat": 500, "per_seat": 300, "credit_divisor": 5,
        },
    }

    if category not in rates:
        raise UnknownPlayCategory(category)

    rate = rates[category]

    def pricer(audience: int) -> Dict[str, int]:
        amount = rate["base"]
        if audience > rate["threshold"]:
            amount += rate["bonus"] + rate["per_extra_seat"] * (audience - rate["threshold"])
        amount += rate["per_seat"] * audience

        credits = max(audience - 30, 0)
        # extra credit for every fifth attendee
        if rate["credit_divisor"]:
            credits += audience // rate["credit_divisor"]

        return {"amount": amount, "credits": credits}

    return pricer


def make_statement_tally() -> Callable[[int, int], Dict[str, int]]:
    """
    Factory function that returns a closure accumulating a statement.

    Private state:
    - total_amount, volume_credits: accumulate across performance calls
    """
    total_amount = 0
    volume_credits = 0

    def tally(amount: int, credits: int) -> Dict[str, int]:
        nonlocal total_amount, volume_credits
        total_amount += amount
        volume_credits += credits
        return {"total_amount": total_amount, "volume_credits": volume_credits}

    return tally


def amount_for(performance: Dict[str, Any], play: Dict[str, Any]) -> int:
    """Charge in cents for one performance of ``play``."""
    return make_performance_pricer(play["type"])(performance["audience"])["amount"]


def volume_credit_for(performance: Dict[str, Any], play: Dict[str, Any]) -> int:
    return make_performance_pricer(play["type"])(performance["audience"])["credits"]


def usd(cents: int) -> str:
    """Format a cent amount as US dollars, e.g. 4000000 -> "$40,000.00"."""
    dollars = cents / 100
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.2f}"
