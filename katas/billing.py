"""Statement engine: prices an invoice against a play catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, TypedDict

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .errors import BillingError, Result, UnknownPlayID
from .pricing import make_performance_pricer, make_statement_tally, usd

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class Play(TypedDict):
    name: str
    type: str  # category: tragedy, comedy, ...


class Performance(TypedDict):
    playID: str
    audience: int


class Invoice(TypedDict):
    customer: str
    performances: List[Performance]


@dataclass(frozen=True)
class StatementLine:
    play: str
    audience: int
    amount: int
    credits: int


@dataclass
class StatementData:
    customer: str
    lines: List[StatementLine] = field(default_factory=list)
    total_amount: int = 0
    total_volume_credits: int = 0


def play_for(performance: Mapping[str, Any], plays: Mapping[str, Play]) -> Play:
    play_id = performance["playID"]
    if play_id not in plays:
        raise UnknownPlayID(play_id)
    return plays[play_id]


def price_performance(performance: Mapping[str, Any], plays: Mapping[str, Play]) -> Result:
    """Price one performance, returning its statement line or the failure."""
    try:
        play = play_for(performance, plays)
        priced = make_performance_pricer(play["type"])(performance["audience"])
    except BillingError as exc:
        return Result.failure(exc)

    return Result.success(StatementLine(
        play=play["name"],
        audience=performance["audience"],
        amount=priced["amount"],
        credits=priced["credits"],
    ))


def create_statement_data(invoice: Invoice, plays: Mapping[str, Play]) -> StatementData:
    """Price every performance in invoice order; raises on the first failure."""
    data = StatementData(customer=invoice["customer"])
    tally = make_statement_tally()

    for perf in invoice["performances"]:
        line = price_performance(perf, plays).unwrap()
        data.lines.append(line)
        totals = tally(line.amount, line.credits)
        data.total_amount = totals["total_amount"]
        data.total_volume_credits = totals["volume_credits"]

    return data


def render_plain_text(data: StatementData) -> str:
    result = f"Statement for {data.customer}\n"
    for line in data.lines:
        result += f" {line.play}: {usd(line.amount)} ({line.audience} seats)\n"
    result += f"Amount owed is {usd(data.total_amount)}\n"
    result += f"You earned {data.total_volume_credits} credits\n"
    return result


def statement_result(invoice: Invoice, plays: Mapping[str, Play]) -> Result:
    """Plain-text statement, or the first billing failure, without raising."""
    try:
        data = create_statement_data(invoice, plays)
    except BillingError as exc:
        return Result.failure(exc)
    return Result.success(render_plain_text(data))


def statement(invoice: Invoice, plays: Mapping[str, Play]) -> str:
    """
    Render the plain-text statement for ``invoice``.

    Raises ``UnknownPlayID`` or ``UnknownPlayCategory``; either aborts the
    whole statement.
    """
    return statement_result(invoice, plays).unwrap()


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        keep_trailing_newline=True,
    )
    env.filters["usd"] = usd
    return env


def render_html(data: StatementData) -> str:
    return _environment().get_template("statement.html").render(data=data)


def html_statement(invoice: Invoice, plays: Mapping[str, Play]) -> str:
    return render_html(create_statement_data(invoice, plays))


def statement_rows(invoice: Invoice, plays: Mapping[str, Play]) -> List[Dict[str, Any]]:
    """Statement lines as plain records (one per performance)."""
    return [
        {"play": line.play, "audience": line.audience,
         "amount": line.amount, "credits": line.credits}
        for line in create_statement_data(invoice, plays).lines
    ]
