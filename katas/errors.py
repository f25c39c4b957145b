"""Billing error kinds and the tagged result used by the statement engine."""

from dataclasses import dataclass
from typing import Any, Optional


class BillingError(Exception):
    """Base class for anything that stops a statement from being priced."""


class UnknownPlayCategory(BillingError, ValueError):
    def __init__(self, category: Any):
        super().__init__(f"Unknown type: {category}")
        self.category = category


class UnknownPlayID(BillingError, KeyError):
    def __init__(self, play_id: Any):
        super().__init__(play_id)
        self.play_id = play_id

    def __str__(self) -> str:
        return f"Unknown play id: {self.play_id}"


class TotalProductionDrift(AssertionError):
    """Running production total no longer matches the producers' sum."""


@dataclass(frozen=True)
class Result:
    """
    Either a success payload or the billing error that prevented it.

    Callers choose: inspect ``ok``/``error`` to skip or report, or call
    ``unwrap()`` to abort by raising the carried error.
    """
    value: Any = None
    error: Optional[BillingError] = None

    @classmethod
    def success(cls, value: Any) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: BillingError) -> "Result":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> str:
        """Name of the failure kind, or ``"ok"``."""
        return "ok" if self.error is None else type(self.error).__name__

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value
