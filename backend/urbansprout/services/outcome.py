"""Explicit result type for calls to external collaborators."""
from dataclasses import dataclass
from typing import Generic, Literal, Optional, TypeVar

T = TypeVar("T")

OutcomeStatus = Literal["ok", "fallback"]


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Value returned by a collaborator wrapper.

    ``status`` is ``"ok"`` when the collaborator answered and ``"fallback"``
    when a canned value was substituted; ``error`` carries the reason.
    """

    value: T
    status: OutcomeStatus = "ok"
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def fallback(cls, value: T, error: str) -> "Outcome[T]":
        return cls(value=value, status="fallback", error=error)

    @property
    def used_fallback(self) -> bool:
        return self.status == "fallback"
