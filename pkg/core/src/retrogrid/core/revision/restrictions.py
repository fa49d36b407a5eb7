"""
Qualifying restrictions over programs.

A restriction is a pure predicate: it never mutates the program and keeps
no state between evaluations. Composites evaluate their children on every
call.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from ...domain.entities import Program
from ...infra.settings import settings


class Restriction(ABC):
    """A boolean qualifying condition over a Program."""

    @abstractmethod
    def satisfies(self, program: Program) -> bool:
        raise NotImplementedError

    @abstractmethod
    def describe(self) -> str:
        """Short label used in revision logs."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.describe()})"


class MinimumAverageRating(Restriction):
    """
    Rolling rating average must be strictly above a threshold.

    Programs without ratings raise InsufficientDataError.
    """

    def __init__(self, threshold: float, window: int | None = None) -> None:
        self.threshold = threshold
        self.window = window if window is not None else settings.rating_window

    def satisfies(self, program: Program) -> bool:
        return program.average_rating(self.window) > self.threshold

    def describe(self) -> str:
        return f"average of last {self.window} ratings > {self.threshold}"


class MinimumPresenterCount(Restriction):
    def __init__(self, minimum: int) -> None:
        self.minimum = minimum

    def satisfies(self, program: Program) -> bool:
        return len(program.presenters) >= self.minimum

    def describe(self) -> str:
        return f"at least {self.minimum} presenters"


class HostedBy(Restriction):
    def __init__(self, name: str) -> None:
        self.name = name

    def satisfies(self, program: Program) -> bool:
        return program.hosted_by(self.name)

    def describe(self) -> str:
        return f"hosted by {self.name}"


class MaximumBudget(Restriction):
    def __init__(self, limit: int) -> None:
        self.limit = limit

    def satisfies(self, program: Program) -> bool:
        return program.budget <= self.limit

    def describe(self) -> str:
        return f"budget <= {self.limit}"


class AllOf(Restriction):
    """AND composite. An empty composite is satisfied."""

    def __init__(self, restrictions: Iterable[Restriction]) -> None:
        self.restrictions: tuple[Restriction, ...] = tuple(restrictions)

    def satisfies(self, program: Program) -> bool:
        return all(r.satisfies(program) for r in self.restrictions)

    def describe(self) -> str:
        return " and ".join(f"({r.describe()})" for r in self.restrictions) or "always"


class AnyOf(Restriction):
    """OR composite. An empty composite is never satisfied."""

    def __init__(self, restrictions: Iterable[Restriction]) -> None:
        self.restrictions: tuple[Restriction, ...] = tuple(restrictions)

    def satisfies(self, program: Program) -> bool:
        return any(r.satisfies(program) for r in self.restrictions)

    def describe(self) -> str:
        return " or ".join(f"({r.describe()})" for r in self.restrictions) or "never"
