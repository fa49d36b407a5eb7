"""
Domain entities for RetroGrid.

Program is a mutable schedule slot compared by identity: two programs with
the same attributes are still two different slots. Presenter and Rating are
immutable value objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..infra.exceptions import InsufficientDataError
from ..shared.types import Weekday

DEFAULT_BUDGET = 10_000
DEFAULT_DURATION_MINUTES = 30
RATING_WINDOW = 5


@dataclass(frozen=True)
class Presenter:
    """A program host. The name is its identity for "hosted by" checks."""

    name: str
    mail: str


@dataclass(frozen=True)
class Rating:
    """One audience rating of a single edition."""

    score: int
    rated_on: date


@dataclass(eq=False)
class Program:
    """
    A schedule slot under editorial revision.

    The sponsors list may be shared with sibling programs produced by a
    split. Mutating it in place is visible from every program holding it.
    """

    title: str = ""
    presenters: list[Presenter] = field(default_factory=list)
    budget: int = DEFAULT_BUDGET
    sponsors: list[str] = field(default_factory=list)
    day: Weekday = Weekday.MONDAY
    duration: int = DEFAULT_DURATION_MINUTES  # minutes
    ratings: list[Rating] = field(default_factory=list)

    def average_rating(self, window: int = RATING_WINDOW) -> float:
        """
        Mean score of the most recent `window` ratings by date.

        Raises:
            InsufficientDataError: If the program has no ratings
        """
        if not self.ratings:
            raise InsufficientDataError(
                f"Program '{self.title}' has no ratings to average",
                program_title=self.title,
                field="ratings",
            )
        recent = sorted(self.ratings, key=lambda r: r.rated_on)[-window:]
        return sum(r.score for r in recent) / len(recent)

    def hosted_by(self, name: str) -> bool:
        return any(p.name == name for p in self.presenters)

    def presenter_mails(self) -> list[str]:
        return [p.mail for p in self.presenters]

    def add_rating(self, score: int, rated_on: date) -> Rating:
        rating = Rating(score=score, rated_on=rated_on)
        self.ratings.append(rating)
        return rating

    def __repr__(self) -> str:
        return (
            f"Program(title={self.title!r}, day={self.day.value}, "
            f"presenters={len(self.presenters)}, budget={self.budget}, duration={self.duration})"
        )
