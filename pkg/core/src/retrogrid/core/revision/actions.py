"""
Corrective revision actions.

Each action mutates a program in place or replaces it in the grid. Actions
that bring new programs into the grid go through ProgramFactory so creation
observers run; ReplaceWithDefaultShow is the exception and stays silent.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Protocol

from ...domain.entities import Program
from ...domain.grid import Grid
from ...infra.exceptions import InsufficientDataError
from ...infra.logging import get_logger
from ...infra.settings import settings
from ...runtime.program_factory import ProgramFactory
from ...shared.types import Weekday

logger = get_logger(__name__)

UNNAMED_TITLE = "Programa sin nombre"


class ChoiceSource(Protocol):
    """Randomness used by merges. random.Random satisfies it."""

    def choice(self, seq: Sequence[Any]) -> Any: ...


class RevisionAction(ABC):
    @abstractmethod
    def execute(self, program: Program, grid: Grid) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SplitProgram(RevisionAction):
    """
    Split a program into two halves by presenters.

    The first half of the presenters (rounded down) goes to
    "<first word> en el aire!", the rest to the capitalized second word of
    the title, or "Programa sin nombre" for single-word titles. Both halves
    get half the budget and half the duration, the original day, and the
    original sponsors list itself (shared, not copied). The original is
    removed from the grid once both halves are in. A program that is not
    in the grid raises ProgramNotScheduledError before anything is created.
    """

    def __init__(self, factory: ProgramFactory) -> None:
        self.factory = factory

    def execute(self, program: Program, grid: Grid) -> None:
        grid.index_of(program)
        if not program.presenters:
            raise InsufficientDataError(
                f"Cannot split '{program.title}': it has no presenters",
                program_title=program.title,
                field="presenters",
            )
        words = program.title.split()
        if not words:
            raise InsufficientDataError(
                "Cannot split a program without a title",
                program_title=program.title,
                field="title",
            )

        half = len(program.presenters) // 2
        first_title = f"{words[0]} en el aire!"
        second_title = _capitalize(words[1]) if len(words) > 1 else UNNAMED_TITLE

        budget = program.budget // 2
        duration = program.duration // 2

        second = self.factory.create(
            grid,
            title=second_title,
            presenters=program.presenters[half:],
            budget=budget,
            sponsors=program.sponsors,
            duration=duration,
            day=program.day,
        )
        grid.add(second)
        first = self.factory.create(
            grid,
            title=first_title,
            presenters=program.presenters[:half],
            budget=budget,
            sponsors=program.sponsors,
            duration=duration,
            day=program.day,
        )
        grid.add(first)
        grid.remove(program)

        logger.info(
            "split.completed",
            original=program.title,
            first=first.title,
            second=second.title,
        )


class ReplaceWithDefaultShow(RevisionAction):
    """Swap a program for the default show on the same day and duration."""

    def __init__(self, title: str | None = None) -> None:
        self.title = title or settings.default_show_title

    def execute(self, program: Program, grid: Grid) -> None:
        replacement = Program(title=self.title, day=program.day, duration=program.duration)
        grid.remove(program)
        grid.add(replacement)

    def __repr__(self) -> str:
        return f"ReplaceWithDefaultShow(title={self.title!r})"


class MergePrograms(RevisionAction):
    """
    Merge a program with the one after it in grid order.

    The last program wraps around to the first. When the program is alone in
    the grid it merges with itself; that case is logged, not prevented.
    """

    def __init__(
        self,
        factory: ProgramFactory,
        rng: ChoiceSource | None = None,
        titles: Sequence[str] | None = None,
    ) -> None:
        self.factory = factory
        self.rng = rng if rng is not None else random.Random()
        self.titles = tuple(titles) if titles is not None else tuple(settings.merge_titles)

    def execute(self, program: Program, grid: Grid) -> None:
        programs = grid.programs
        index = grid.index_of(program)
        partner = programs[(index + 1) % len(programs)]

        if partner is program:
            logger.warning("merge.self_merge", title=program.title)

        for p in (program, partner):
            if not p.presenters:
                raise InsufficientDataError(
                    f"Cannot merge '{p.title}': it has no presenters",
                    program_title=p.title,
                    field="presenters",
                )

        presenters = [program.presenters[0], partner.presenters[0]]
        budget = min(program.budget, partner.budget)
        sponsors = self.rng.choice((program.sponsors, partner.sponsors))
        duration = program.duration + partner.duration
        title = self.rng.choice(self.titles)

        grid.remove(program)
        grid.remove(partner)
        merged = self.factory.create(
            grid,
            title=title,
            presenters=presenters,
            budget=budget,
            sponsors=sponsors,
            duration=duration,
            day=program.day,
        )
        grid.add(merged)


class ChangeDay(RevisionAction):
    def __init__(self, new_day: Weekday) -> None:
        self.new_day = new_day

    def execute(self, program: Program, grid: Grid) -> None:
        program.day = self.new_day

    def __repr__(self) -> str:
        return f"ChangeDay(new_day={self.new_day.value})"


def _capitalize(word: str) -> str:
    # Only the first letter changes; "noche" -> "Noche", "tELE" -> "TELE"
    return word[:1].upper() + word[1:]
