"""
The programming grid aggregate.

Membership is by identity. Insertion order is the grid order and defines
adjacency for merges.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..infra.exceptions import ProgramNotScheduledError
from .entities import Program


class Grid:
    """Ordered collection of the currently active programs."""

    def __init__(self, programs: list[Program] | None = None) -> None:
        self._programs: list[Program] = []
        for program in programs or []:
            self.add(program)

    @property
    def programs(self) -> tuple[Program, ...]:
        """Snapshot of the grid in order."""
        return tuple(self._programs)

    def add(self, program: Program) -> None:
        self._programs.append(program)

    def remove(self, program: Program) -> bool:
        """
        Remove a program from the grid.

        Returns:
            True if the program was scheduled, False if it was already gone
        """
        for i, scheduled in enumerate(self._programs):
            if scheduled is program:
                del self._programs[i]
                return True
        return False

    def contains(self, program: Program) -> bool:
        return any(scheduled is program for scheduled in self._programs)

    def index_of(self, program: Program) -> int:
        for i, scheduled in enumerate(self._programs):
            if scheduled is program:
                return i
        raise ProgramNotScheduledError(
            f"Program '{program.title}' is not in the grid",
            program_title=program.title,
        )

    def __contains__(self, program: object) -> bool:
        return isinstance(program, Program) and self.contains(program)

    def __iter__(self) -> Iterator[Program]:
        return iter(tuple(self._programs))

    def __len__(self) -> int:
        return len(self._programs)
