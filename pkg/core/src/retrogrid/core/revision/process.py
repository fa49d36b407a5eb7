"""
The revision process.

RevisionProcess keeps an ordered list of (restriction, action) conditions
and a set of tracked programs. Each review pass fires, per program, the
action of the first condition whose restriction the program fails, and
nothing else. Condition order is the tie-break and is preserved exactly as
registered.

The tracked set is a view over programs that live in the grid. Actions such
as merges and replacements drop programs from the grid without telling the
process; prune_gone() reconciles the two afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...domain.entities import Program
from ...domain.grid import Grid
from ...infra.logging import get_logger
from .actions import RevisionAction
from .restrictions import Restriction

logger = get_logger(__name__)


@dataclass(frozen=True)
class RevisionCondition:
    """A restriction paired with the action to run when it is not met."""

    restriction: Restriction
    action: RevisionAction


@dataclass(frozen=True)
class RevisionOutcome:
    """Record of one action fired during a review pass."""

    program: Program
    condition: RevisionCondition


class RevisionProcess:
    def __init__(
        self,
        conditions: list[RevisionCondition] | None = None,
        programs: list[Program] | None = None,
    ) -> None:
        self._conditions: list[RevisionCondition] = list(conditions or [])
        # dict keys give identity membership and stable insertion order
        self._tracked: dict[Program, None] = {}
        for program in programs or []:
            self.track(program)

    @property
    def conditions(self) -> tuple[RevisionCondition, ...]:
        return tuple(self._conditions)

    @property
    def tracked(self) -> tuple[Program, ...]:
        return tuple(self._tracked)

    def add_condition(self, restriction: Restriction, action: RevisionAction) -> RevisionCondition:
        condition = RevisionCondition(restriction=restriction, action=action)
        self._conditions.append(condition)
        return condition

    def track(self, program: Program) -> None:
        self._tracked[program] = None

    def untrack(self, program: Program) -> None:
        self._tracked.pop(program, None)

    def is_tracking(self, program: Program) -> bool:
        return program in self._tracked

    def first_failed(self, program: Program) -> RevisionCondition | None:
        """The first condition, in registration order, the program does not meet."""
        for condition in self._conditions:
            if not condition.restriction.satisfies(program):
                return condition
        return None

    def review_all(self, grid: Grid) -> list[RevisionOutcome]:
        """
        Review every tracked program once.

        At most one action fires per program. Programs an earlier action in
        this same pass already took out of the grid are skipped; they stay
        tracked until prune_gone() runs.

        Returns:
            One outcome per action fired, in review order
        """
        outcomes: list[RevisionOutcome] = []
        for program in self.tracked:
            if not grid.contains(program):
                logger.debug("revision.skipped_absent", title=program.title)
                continue
            condition = self.first_failed(program)
            if condition is None:
                continue
            logger.info(
                "revision.action_fired",
                title=program.title,
                restriction=condition.restriction.describe(),
                action=repr(condition.action),
            )
            condition.action.execute(program, grid)
            outcomes.append(RevisionOutcome(program=program, condition=condition))
        return outcomes

    def prune_gone(self, grid: Grid) -> list[Program]:
        """Stop tracking programs that are no longer in the grid."""
        gone = [program for program in self._tracked if not grid.contains(program)]
        for program in gone:
            del self._tracked[program]
        if gone:
            logger.info("revision.pruned", titles=[p.title for p in gone])
        return gone

    def run_pass(self, grid: Grid) -> list[RevisionOutcome]:
        """
        A full revision pass: review, then reconcile with the grid.

        Actions that ran before a failure stay applied, so the tracked set is
        reconciled even when the review raises.
        """
        try:
            return self.review_all(grid)
        finally:
            self.prune_gone(grid)
