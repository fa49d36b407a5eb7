"""
Program creation with synchronous creation notifications.

ProgramFactory is the single creation path for new programs. Every
registered observer runs, in registration order, before create() returns,
so no caller ever holds a program its observers have not seen.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from ..domain.entities import Presenter, Program
from ..infra.logging import get_logger
from ..shared.types import Weekday

if TYPE_CHECKING:
    from ..domain.grid import Grid
    from .observers import CreationObserver

logger = get_logger(__name__)


class NotificationRegistry:
    """Ordered set of creation observers injected into a ProgramFactory."""

    def __init__(self, observers: list[CreationObserver] | None = None) -> None:
        self._observers: list[CreationObserver] = []
        for observer in observers or []:
            self.register(observer)

    def register(self, observer: CreationObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unregister(self, observer: CreationObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def __iter__(self) -> Iterator[CreationObserver]:
        return iter(list(self._observers))

    def __len__(self) -> int:
        return len(self._observers)


class ProgramFactory:
    def __init__(self, registry: NotificationRegistry | None = None) -> None:
        self.registry = registry if registry is not None else NotificationRegistry()

    def create(
        self,
        grid: Grid,
        *,
        title: str,
        presenters: list[Presenter],
        budget: int,
        sponsors: list[str],
        duration: int,
        day: Weekday,
    ) -> Program:
        """
        Build a program and notify every observer before returning it.

        The sponsors list is stored as given, not copied. The program is not
        added to the grid; that is left to the caller.
        """
        program = Program(
            title=title,
            presenters=list(presenters),
            budget=budget,
            sponsors=sponsors,
            duration=duration,
            day=day,
        )
        logger.debug("factory.created", title=title, budget=budget, observers=len(self.registry))
        for observer in self.registry:
            observer.notify(program, grid)
        return program
