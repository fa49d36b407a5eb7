"""
Global test configuration for RetroGrid.

This module provides global pytest configuration and shared fixtures.
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure the project src directory is importable without relying on external environment.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from retrogrid.domain.entities import Presenter, Program
from retrogrid.domain.grid import Grid
from retrogrid.infra.mail import InMemoryMailSender
from retrogrid.runtime.program_factory import NotificationRegistry, ProgramFactory
from retrogrid.shared.types import Weekday


class FixedChoice:
    """Deterministic stand-in for random.Random: always picks the same position."""

    def __init__(self, position: int = 0):
        self.position = position
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        return seq[self.position]


def make_presenters(count: int) -> list[Presenter]:
    return [Presenter(name=f"p{i}", mail=f"p{i}@retrogrid.tv") for i in range(1, count + 1)]


def make_program(
    title="Noche Loca",
    presenters=2,
    budget=1000,
    duration=60,
    day=Weekday.FRIDAY,
    sponsors=None,
    ratings=(),
) -> Program:
    program = Program(
        title=title,
        presenters=make_presenters(presenters) if isinstance(presenters, int) else list(presenters),
        budget=budget,
        sponsors=list(sponsors) if sponsors is not None else ["Coca"],
        day=day,
        duration=duration,
    )
    for i, score in enumerate(ratings):
        program.add_rating(score, date(2024, 1, 1 + i))
    return program


@pytest.fixture
def mail_sender() -> InMemoryMailSender:
    return InMemoryMailSender()


@pytest.fixture
def registry() -> NotificationRegistry:
    return NotificationRegistry()


@pytest.fixture
def factory(registry) -> ProgramFactory:
    return ProgramFactory(registry)


@pytest.fixture
def grid() -> Grid:
    return Grid()


@pytest.fixture(name="make_program")
def make_program_fixture():
    return make_program


@pytest.fixture(name="make_presenters")
def make_presenters_fixture():
    return make_presenters


@pytest.fixture
def fixed_choice():
    return FixedChoice
