"""
Tests for atomic and composite restrictions.
"""

import pytest

from retrogrid.core.revision.restrictions import (
    AllOf,
    AnyOf,
    HostedBy,
    MaximumBudget,
    MinimumAverageRating,
    MinimumPresenterCount,
    Restriction,
)
from retrogrid.domain.entities import Presenter
from retrogrid.infra.exceptions import InsufficientDataError


class Always(Restriction):
    def __init__(self, result: bool):
        self.result = result
        self.calls = 0

    def satisfies(self, program):
        self.calls += 1
        return self.result

    def describe(self):
        return str(self.result)


class TestAtomicRestrictions:
    def test_minimum_average_is_strict(self, make_program):
        program = make_program(ratings=[4, 4, 4])
        assert not MinimumAverageRating(4.0).satisfies(program)
        assert MinimumAverageRating(3.9).satisfies(program)

    def test_minimum_average_without_ratings_raises(self, make_program):
        with pytest.raises(InsufficientDataError):
            MinimumAverageRating(1.0).satisfies(make_program(ratings=()))

    def test_minimum_presenter_count_is_inclusive(self, make_program):
        program = make_program(presenters=2)
        assert MinimumPresenterCount(2).satisfies(program)
        assert not MinimumPresenterCount(3).satisfies(program)

    def test_hosted_by(self, make_program):
        program = make_program(presenters=[Presenter("Susana", "s@tv.com")])
        assert HostedBy("Susana").satisfies(program)
        assert not HostedBy("Tinelli").satisfies(program)

    def test_maximum_budget_is_inclusive(self, make_program):
        program = make_program(budget=5000)
        assert MaximumBudget(5000).satisfies(program)
        assert not MaximumBudget(4999).satisfies(program)

    def test_evaluation_does_not_mutate(self, make_program):
        program = make_program(ratings=[1, 9])
        before = (list(program.ratings), list(program.presenters), program.budget)
        MinimumAverageRating(2).satisfies(program)
        assert (program.ratings, program.presenters, program.budget) == before


class TestComposites:
    @pytest.mark.parametrize(
        "children,expected",
        [
            ([True, True, True], True),
            ([True, False, True], False),
            ([False, False], False),
            ([], True),
        ],
    )
    def test_all_of(self, make_program, children, expected):
        restriction = AllOf([Always(c) for c in children])
        assert restriction.satisfies(make_program()) is expected

    @pytest.mark.parametrize(
        "children,expected",
        [
            ([False, False, True], True),
            ([False, False], False),
            ([True, True], True),
            ([], False),
        ],
    )
    def test_any_of(self, make_program, children, expected):
        restriction = AnyOf([Always(c) for c in children])
        assert restriction.satisfies(make_program()) is expected

    def test_nested_composites(self, make_program):
        program = make_program(presenters=1, budget=2000)
        restriction = AnyOf([
            AllOf([MinimumPresenterCount(2), MaximumBudget(5000)]),
            HostedBy("p1"),
        ])
        assert restriction.satisfies(program)
        assert not AllOf([restriction, MaximumBudget(1000)]).satisfies(program)

    def test_children_are_immutable(self):
        children = [Always(True)]
        restriction = AllOf(children)
        children.append(Always(False))
        assert len(restriction.restrictions) == 1
        assert isinstance(restriction.restrictions, tuple)

    def test_re_evaluated_every_call(self, make_program):
        child = Always(True)
        restriction = AllOf([child])
        program = make_program()
        restriction.satisfies(program)
        restriction.satisfies(program)
        assert child.calls == 2

    def test_describe(self):
        assert AllOf([MaximumBudget(10), HostedBy("X")]).describe() == "(budget <= 10) and (hosted by X)"
        assert AnyOf([]).describe() == "never"
