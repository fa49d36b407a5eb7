"""
Editorial revision engine.

Restrictions decide whether a program qualifies; actions correct the ones
that do not; RevisionProcess drives both over a grid.
"""

from .actions import (
    ChangeDay,
    MergePrograms,
    ReplaceWithDefaultShow,
    RevisionAction,
    SplitProgram,
)
from .process import RevisionCondition, RevisionOutcome, RevisionProcess
from .restrictions import (
    AllOf,
    AnyOf,
    HostedBy,
    MaximumBudget,
    MinimumAverageRating,
    MinimumPresenterCount,
    Restriction,
)

__all__ = [
    # Restrictions
    "Restriction",
    "MinimumAverageRating",
    "MinimumPresenterCount",
    "HostedBy",
    "MaximumBudget",
    "AllOf",
    "AnyOf",
    # Actions
    "RevisionAction",
    "SplitProgram",
    "ReplaceWithDefaultShow",
    "MergePrograms",
    "ChangeDay",
    # Process
    "RevisionCondition",
    "RevisionOutcome",
    "RevisionProcess",
]
