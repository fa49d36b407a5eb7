"""
Domain layer - programs, their value objects and the grid that holds them.

This layer contains the core schedule entities, independent of revision
policy and notification concerns.
"""

from .entities import Presenter, Program, Rating
from .grid import Grid

__all__ = ["Grid", "Presenter", "Program", "Rating"]
