"""
Custom exceptions for RetroGrid.

Empty-collection access during revision (no ratings, no presenters, no
title words) always raises InsufficientDataError instead of yielding an
undefined value.
"""


class RetroGridError(Exception):
    """Base exception for all RetroGrid errors."""

    pass


class RevisionError(RetroGridError):
    """Raised when a revision step cannot be carried out."""

    pass


class InsufficientDataError(RevisionError):
    """Raised when a computation needs data a program does not have."""

    def __init__(self, message: str, program_title: str | None = None, field: str | None = None):
        """
        Initialize an insufficient data error.

        Args:
            message: Human-readable error message
            program_title: Title of the program lacking data
            field: Name of the empty attribute (ratings, presenters, title)
        """
        super().__init__(message)
        self.message = message
        self.program_title = program_title
        self.field = field


class ProgramNotScheduledError(RevisionError):
    """Raised when a program is expected in the grid but is not there."""

    def __init__(self, message: str, program_title: str | None = None):
        super().__init__(message)
        self.message = message
        self.program_title = program_title
