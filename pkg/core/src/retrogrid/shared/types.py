"""
Shared types and enums for RetroGrid.

This module contains common types and enums that are used across
the domain, revision and runtime layers.
"""

from __future__ import annotations

from enum import Enum


class Weekday(str, Enum):
    """Days a program can be scheduled on."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
