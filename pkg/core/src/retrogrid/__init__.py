"""
RetroGrid - editorial revision engine for a broadcast programming grid.
"""

__version__ = "0.1.0"
