"""Shared types used across RetroGrid layers."""
