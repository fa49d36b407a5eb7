"""Core editorial logic of RetroGrid."""
