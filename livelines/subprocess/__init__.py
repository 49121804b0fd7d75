"""Subprocess producers feeding stream buffers."""
