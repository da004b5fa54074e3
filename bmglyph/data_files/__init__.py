"""Builtin resources for bmglyph."""
