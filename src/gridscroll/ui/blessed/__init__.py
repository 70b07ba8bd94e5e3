"""Blessed-based presentation of cell buffers."""

from .terminal import color_system_for, present, render_lines, write_at

__all__ = ["color_system_for", "present", "render_lines", "write_at"]
