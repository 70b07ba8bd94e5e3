"""Terminal output of cell buffers through blessed."""

import sys
from typing import Optional, TextIO

from blessed import Terminal
from rich.color import ColorSystem
from rich.style import Style

from ...grid.buffer import Buffer


def color_system_for(term: Terminal) -> Optional[ColorSystem]:
    """Pick the rich color system matching the terminal's color support.

    Returns None for terminals without color; styles are then dropped.
    """
    colors = term.number_of_colors
    if colors >= 1 << 24:
        return ColorSystem.TRUECOLOR
    if colors >= 256:
        return ColorSystem.EIGHT_BIT
    if colors >= 8:
        return ColorSystem.STANDARD
    return None


def render_lines(
    buf: Buffer, color_system: Optional[ColorSystem] = ColorSystem.TRUECOLOR
) -> list[str]:
    """Render each buffer row to a string with ANSI styling.

    Adjacent cells sharing a style are emitted as one run.

    Args:
        buf: Buffer to render
        color_system: rich color system, None for plain text

    Returns:
        One string per row, top to bottom
    """
    lines = []
    for row in buf.rows():
        parts = []
        run_style: Optional[Style] = None
        run_text = ""
        for cell in row:
            if cell.style == run_style:
                run_text += cell.symbol
                continue
            if run_text:
                parts.append(_styled(run_text, run_style, color_system))
            run_style = cell.style
            run_text = cell.symbol
        if run_text:
            parts.append(_styled(run_text, run_style, color_system))
        lines.append("".join(parts))
    return lines


def _styled(text: str, style: Optional[Style], color_system: Optional[ColorSystem]) -> str:
    if style is None or color_system is None or not style:
        return text
    return style.render(text, color_system=color_system)


def write_at(
    term: Terminal,
    x: int,
    y: int,
    content: str,
    *,
    clear: bool = False,
    stream: TextIO = sys.stdout,
) -> None:
    """Write content at a position.

    Args:
        term: Blessed terminal instance
        x: Column position (0-indexed)
        y: Row position (0-indexed)
        content: Text to write (can include terminal formatting)
        clear: Clear to end of line after moving
        stream: Output stream (default stdout)
    """
    if clear:
        stream.write(term.move_xy(x, y) + term.clear_eol + content)
    else:
        stream.write(term.move_xy(x, y) + content)


def present(term: Terminal, buf: Buffer, stream: TextIO = sys.stdout) -> None:
    """Draw a buffer at its own area on the terminal and flush."""
    color_system = color_system_for(term)
    for dy, line in enumerate(render_lines(buf, color_system)):
        write_at(term, buf.area.x, buf.area.y + dy, line, stream=stream)
    stream.flush()
