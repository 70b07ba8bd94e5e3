"""Shared fixtures: loguru capture and a small scrollable list widget."""

import pytest
from loguru import logger

from gridscroll.events import Outcome
from gridscroll.grid import Buffer, Rect
from gridscroll.scroll import (
    ScrollbarOrientation,
    ScrollingStateMixin,
    ScrollState,
)


class ListState(ScrollingStateMixin):
    """Two ScrollStates behind the ScrollingState accessors."""

    def __init__(self):
        self.v = ScrollState()
        self.h = ScrollState(orientation=ScrollbarOrientation.HORIZONTAL_BOTTOM)
        self.events = []
        self.result = Outcome.NOT_USED

    def vertical_max_offset(self) -> int:
        return self.v.max_offset

    def vertical_offset(self) -> int:
        return self.v.offset

    def vertical_page(self) -> int:
        return self.v.page_len

    def vertical_scroll(self) -> int:
        return self.v.effective_step()

    def horizontal_max_offset(self) -> int:
        return self.h.max_offset

    def horizontal_offset(self) -> int:
        return self.h.offset

    def horizontal_page(self) -> int:
        return self.h.page_len

    def horizontal_scroll(self) -> int:
        return self.h.effective_step()

    def set_vertical_offset(self, offset: int) -> bool:
        return self.v.set_offset(offset)

    def set_horizontal_offset(self, offset: int) -> bool:
        return self.h.set_offset(offset)

    def handle(self, event, qualifier):
        self.events.append((event, qualifier))
        return self.result


class ListWidget:
    """One line of text per item; scrolls by rows and columns."""

    def __init__(self, items):
        self.items = list(items)

    @property
    def width(self) -> int:
        return max((len(item) for item in self.items), default=0)

    def need_scroll(self, area: Rect, state: ListState) -> tuple[bool, bool]:
        return (self.width > area.width, len(self.items) > area.height)

    def render(self, area: Rect, buf: Buffer, state: ListState) -> None:
        state.v.page_len = area.height
        state.v.max_offset = max(0, len(self.items) - area.height)
        state.h.page_len = area.width
        state.h.max_offset = max(0, self.width - area.width)
        for i, y in enumerate(range(area.top, area.bottom)):
            index = state.v.offset + i
            if index < len(self.items):
                text = self.items[index][state.h.offset:][: area.width]
                buf.set_string(area.x, y, text)


class TextBlock:
    """Stateless widget that writes its lines at the top-left of its area."""

    def __init__(self, lines):
        self.lines = lines

    def render(self, area: Rect, buf: Buffer) -> None:
        for i, line in enumerate(self.lines):
            if i < area.height:
                buf.set_string(area.x, area.y + i, line[: area.width])


@pytest.fixture
def log_messages():
    """Collect gridscroll log records emitted during the test."""
    messages = []
    logger.enable("gridscroll")
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("gridscroll")


@pytest.fixture
def make_list():
    """Factory for (ListWidget, ListState) with ``n`` numbered items."""

    def factory(n: int, width: int = 4):
        items = [f"{i:0{width}d}" for i in range(n)]
        return ListWidget(items), ListState()

    return factory


@pytest.fixture
def text_block():
    return TextBlock
