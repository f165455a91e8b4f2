"""Bar-chart drawing used by the sorting and scheduling demonstrations."""

import time
from typing import Callable, MutableSequence, Protocol, Sequence

from .graphics import rgb

BLACK = rgb(0, 0, 0)
GREEN = rgb(0, 255, 0)
YELLOW = rgb(255, 255, 0)
CYAN = rgb(0, 255, 255)

BAR_SIZE = 5
BAR_BACKGROUND_WIDTH = 100
PROCESS_WIDTH = 800
PROCESS_SCALE = 40
BOUNDARY_HEIGHT = 600
DELAY_SECONDS = 50e-6
HIGHLIGHT_PAUSES = 3


class Canvas(Protocol):
    """Anything that can plot points and lines, such as a graphic device."""

    def set_pixel(self, x: int, y: int, cr: int) -> None: ...

    def line(self, x1: int, y1: int, x2: int, y2: int, cr: int) -> None: ...


def _trunc_div(numer: int, denom: int) -> int:
    quotient = abs(numer) // denom
    return quotient if numer >= 0 else -quotient


class Painter:
    """Draws horizontal bars, highlights and boundaries on a canvas.

    Every bar drawn is followed by a short pause so that changes can be
    followed on screen; ``sleep`` is called with the pause in seconds.
    """

    def __init__(
        self,
        canvas: Canvas,
        sleep: Callable[[float], None] = time.sleep,
        delay_seconds: float = DELAY_SECONDS,
    ) -> None:
        self.canvas = canvas
        self._sleep = sleep
        self.delay_seconds = delay_seconds

    def delay(self) -> None:
        """Pause for the configured short delay."""
        self._sleep(self.delay_seconds)

    def _rows(self, l_edge: int, up_head: int, rows: int, width: int, background_width: int,
              color: int) -> None:
        for i in range(rows):
            self.canvas.line(l_edge, up_head + i, l_edge + background_width, up_head + i, BLACK)
        for i in range(rows):
            row_color = GREEN if i == 0 else color
            self.canvas.line(l_edge, up_head + i, l_edge + width, up_head + i, row_color)

    def draw_bar(self, bar_size: int, length: int, l_edge: int, up_head: int, color: int) -> None:
        """Draw a bar ``bar_size`` rows high whose width is half of ``length``.

        The background is cleared first; the top row of the bar is green.
        """
        self._rows(l_edge, up_head, bar_size, _trunc_div(length, 2), BAR_BACKGROUND_WIDTH, color)
        self.delay()

    def draw_arr(self, arr: Sequence[int], l_edge: int, color: int) -> None:
        """Draw one bar per element, stacked from the top of the screen."""
        for index, value in enumerate(arr):
            self.draw_bar(BAR_SIZE, value, l_edge, index * BAR_SIZE, color)

    def highlight_bar(self, bar_size: int, length: int, l_edge: int, up_head: int,
                      highlight_color: int, original_color: int) -> None:
        """Flash a bar in ``highlight_color`` and then restore its colour."""
        self.draw_bar(bar_size, length, l_edge, up_head, highlight_color)
        for _ in range(HIGHLIGHT_PAUSES):
            self.delay()
        self.draw_bar(bar_size, length, l_edge, up_head, original_color)

    def draw_swap(self, arr: MutableSequence[int], first_index: int, sec_index: int,
                  l_edge: int, original_color: int) -> None:
        """Swap two elements of ``arr`` and highlight both of their bars."""
        arr[first_index], arr[sec_index] = arr[sec_index], arr[first_index]
        self.highlight_bar(BAR_SIZE, arr[first_index], l_edge, first_index * BAR_SIZE,
                           YELLOW, original_color)
        self.highlight_bar(BAR_SIZE, arr[sec_index], l_edge, sec_index * BAR_SIZE,
                           CYAN, original_color)

    def draw_boundary(self, l_edge: int, up_head: int, size: int, color: int) -> None:
        """Draw a vertical band ``size`` pixels wide and 600 pixels high."""
        for i in range(size):
            self.canvas.line(l_edge + i, up_head, l_edge + i, up_head + BOUNDARY_HEIGHT, color)

    def draw_process(self, l_edge: int, up_head: int, size: int, length: int, color: int) -> None:
        """Draw a full-width priority bar scaled so that 40 spans 800 pixels."""
        width = PROCESS_WIDTH // PROCESS_SCALE * length
        self._rows(l_edge, up_head, size, width, PROCESS_WIDTH, color)
        self.delay()

    def clear(self, x: int, y: int, x1: int, y1: int) -> None:
        """Paint the rectangle from (x, y) up to but excluding (x1, y1) black."""
        for px in range(x, x1):
            for py in range(y, y1):
                self.canvas.set_pixel(px, py, BLACK)