"""Keyboard control of the producer and consumer task priorities."""

import enum
from typing import Callable, Optional, Tuple

from .drawing import Painter
from .graphics import rgb

NZERO = 20
PRIORITY_MIN = 0
PRIORITY_MAX = 2 * NZERO - 1
INITIAL_PRIORITY = 20
CONTROLLER_PRIORITY = 0

MAX_BLOCKS = 25
BLOCK_SIZE = 6
ARR_SIZE = 100

STATUS_BAR_SIZE = 15
STATUS_ROWS: Tuple[int, int] = (570, 585)
STATUS_COLORS: Tuple[int, int] = (rgb(50, 50, 50), rgb(100, 0, 50))
WATCHED_TASKS: Tuple[int, int] = (2, 3)


class Key(enum.IntEnum):
    """Scan codes of the arrow keys as returned by the keyboard."""

    UP = 0x4800
    DOWN = 0x5000
    LEFT = 0x4D00
    RIGHT = 0x4B00


class PriorityControl:
    """Adjusts two tasks' priorities from arrow keys.

    Up/Down raise and lower the producer, Left/Right raise and lower the
    consumer, within ``PRIORITY_MIN..PRIORITY_MAX``. When a painter and a
    priority query are given, the priorities of the watched tasks are drawn
    as bars before each key is handled.
    """

    def __init__(
        self,
        producer: int,
        consumer: int,
        set_priority: Callable[[int], None] | Callable[[int, int], object],
        *,
        self_tid: Optional[int] = None,
        get_priority: Optional[Callable[[int], int]] = None,
        painter: Optional[Painter] = None,
    ) -> None:
        self.producer = producer
        self.consumer = consumer
        self._set_priority = set_priority
        self._get_priority = get_priority
        self._painter = painter
        self.producer_priority = INITIAL_PRIORITY
        self.consumer_priority = INITIAL_PRIORITY
        if self_tid is not None:
            set_priority(self_tid, CONTROLLER_PRIORITY)
        set_priority(producer, self.producer_priority)
        set_priority(consumer, self.consumer_priority)

    def _draw_status(self) -> None:
        if self._painter is None or self._get_priority is None:
            return
        for tid, row, color in zip(WATCHED_TASKS, STATUS_ROWS, STATUS_COLORS):
            priority = self._get_priority(tid)
            if priority != 0:
                self._painter.draw_process(0, row, STATUS_BAR_SIZE, priority, color)

    def handle_key(self, key: int) -> bool:
        """Apply one key press; return True if a priority was changed."""
        self._draw_status()
        try:
            pressed = Key(key)
        except ValueError:
            return False

        if pressed in (Key.UP, Key.DOWN):
            step = 1 if pressed is Key.UP else -1
            new = self.producer_priority + step
            if not PRIORITY_MIN <= new <= PRIORITY_MAX:
                return False
            self.producer_priority = new
            self._set_priority(self.producer, new)
            return True

        step = 1 if pressed is Key.LEFT else -1
        new = self.consumer_priority + step
        if not PRIORITY_MIN <= new <= PRIORITY_MAX:
            return False
        self.consumer_priority = new
        self._set_priority(self.consumer, new)
        return True