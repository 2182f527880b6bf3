import logging

from .Vector2 import Vector2

logger = logging.getLogger(__name__)


class Pointer:
    """
    Last known pointer state, written by input callbacks and read by the next tick.

    The position is either present (a Vector2) or absent (pointer outside the
    viewport); there is no sentinel coordinate.
    """

    def __init__(self):
        self._pos = Vector2(0.0, 0.0)
        self._present = False
        self.pressed = False

    @property
    def position(self):
        return self._pos if self._present else None

    @property
    def present(self):
        return self._present

    def move(self, x, y):
        # reuse the slot: this fires on every motion event
        self._pos.set(x, y)
        self._present = True

    def leave(self):
        logger.debug("pointer left viewport")
        self._present = False
        self.pressed = False

    def press(self):
        logger.debug("pointer pressed")
        self.pressed = True

    def release(self):
        logger.debug("pointer released")
        self.pressed = False

    def __repr__(self):
        where = f"({self._pos.x:.1f}, {self._pos.y:.1f})" if self._present else "absent"
        return f"<Pointer {where} pressed={self.pressed}>"
