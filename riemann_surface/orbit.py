"""Pointer-drag orbit controller."""

from dataclasses import dataclass
from enum import Enum

DRAG_SENSITIVITY = 0.005  # radians per pixel


class PointerKind(Enum):
    PRESS = 'press'
    MOVE = 'move'
    RELEASE = 'release'
    LEAVE = 'leave'


@dataclass(frozen=True)
class PointerEvent:
    kind: PointerKind
    x: float = 0.0
    y: float = 0.0


class OrbitController:
    """Idle/dragging state machine turning drag deltas into orbit angles.

    Horizontal motion yaws (rot_y), vertical motion tilts (rot_x).  Tilt is
    clamped on every move so the view never flips over the pole.
    """

    def __init__(self, sensitivity=DRAG_SENSITIVITY):
        self.sensitivity = sensitivity
        self.dragging = False
        self.last = (0.0, 0.0)

    def handle(self, event, view):
        """Apply one pointer event and return the (possibly new) view state."""
        if event.kind is PointerKind.PRESS:
            self.dragging = True
            self.last = (event.x, event.y)
        elif event.kind is PointerKind.MOVE:
            if not self.dragging:
                return view
            dx = event.x - self.last[0]
            dy = event.y - self.last[1]
            view = view.orbited(dx * self.sensitivity, dy * self.sensitivity)
            self.last = (event.x, event.y)
        elif event.kind in (PointerKind.RELEASE, PointerKind.LEAVE):
            self.dragging = False
        return view
