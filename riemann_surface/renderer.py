"""
Immediate-mode scene renderer.

Draw order is fixed: reference grid, torus set, polynomial set.  Nothing is
depth sorted, so where the sets overlap the later one always wins even when
it is further from the camera.
"""

import math
from functools import lru_cache
from typing import Protocol, Sequence, Tuple

import pygame

from riemann_surface.cipher import torus_point
from riemann_surface.math3d import project_point

Color = Tuple[int, int, int]

BACKGROUND = (255, 255, 255)
GRID_COLOR = (0xdd, 0xdd, 0xdd)
TORUS_COLOR = (0x00, 0x66, 0xcc)
POLY_COLOR = (0xcc, 0x33, 0x00)

GRID_MAJOR_STEPS = 24
GRID_MINOR_STEPS = 12
GRID_LINE_WIDTH = 1
DATA_LINE_WIDTH = 2
MARKER_RADIUS = 4

# pygame converts coordinates to C ints; anything past this is off-screen anyway
COORD_LIMIT = 1e6


class DrawSurface(Protocol):
    """The 2D capability the renderer needs from whatever it draws on."""

    @property
    def size(self) -> Tuple[int, int]: ...

    def clear(self, color: Color) -> None: ...

    def line(self, start, end, color: Color, width: int = 1) -> None: ...

    def circle(self, center, radius: float, color: Color) -> None: ...


def _drawable(p):
    return all(math.isfinite(v) and abs(v) < COORD_LIMIT for v in p)


class PygameSurface:
    """DrawSurface backed by a pygame.Surface.

    Segments or markers with a non-finite (or absurdly large) endpoint are
    skipped; they come from points sitting at or behind the camera plane.
    """

    def __init__(self, surface):
        self.surface = surface

    @property
    def size(self):
        return self.surface.get_size()

    def clear(self, color):
        self.surface.fill(color)

    def line(self, start, end, color, width=1):
        if _drawable(start) and _drawable(end):
            pygame.draw.line(self.surface, color, start, end, width)

    def circle(self, center, radius, color):
        if _drawable(center):
            pygame.draw.circle(self.surface, color, center, radius)


@lru_cache(maxsize=None)
def torus_grid_rings(major_steps=GRID_MAJOR_STEPS, minor_steps=GRID_MINOR_STEPS):
    """World-space rings of the canonical torus, computed once.

    First the constant-theta rings (around the tube), then the constant-phi
    rings (around the hole).  Both families include the end angle so every
    ring closes on itself.
    """
    two_pi = 2.0 * math.pi
    rings = []
    for i in range(major_steps + 1):
        theta = i / major_steps * two_pi
        rings.append(tuple(torus_point(theta, j / minor_steps * two_pi)
                           for j in range(minor_steps + 1)))
    for j in range(minor_steps + 1):
        phi = j / minor_steps * two_pi
        rings.append(tuple(torus_point(i / major_steps * two_pi, phi)
                           for i in range(major_steps + 1)))
    return tuple(rings)


def draw_polyline(surface, pts2d, color, width):
    for p0, p1 in zip(pts2d, pts2d[1:]):
        surface.line(p0, p1, color, width)


def _project_all(pts, view, width, height):
    out = []
    for p in pts:
        sx, sy, _ = project_point(p, view, width, height)
        out.append((sx, sy))
    return out


def draw_torus_grid(surface, view):
    width, height = surface.size
    for ring in torus_grid_rings():
        draw_polyline(surface, _project_all(ring, view, width, height), GRID_COLOR, GRID_LINE_WIDTH)


def draw_data_set(surface, pts: Sequence, view, color):
    """Polyline through the points in order (not closed) plus a dot on each."""
    if not pts:
        return
    width, height = surface.size
    projected = _project_all(pts, view, width, height)
    draw_polyline(surface, projected, color, DATA_LINE_WIDTH)
    for p in projected:
        surface.circle(p, MARKER_RADIUS, color)


def render_scene(surface, view, torus_pts=(), poly_pts=(), show_torus=True, show_polynomial=True):
    surface.clear(BACKGROUND)
    draw_torus_grid(surface, view)
    if show_torus:
        draw_data_set(surface, torus_pts, view, TORUS_COLOR)
    if show_polynomial:
        draw_data_set(surface, poly_pts, view, POLY_COLOR)
