"""
Core facade wiring the transforms, the orbit controller and the renderer.

The collaborator passed as ``controls`` owns the inputs; it needs three
methods: ``get_input() -> str``, ``get_params() -> Params`` and
``get_visibility() -> (show_torus, show_polynomial)``.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from riemann_surface.cipher import encrypt_to_polynomial, encrypt_to_torus
from riemann_surface.math3d import ViewState
from riemann_surface.orbit import OrbitController
from riemann_surface.renderer import render_scene

logger = logging.getLogger(__name__)

TORUS_NAME = 'torus'
POLY_NAME = 'polynomial surface'
EMPTY_MESSAGE = 'Enter some text and click "Encrypt & Visualise".'


@dataclass(frozen=True)
class Params:
    key1: int = 3
    mod1: int = 17
    key2: int = 5
    mod2: int = 23
    key3: int = 7
    mod3: int = 31


@dataclass(frozen=True)
class Status:
    character_count: int
    active_surfaces: Tuple[str, ...]

    @property
    def message(self):
        if self.character_count == 0:
            return EMPTY_MESSAGE
        plural = '' if self.character_count == 1 else 's'
        return (f"Encoded {self.character_count} character{plural} "
                f"on {' and '.join(self.active_surfaces)}.")


class Visualiser:
    def __init__(self, controls, surface=None, view=None):
        self.controls = controls
        self.surface = surface
        self.view = view if view is not None else ViewState()
        self.orbit = OrbitController()
        self.torus_pts = []
        self.poly_pts = []
        self.show_torus = True
        self.show_polynomial = True

    def recompute(self):
        """Pull the current inputs and regenerate both point sequences."""
        text = self.controls.get_input()
        params = self.controls.get_params()
        show_torus, show_poly = self.controls.get_visibility()

        torus_pts = []
        poly_pts = []
        if show_torus and text:
            torus_pts = encrypt_to_torus(text, params.key1, params.mod1, params.key2, params.mod2)
        if show_poly and text:
            poly_pts = encrypt_to_polynomial(text, params.key3, params.mod3)

        # Swap whole lists so a frame never sees a half-built sequence
        self.torus_pts = torus_pts
        self.poly_pts = poly_pts
        self.show_torus = show_torus
        self.show_polynomial = show_poly

        surfaces = []
        if show_torus:
            surfaces.append(TORUS_NAME)
        if show_poly:
            surfaces.append(POLY_NAME)
        status = Status(len(text), tuple(surfaces))
        logger.debug("recompute: %d chars, %d torus pts, %d poly pts, %s",
                     len(text), len(torus_pts), len(poly_pts), params)
        return status

    def render_frame(self, surface=None):
        surface = surface if surface is not None else self.surface
        if surface is None:
            raise ValueError("no drawing surface to render on")
        render_scene(surface, self.view, self.torus_pts, self.poly_pts,
                     show_torus=self.show_torus, show_polynomial=self.show_polynomial)

    def on_pointer_event(self, event):
        self.view = self.orbit.handle(event, self.view)
        return self.view
