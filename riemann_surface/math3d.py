"""
Orbit camera math: single-axis rotations and the fixed-camera perspective
projection used by the renderer.

The camera never moves.  It sits at (0, 0, -CAMERA_DISTANCE) relative to the
rotated scene, looking at the origin; orbiting is done by rotating the scene.
"""

import math
from dataclasses import dataclass, replace
from typing import NamedTuple

CAMERA_DISTANCE = 10.0  # world units from camera to origin
SCALE_PX = 120.0        # world units -> pixels at the origin's depth

INITIAL_ROT_X = 0.4  # tilt
INITIAL_ROT_Y = 0.8  # yaw
TILT_LIMIT = math.pi / 2 - 0.1


# ========================
# 3D rotation helpers
# ========================
def rot_x(p, a):
    x, y, z = p
    ca, sa = math.cos(a), math.sin(a)
    return (x, y * ca - z * sa, y * sa + z * ca)


def rot_y(p, a):
    x, y, z = p
    ca, sa = math.cos(a), math.sin(a)
    return (x * ca + z * sa, y, -x * sa + z * ca)


def clamp_tilt(a, limit=TILT_LIMIT):
    return max(-limit, min(limit, a))


@dataclass(frozen=True)
class ViewState:
    """Orbit angles in radians. rot_x is kept inside +-TILT_LIMIT by the controller."""

    rot_x: float = INITIAL_ROT_X
    rot_y: float = INITIAL_ROT_Y

    def orbited(self, d_yaw, d_tilt):
        return replace(self, rot_x=clamp_tilt(self.rot_x + d_tilt), rot_y=self.rot_y + d_yaw)


class Projected(NamedTuple):
    sx: float
    sy: float
    depth: float


def project_point(p, view, width, height, cam_dist=CAMERA_DISTANCE, scale_px=SCALE_PX):
    """Rotate p about X then Y, push it cam_dist away and perspective-divide.

    There is no near-plane clamp: as depth approaches zero the screen
    coordinates diverge (and become inf at exactly zero).
    """
    _, y1, z1 = rot_x(p, view.rot_x)
    x2, _, z2 = rot_y((p[0], y1, z1), view.rot_y)
    z_cam = z2 + cam_dist
    scale = cam_dist / z_cam if z_cam != 0 else math.inf
    sx = x2 * scale * scale_px + width / 2
    sy = -y1 * scale * scale_px + height / 2
    return Projected(sx, sy, z_cam)
