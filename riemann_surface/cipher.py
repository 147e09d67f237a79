"""
Character-to-geometry transforms.

Every character of the input becomes one 3D point, in input order, so the
returned list doubles as polyline vertex order.  Neither mapping is a real
cipher: it is a deterministic coordinate scramble meant to be looked at.
"""

import math

from riemann_surface.complex_num import Complex

# Canonical torus used for both the encrypted points and the reference grid
TORUS_MAJOR = 3.0
TORUS_MINOR = 1.0

POLY_SCALE = 0.05  # keeps polynomial points near the torus' size
ONE = Complex(1.0, 0.0)


def _rem(a, m):
    # Truncated remainder: result carries the sign of the dividend.
    # m == 0 raises ZeroDivisionError, which is the caller's problem.
    r = abs(a) % abs(m)
    return -r if a < 0 else r


def torus_point(theta, phi, major=TORUS_MAJOR, minor=TORUS_MINOR):
    ring = major + minor * math.cos(phi)
    return (ring * math.cos(theta), ring * math.sin(theta), minor * math.sin(phi))


def encrypt_to_torus(text, key1, mod1, key2, mod2):
    """Place each character on the torus using two independent modular angles.

    theta comes from (code*key1) mod mod1 and phi from (code*key2) mod mod2,
    each scaled onto a full turn.  mod1 and mod2 must be non-zero.
    """
    two_pi = 2.0 * math.pi
    pts = []
    for ch in text:
        code = ord(ch)
        theta = _rem(code * key1, mod1) / mod1 * two_pi
        phi = _rem(code * key2, mod2) / mod2 * two_pi
        pts.append(torus_point(theta, phi))
    return pts


def encrypt_to_polynomial(text, key, mod_val):
    """Map characters through w = sqrt(z^3 - 1) with z = code + i*((code*key) mod mod_val).

    The point is (Re z, Im z, Re w) scaled by POLY_SCALE.
    """
    pts = []
    for ch in text:
        code = ord(ch)
        z = Complex(code, _rem(code * key, mod_val))
        w = z.pow(3).sub(ONE).sqrt()
        pts.append((z.re * POLY_SCALE, z.im * POLY_SCALE, w.re * POLY_SCALE))
    return pts
