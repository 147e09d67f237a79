import math
import pathlib
import sys

import pytest

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from riemann_surface.cipher import (
    POLY_SCALE,
    TORUS_MAJOR,
    TORUS_MINOR,
    encrypt_to_polynomial,
    encrypt_to_torus,
)

TEXTS = ["A", "AB", "Hello, Riemann!", "the quick brown fox", "Ünïcødé ∮ 漢字", "~" * 40]
TORUS_PARAMS = [(3, 5, 2, 7), (1, 1, 1, 1), (17, 256, 29, 101), (7, 13, 0, 3), (-5, 11, 4, 9)]


def test_empty_text_gives_empty_sequences():
    assert encrypt_to_torus("", 3, 5, 2, 7) == []
    assert encrypt_to_polynomial("", 3, 5) == []


def test_torus_points_stay_on_the_torus():
    inner = (TORUS_MAJOR - TORUS_MINOR) ** 2 - 1e-9
    outer = (TORUS_MAJOR + TORUS_MINOR) ** 2 + 1e-9
    for text in TEXTS:
        for params in TORUS_PARAMS:
            pts = encrypt_to_torus(text, *params)
            assert len(pts) == len(text)
            for x, y, z in pts:
                assert inner <= x * x + y * y <= outer
                assert abs(z) <= TORUS_MINOR + 1e-12


def test_torus_example_ab():
    # 'A' = 65: 195 % 5 = 0 -> theta 0,       130 % 7 = 4 -> phi 8pi/7
    # 'B' = 66: 198 % 5 = 3 -> theta 6pi/5,   132 % 7 = 6 -> phi 12pi/7
    pts = encrypt_to_torus("AB", 3, 5, 2, 7)
    expected = [
        (3 - math.cos(math.pi / 7), 0.0, -math.sin(math.pi / 7)),
        (
            -(3 + math.cos(2 * math.pi / 7)) * math.cos(math.pi / 5),
            -(3 + math.cos(2 * math.pi / 7)) * math.sin(math.pi / 5),
            -math.sin(2 * math.pi / 7),
        ),
    ]
    assert len(pts) == 2
    for got, want in zip(pts, expected):
        for g, w in zip(got, want):
            assert abs(g - w) < 1e-9


def test_polynomial_example_z():
    pts = encrypt_to_polynomial("Z", 1, 2)
    assert len(pts) == 1
    x, y, z = pts[0]
    assert abs(x - 90 * POLY_SCALE) < 1e-9
    assert abs(y) < 1e-12
    assert abs(z - math.sqrt(728999) * POLY_SCALE) < 1e-9


def test_polynomial_matches_builtin_complex():
    for ch in "az09~":
        c = ord(ch)
        zc = complex(c, (c * 11) % 13)
        w = (zc ** 3 - 1) ** 0.5
        x, y, z = encrypt_to_polynomial(ch, 11, 13)[0]
        assert abs(x - zc.real * POLY_SCALE) < 1e-9
        assert abs(y - zc.imag * POLY_SCALE) < 1e-9
        assert abs(z - w.real * POLY_SCALE) < 1e-6


def test_transforms_are_deterministic():
    for text in TEXTS:
        assert encrypt_to_torus(text, 3, 5, 2, 7) == encrypt_to_torus(text, 3, 5, 2, 7)
        assert encrypt_to_polynomial(text, 7, 31) == encrypt_to_polynomial(text, 7, 31)


def test_order_follows_input():
    fwd = encrypt_to_torus("abc", 3, 17, 5, 23)
    rev = encrypt_to_torus("cba", 3, 17, 5, 23)
    assert fwd == rev[::-1]


def test_negative_key_uses_truncated_remainder():
    # (65 * -1) rem 7 = -2, so Im z = -2 rather than 5
    _, y, _ = encrypt_to_polynomial("A", -1, 7)[0]
    assert abs(y - (-2 * POLY_SCALE)) < 1e-12


def test_zero_modulus_is_a_precondition_violation():
    with pytest.raises(ZeroDivisionError):
        encrypt_to_torus("A", 1, 0, 1, 2)
    with pytest.raises(ZeroDivisionError):
        encrypt_to_polynomial("A", 1, 0)
