import pytest

from converter.transforms import cbrt, oklab_to_oklch, oklch_to_oklab, oklch_to_srgb, srgb_to_oklch

rgb_tolerance = 1
oklch_tolerance = 0.01

# 0, 17, 34, ... 255 on every channel
GRID = range(0, 256, 17)

class TestOklchToSrgb:

    def test_vibrant_red(self):
        r, g, b = oklch_to_srgb(0.627, 0.277, 27.23)
        assert abs(r - 237) <= 2
        assert abs(g - 0) <= 2
        assert abs(b - 64) <= 2

    def test_returns_ints(self):
        rgb = oklch_to_srgb(0.5, 0.1, 200)
        assert all(isinstance(v, int) for v in rgb)

    def test_black_and_white(self):
        assert oklch_to_srgb(0, 0, 0) == (0, 0, 0)
        assert oklch_to_srgb(1, 0, 0) == (255, 255, 255)

    def test_missing_hue_is_zero(self):
        assert oklch_to_srgb(0.6, 0.1, None) == oklch_to_srgb(0.6, 0.1, 0)
        assert oklch_to_srgb(0.6, 0.1, float("nan")) == oklch_to_srgb(0.6, 0.1, 0)

    def test_out_of_gamut_is_clamped(self):
        for l, c, h in [(1.0, 0.4, 0), (0.9, 0.5, 140), (0.2, 0.5, 264), (1.5, 0, 0), (-0.3, 0, 0)]:
            rgb = oklch_to_srgb(l, c, h)
            assert all(0 <= v <= 255 for v in rgb)

    def test_hue_is_periodic(self):
        assert oklch_to_srgb(0.7, 0.12, 30) == oklch_to_srgb(0.7, 0.12, 390)

class TestSrgbToOklch:

    def test_royal_purple(self):
        l, c, h = srgb_to_oklch(128, 0, 128)
        assert abs(l - 0.4302) < oklch_tolerance
        assert abs(c - 0.2319) < oklch_tolerance
        assert abs(h - 328.36) < oklch_tolerance

    def test_black(self):
        assert srgb_to_oklch(0, 0, 0) == (0, 0, 0)

    def test_white_is_achromatic(self):
        l, c, _ = srgb_to_oklch(255, 255, 255)
        assert l == pytest.approx(1.0, abs=1e-3)
        assert l <= 1
        assert c < 1e-3

    def test_hue_always_in_range(self):
        for r in GRID:
            for g in GRID:
                for b in GRID:
                    _, _, h = srgb_to_oklch(r, g, b)
                    assert 0 <= h < 360

    def test_lightness_always_in_range(self):
        for v in (0, 1, 64, 200, 255):
            l, _, _ = srgb_to_oklch(v, v, v)
            assert 0 <= l <= 1

def test_round_trip_grid():
    for r in GRID:
        for g in GRID:
            for b in GRID:
                r_out, g_out, b_out = oklch_to_srgb(*srgb_to_oklch(r, g, b))
                assert abs(r - r_out) <= rgb_tolerance
                assert abs(g - g_out) <= rgb_tolerance
                assert abs(b - b_out) <= rgb_tolerance

def test_round_trip_primaries_and_secondaries():
    for rgb in [(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 0), (0, 255, 255), (255, 0, 255)]:
        out = oklch_to_srgb(*srgb_to_oklch(*rgb))
        assert all(abs(a - b) <= rgb_tolerance for a, b in zip(rgb, out))

def test_cbrt_handles_negative_values():
    assert cbrt(8) == pytest.approx(2)
    assert cbrt(-8) == pytest.approx(-2)
    assert cbrt(0) == 0

def test_polar_helpers_round_trip():
    l, a, b = oklch_to_oklab(0.5, 0.2, 300)
    l2, c2, h2 = oklab_to_oklch(l, a, b)
    assert l2 == 0.5
    assert c2 == pytest.approx(0.2)
    assert h2 == pytest.approx(300)

def test_hue_never_reaches_360():
    # atan2 gives a tiny negative angle that wraps to exactly 360.0
    _, _, h = oklab_to_oklch(0.5, 1.0, -1e-18)
    assert h == 0.0
