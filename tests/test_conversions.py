# Copyright (c) 2026 hsluvkit
# SPDX-License-Identifier: MIT

"""Tests for pairwise conversions and full pipelines."""

import pytest

from hsluvkit import (
    HexParseError,
    HPLuv,
    HSLuv,
    Hex,
    LCH,
    LUV,
    RGB,
    RGBRangeError,
    XYZ,
    hex_to_hsluv,
    hpluv_to_hex,
    hpluv_to_rgb,
    hsluv_to_hex,
    hsluv_to_rgb,
    rgb_to_hpluv,
    rgb_to_hsluv,
)
from hsluvkit.convert.pairwise import (
    from_linear,
    hex_to_rgb,
    l_to_y,
    luv_to_lch,
    rgb_to_hex,
    to_linear,
    xyz_to_luv,
    y_to_l,
)
from hsluvkit.runtime.snapshot import hex_samples


TOLERANCE = 1e-9


def _frange(stop, step):
    return [float(v) for v in range(0, stop + 1, step)]


class TestTransferFunctions:

    def test_linear_segment(self):
        assert to_linear(0.03) == pytest.approx(0.03 / 12.92, abs=1e-12)
        assert from_linear(0.002) == pytest.approx(0.002 * 12.92, abs=1e-12)

    def test_roundtrip(self):
        for c in [0.0, 0.01, 0.04, 0.05, 0.2, 0.5, 0.9, 1.0]:
            assert from_linear(to_linear(c)) == pytest.approx(c, abs=1e-12)

    def test_roundtrip_at_encoded_threshold(self):
        """0.04045 linearizes just above 0.0031308 and returns via the power segment."""
        assert to_linear(0.04045) > 0.0031308
        assert from_linear(to_linear(0.04045)) == pytest.approx(0.04045, abs=1e-7)

    def test_lightness_roundtrip(self):
        for L in [0.0, 1.0, 7.9, 8.0, 8.1, 50.0, 100.0]:
            assert y_to_l(l_to_y(L)) == pytest.approx(L, abs=1e-10)


class TestRoundTripIdentity:
    """Hex → ... → HSLuv → ... → Hex must reproduce every stage."""

    def test_all_equal_nibble_samples(self):
        for sample in hex_samples():
            rgb = Hex(sample).to_rgb()
            xyz = rgb.to_xyz()
            luv = xyz.to_luv()
            lch = luv.to_lch()
            hsluv = lch.to_hsluv()

            back_lch = hsluv.to_lch()
            back_luv = back_lch.to_luv()
            back_xyz = back_luv.to_xyz()
            back_rgb = back_xyz.to_rgb()

            for forward, back in (
                (lch, back_lch),
                (luv, back_luv),
                (xyz, back_xyz),
                (rgb, back_rgb),
            ):
                assert back.tuple == pytest.approx(forward.tuple, abs=TOLERANCE), sample

            assert back_rgb.to_hex().string == sample

    def test_hpluv_roundtrip(self):
        for sample in hex_samples()[::37]:
            rgb = Hex(sample).to_rgb()
            back = hpluv_to_rgb(rgb_to_hpluv(rgb))
            assert back.tuple == pytest.approx(rgb.tuple, abs=TOLERANCE), sample


class TestGamutContainment:
    """Every valid (h, s, l) must land inside the RGB cube."""

    def test_hsluv_grid(self):
        for h in _frange(360, 5):
            for s in _frange(100, 5):
                for l in _frange(100, 5):
                    rgb = hsluv_to_rgb(HSLuv(h, s, l))
                    for channel in rgb.tuple:
                        assert -TOLERANCE <= channel <= 1 + TOLERANCE, (h, s, l, rgb)

    def test_hpluv_grid(self):
        for h in _frange(360, 10):
            for s in _frange(100, 10):
                for l in _frange(100, 10):
                    rgb = hpluv_to_rgb(HPLuv(h, s, l))
                    for channel in rgb.tuple:
                        assert -TOLERANCE <= channel <= 1 + TOLERANCE, (h, s, l, rgb)


class TestDegenerateLightness:

    @pytest.mark.parametrize("L", [0.0, 100.0])
    def test_hsluv_saturation_zero(self, L):
        hsluv = LCH(L, 50.0, 120.0).to_hsluv()
        assert hsluv.s == 0.0
        assert hsluv.h == 120.0
        assert hsluv.l == L

    @pytest.mark.parametrize("L", [0.0, 100.0])
    def test_hpluv_saturation_zero(self, L):
        hpluv = LCH(L, 50.0, 120.0).to_hpluv()
        assert hpluv.s == 0.0
        assert hpluv.h == 120.0

    @pytest.mark.parametrize("L", [0.0, 1e-9, 99.99999999, 100.0])
    def test_chroma_zero_when_converting_back(self, L):
        assert HSLuv(200.0, 80.0, L).to_lch().c == 0.0
        assert HPLuv(200.0, 80.0, L).to_lch().c == 0.0

    def test_grey_hue_disambiguated(self):
        lch = luv_to_lch(LUV(50.0, 1e-9, 0.0))
        assert lch.h == 0.0
        assert lch.c == pytest.approx(1e-9)

    def test_negative_hue_wrapped(self):
        lch = luv_to_lch(LUV(50.0, 10.0, -10.0))
        assert lch.h == pytest.approx(315.0)

    def test_black_xyz_short_circuits(self):
        assert xyz_to_luv(XYZ(0.0, 0.0, 0.0)) == LUV(0.0, 0.0, 0.0)
        assert LUV(0.0, 12.0, -3.0).to_xyz() == XYZ(0.0, 0.0, 0.0)


class TestFixedPoints:

    def test_black(self):
        rgb = hsluv_to_rgb(HSLuv(0.0, 0.0, 0.0))
        assert rgb == RGB(0.0, 0.0, 0.0)
        assert rgb.to_hex().string == "#000000"

    @pytest.mark.parametrize("h", [0.0, 90.0, 233.0, 360.0])
    def test_white(self, h):
        rgb = hsluv_to_rgb(HSLuv(h, 0.0, 100.0))
        assert rgb.tuple == pytest.approx((1.0, 1.0, 1.0), abs=TOLERANCE)
        assert rgb.to_hex().string == "#ffffff"

    def test_hex_conveniences(self):
        assert hsluv_to_hex(HSLuv(0.0, 0.0, 100.0)).string == "#ffffff"
        assert hpluv_to_hex(HPLuv(0.0, 0.0, 0.0)).string == "#000000"


class TestReferenceVectors:
    """Values published with the HSLuv reference implementation."""

    def test_red_to_hsluv(self):
        hsluv = rgb_to_hsluv(RGB(1.0, 0.0, 0.0))
        assert hsluv.h == pytest.approx(12.177050630061776, abs=1e-6)
        assert hsluv.s == pytest.approx(100.0, abs=1e-6)
        assert hsluv.l == pytest.approx(53.23711559542933, abs=1e-6)

    def test_red_to_lch(self):
        lch = rgb_to_hsluv(RGB(1.0, 0.0, 0.0)).to_lch()
        assert lch.c == pytest.approx(179.04142708939605, abs=1e-6)

    def test_red_to_hpluv(self):
        hpluv = rgb_to_hpluv(RGB(1.0, 0.0, 0.0))
        assert hpluv.h == pytest.approx(12.177050630061776, abs=1e-6)
        assert hpluv.s == pytest.approx(426.7467891414786, abs=1e-6)
        assert hpluv.l == pytest.approx(53.23711559542933, abs=1e-6)

    def test_hpluv_to_red(self):
        rgb = hpluv_to_rgb(HPLuv(12.177050630061776, 426.7467891414786, 53.23711559542933))
        assert rgb.tuple == pytest.approx((1.0, 0.0, 0.0), abs=1e-6)

    def test_green_to_hsluv(self):
        hsluv = hex_to_hsluv("#00ff00")
        assert hsluv.h == pytest.approx(127.71501294924046, abs=1e-6)
        assert hsluv.s == pytest.approx(100.0, abs=1e-6)
        assert hsluv.l == pytest.approx(87.73551910965973, abs=1e-6)

    def test_blue_to_hsluv(self):
        hsluv = hex_to_hsluv("#0000ff")
        assert hsluv.h == pytest.approx(265.8743202181779, abs=1e-6)
        assert hsluv.s == pytest.approx(100.0, abs=1e-6)
        assert hsluv.l == pytest.approx(32.30087290398002, abs=1e-6)

    def test_hsluv_to_red(self):
        rgb = hsluv_to_rgb(HSLuv(12.177050630061776, 100.0, 53.23711559542933))
        assert rgb.tuple == pytest.approx((1.0, 0.0, 0.0), abs=1e-6)

    def test_primaries_exceed_pastel_range(self):
        """Fully saturated primaries are outside the HPLuv 0-100 range."""
        for rgb in (RGB(1.0, 0.0, 0.0), RGB(0.0, 1.0, 0.0), RGB(0.0, 0.0, 1.0)):
            assert rgb_to_hpluv(rgb).s > 100.0

    def test_back_and_forth(self):
        original = RGB(0.51, 0.251, 0.557)
        returned = hsluv_to_rgb(rgb_to_hsluv(original))
        assert returned.tuple == pytest.approx(original.tuple, abs=TOLERANCE)


class TestHexEncoding:

    def test_equal_nibble_table(self):
        for sample in hex_samples():
            assert Hex(sample).to_rgb().to_hex().string == sample

    def test_decode(self):
        rgb = hex_to_rgb("#ff8000")
        assert rgb.r == 1.0
        assert rgb.g == pytest.approx(128 / 255)
        assert rgb.b == 0.0

    def test_encode_rounds_half_up(self):
        assert rgb_to_hex(RGB(0.5, 0.5, 0.5)).string == "#808080"

    def test_tiny_overshoot_is_rounded_away(self):
        assert RGB(1.0000001, -0.0000001, 0.0).to_hex().string == "#ff0000"

    @pytest.mark.parametrize("rgb", [RGB(1.1, 0.0, 0.0), RGB(0.0, -0.01, 0.0), RGB(0.0, 0.0, 2.0)])
    def test_out_of_range_raises(self, rgb):
        with pytest.raises(RGBRangeError) as exc:
            rgb.to_hex()
        assert exc.value.channel in ("r", "g", "b")

    def test_out_of_range_is_value_error(self):
        with pytest.raises(ValueError, match="Illegal RGB value"):
            RGB(1.5, 0.0, 0.0).to_hex()

    def test_invalid_hex_string_raises(self):
        with pytest.raises(HexParseError):
            hex_to_rgb("#12345z")
