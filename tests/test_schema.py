# Copyright (c) 2026 hsluvkit
# SPDX-License-Identifier: MIT

"""Tests for color value types."""

import dataclasses

import pytest

from hsluvkit.errors import HexParseError
from hsluvkit.schema import HPLuv, HSLuv, Hex, LCH, LUV, RGB, XYZ


ALL_TYPES = [RGB, XYZ, LUV, LCH, HSLuv, HPLuv]


class TestValueTypes:

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_frozen(self, cls):
        value = cls(1.0, 2.0, 3.0)
        field = dataclasses.fields(cls)[0].name
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(value, field, 9.0)

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_tuple_view_in_field_order(self, cls):
        assert cls(1.0, 2.0, 3.0).tuple == (1.0, 2.0, 3.0)

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_to_dict_roundtrip(self, cls):
        value = cls(0.25, 50.0, 300.0)
        assert cls.from_dict(value.to_dict()) == value

    def test_field_names(self):
        assert RGB(0.1, 0.2, 0.3).to_dict() == {"r": 0.1, "g": 0.2, "b": 0.3}
        assert LCH(50.0, 20.0, 10.0).to_dict() == {"l": 50.0, "c": 20.0, "h": 10.0}
        assert HSLuv(10.0, 20.0, 30.0).to_dict() == {"h": 10.0, "s": 20.0, "l": 30.0}

    def test_types_are_not_interchangeable(self):
        assert RGB(1.0, 2.0, 3.0) != XYZ(1.0, 2.0, 3.0)
        assert HSLuv(1.0, 2.0, 3.0) != HPLuv(1.0, 2.0, 3.0)

    def test_rgb_not_clamped(self):
        rgb = RGB(-0.5, 1.5, 0.5)
        assert rgb.r == -0.5
        assert rgb.g == 1.5


class TestConversionMethods:
    """Methods delegate to the pairwise conversion functions."""

    def test_forward_chain(self):
        hsluv = RGB(0.2, 0.4, 0.6).to_xyz().to_luv().to_lch().to_hsluv()
        assert isinstance(hsluv, HSLuv)

    def test_backward_chain(self):
        rgb = HPLuv(40.0, 60.0, 70.0).to_lch().to_luv().to_xyz().to_rgb()
        assert isinstance(rgb, RGB)

    def test_lch_both_targets(self):
        lch = LCH(60.0, 20.0, 140.0)
        assert isinstance(lch.to_hsluv(), HSLuv)
        assert isinstance(lch.to_hpluv(), HPLuv)


class TestHex:

    def test_canonical(self):
        assert Hex("#a1b2c3").string == "#a1b2c3"

    def test_uppercase_normalized(self):
        assert Hex("#A1B2C3").string == "#a1b2c3"

    def test_missing_hash_accepted(self):
        assert Hex("a1b2c3").string == "#a1b2c3"

    def test_str(self):
        assert str(Hex("#000000")) == "#000000"

    def test_equality_after_normalization(self):
        assert Hex("#ABCDEF") == Hex("abcdef")

    @pytest.mark.parametrize("text", ["#12345", "#1234567", "", "#", "##123456"])
    def test_wrong_length(self, text):
        with pytest.raises(HexParseError):
            Hex(text)

    @pytest.mark.parametrize("text", ["#gggggg", "#12 456", "#-12345", "#0x1234"])
    def test_non_hex_characters(self, text):
        with pytest.raises(HexParseError, match="non-hex|expected 6"):
            Hex(text)

    def test_not_a_string(self):
        with pytest.raises(HexParseError):
            Hex(0xFFFFFF)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            Hex("nope")

    def test_to_rgb(self):
        assert Hex("#ffffff").to_rgb() == RGB(1.0, 1.0, 1.0)
        assert Hex("#000000").to_rgb() == RGB(0.0, 0.0, 0.0)
