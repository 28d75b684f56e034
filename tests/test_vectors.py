import math

import pytest

from stagecraft.vectors import Color8Bit, Float4


def test_default_vector_has_unit_w():
    v = Float4()
    assert (v.x, v.y, v.z, v.w) == (0.0, 0.0, 0.0, 1.0)


def test_colour_aliases():
    v = Float4(1, 2, 3, 4)
    assert (v.r, v.g, v.b, v.a) == (v.x, v.y, v.z, v.w)
    v.r = 9
    assert v.x == 9.0


def test_add_sub_keep_left_w():
    a = Float4(1, 2, 3, 7)
    b = Float4(4, 5, 6, 9)
    s = a + b
    assert (s.x, s.y, s.z, s.w) == (a.x + b.x, a.y + b.y, a.z + b.z, a.w)
    d = s - b
    assert d == a


def test_scalar_and_vector_multiply():
    a = Float4(1, 2, 3, 5)
    assert a * 2.0 == a + a
    prod = a * Float4(2, 2, 2, 0)
    assert prod == a * 2.0
    assert prod.w == a.w


def test_negation_resets_w():
    n = -Float4(1, -2, 3, 0)
    assert (n.x, n.y, n.z, n.w) == (-1.0, 2.0, -3.0, 1.0)


def test_size_and_normalize():
    v = Float4(3, 4)
    assert v.size_2d() == 5.0
    n = v.normalize_2d_return()
    assert n.size_2d() == pytest.approx(1.0)
    assert n.z == 0.0 and n.w == 0.0
    assert v == Float4(3, 4)


def test_normalize_zero_vector_is_unchanged():
    v = Float4()
    v.normalize_2d()
    assert v == Float4()


def test_rotation_quarter_turn():
    v = Float4(1, 0)
    v.rotation_z_to_deg(90)
    assert v.x == pytest.approx(0.0, abs=1e-9)
    assert v.y == pytest.approx(1.0)


def test_rotation_preserves_length():
    v = Float4(3, -7)
    r = Float4.vector_rotation_z_to_rad(v, 1.234)
    assert r.size_2d() == pytest.approx(v.size_2d())


def test_deg_to_dir_matches_rad_to_dir():
    for deg in (0, 30, 135, 270):
        a = Float4.deg_to_dir(deg)
        b = Float4.rad_to_dir(math.radians(deg))
        assert a.x == pytest.approx(b.x)
        assert a.y == pytest.approx(b.y)
        assert a.size_2d() == pytest.approx(1.0)


def test_lerp_endpoints_and_midpoint():
    p1 = Float4(0, 0)
    p2 = Float4(10, 20)
    assert Float4.lerp(p1, p2, 0.0) == p1
    mid = Float4.lerp(p1, p2, 0.5)
    assert mid == p2.half_2d()


def test_lerp_clamp_limits():
    p1 = Float4(1, 1)
    p2 = Float4(5, 9)
    assert Float4.lerp_clamp(p1, p2, 3.0) == Float4.lerp(p1, p2, 1.0)
    assert Float4.lerp_clamp(p1, p2, -2.0) == Float4.lerp(p1, p2, 0.0)


def test_integer_rounding_half_away_from_zero():
    v = Float4(2.5, -2.5)
    assert v.ix() == 3
    assert v.iy() == -3
    assert v.to_point() == (v.ix(), v.iy())


def test_halves():
    v = Float4(7, 9)
    assert v.hx() * 2 == v.x
    assert v.ihx() == Float4(v.hx(), 0).ix()
    assert v.ihy() == Float4(0, v.hy()).iy()


def test_is_zero_vector_ignores_z():
    assert Float4(0, 0, 5, 5).is_zero_vector_2d()
    assert not Float4(0, 1).is_zero_vector_2d()


def test_str_format():
    assert str(Float4(1, 2)) == "[X : 1.000000 Y : 2.000000 Z : 0.000000 W : 1.000000]"


def test_copy_is_independent():
    v = Float4(1, 2)
    c = v.copy()
    c.x = 100
    assert v.x == 1.0


def test_packed_colour_layout():
    assert Color8Bit(255, 0, 0, 255).color == 0xFF0000FF
    assert Color8Bit(0, 0, 0, 0).color == 0
    assert Color8Bit.from_color(0xFF0000FF) == Color8Bit.RED
    assert Color8Bit.from_color(0) == Color8Bit.BLACK_A


def test_colour_round_trip():
    for c in (Color8Bit.ORANGE, Color8Bit.CYAN_A, Color8Bit(1, 2, 3, 4)):
        assert Color8Bit.from_color(c.color) == c


def test_zero_alpha_color():
    assert Color8Bit.ORANGE.zero_alpha_color() == Color8Bit.ORANGE_A
    assert Color8Bit.WHITE.zero_alpha_color() == Color8Bit.WHITE_A


def test_default_colour_is_opaque_black():
    assert Color8Bit() == Color8Bit.BLACK


def test_invalid_channel_rejected():
    with pytest.raises(ValueError):
        Color8Bit(256, 0, 0, 0)
    with pytest.raises(ValueError):
        Color8Bit.from_color(-1)