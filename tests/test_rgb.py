import pytest

from pixelseek.rgb import HEX_MAX, RGBColor, hex_similar_to_color, rgb_to_hex


def test_rgb_to_hex_packs_channels():
    assert rgb_to_hex(0x12, 0x34, 0x56) == 0x123456


def test_to_hex_of_white_is_max():
    assert RGBColor(255, 255, 255).to_hex() == HEX_MAX


@pytest.mark.parametrize("value", [0x000000, 0xFFFFFF, 0x123456, 0xABCDEF, 0x010203])
def test_hex_round_trip(value):
    assert RGBColor.from_hex(value).to_hex() == value


def test_from_hex_splits_channels():
    c = RGBColor.from_hex(0x123456)
    assert (c.red, c.green, c.blue) == (0x12, 0x34, 0x56)


def test_channel_out_of_range_rejected():
    with pytest.raises(ValueError):
        RGBColor(256, 0, 0)
    with pytest.raises(ValueError):
        RGBColor(0, -1, 0)


def test_zero_tolerance_requires_exact_match():
    assert hex_similar_to_color(0x102030, 0x102030, 0.0)
    assert not hex_similar_to_color(0x102030, 0x102031, 0.0)


def test_zero_tolerance_colour_objects():
    a = RGBColor(1, 2, 3)
    assert a.similar_to(RGBColor(1, 2, 3), 0.0)
    assert not a.similar_to(RGBColor(1, 2, 4), 0.0)


@pytest.mark.parametrize("h1,h2", [(0x000000, 0xFFFFFF), (0xFF00FF, 0x00FF00), (0x123456, 0x654321)])
def test_full_tolerance_matches_anything(h1, h2):
    assert hex_similar_to_color(h1, h2, 1.0)
    assert RGBColor.from_hex(h1).similar_to(RGBColor.from_hex(h2), 1.0)


def test_close_colours_match_with_small_tolerance():
    assert hex_similar_to_color(0x141414, 0x0A0A0A, 0.1)


def test_distant_colours_do_not_match_with_small_tolerance():
    assert not hex_similar_to_color(0x808080, 0x000000, 0.1)


@pytest.mark.parametrize(
    "h1,h2,tol",
    [(0x141414, 0x0A0A0A, 0.1), (0x808080, 0x000000, 0.1), (0x0A0000, 0x0B0000, 0.5), (0x112233, 0x112233, 0.3)],
)
def test_colour_and_hex_similarity_agree(h1, h2, tol):
    assert RGBColor.from_hex(h1).similar_to(RGBColor.from_hex(h2), tol) == hex_similar_to_color(h1, h2, tol)