import pytest

from theme_lab.design.color import ColorParseError, ColorValue, ParseErrorKind, parse_color


def _kind(text):
    with pytest.raises(ColorParseError) as info:
        parse_color(text)
    return info.value.kind


def test_comma_triple_normalizes_channels():
    assert parse_color("255,0,0") == ColorValue(1.0, 0, 0)
    assert parse_color(" 0 , 128 ,255 ").to_rgb8() == (0, 128, 255)


def test_hash_and_bare_hex_are_equal():
    red = ColorValue.from_rgb8(255, 0, 0)
    assert parse_color("#ff0000") == red
    assert parse_color("ff0000") == red
    assert parse_color("  #FF0000  ") == red


def test_hex_is_packed_integer():
    # zero-extended on the left: "ff" is 0x0000ff
    assert parse_color("ff").to_rgb8() == (0, 0, 255)
    assert parse_color("#1f").to_rgb8() == (0, 0, 31)


def test_display_text_form_is_accepted():
    assert parse_color("rgb(12, 34, 56)").to_rgb8() == (12, 34, 56)


def test_leading_zero_channels():
    assert parse_color("000255, +0007, 0").to_rgb8() == (255, 7, 0)


def test_empty_and_whitespace():
    assert _kind("") is ParseErrorKind.EMPTY
    assert _kind("   ") is ParseErrorKind.EMPTY


@pytest.mark.parametrize(
    "text",
    ["1,2", "1,2,3,4", "1,2,256", "1,x,3", "1,,3", "-1,0,0", "1.5,2,3", "1," + "9" * 5000 + ",3"],
)
def test_invalid_channel(text):
    assert _kind(text) is ParseErrorKind.INVALID_CHANNEL


@pytest.mark.parametrize("text", ["#", "#zz0000", "##ff0000", "0x12", "red", "ab#cd", "1000000", "#-ff"])
def test_invalid_hex(text):
    assert _kind(text) is ParseErrorKind.INVALID_HEX


def test_error_keeps_raw_text():
    with pytest.raises(ColorParseError) as info:
        parse_color(" #nothex ")
    assert info.value.text == " #nothex "
    assert isinstance(info.value, ValueError)


def test_color_value_rejects_out_of_range():
    with pytest.raises(ValueError):
        ColorValue(1.2, 0.0, 0.0)
    with pytest.raises(ValueError):
        ColorValue(0.0, -0.1, 0.0)
    with pytest.raises(ValueError):
        ColorValue.from_rgb8(0, 0, 256)


def test_hex_formatting():
    assert ColorValue.from_rgb8(61, 139, 253).to_hex() == "#3d8bfd"
    assert ColorValue.from_packed(0x3D8BFD).to_rgb8() == (61, 139, 253)
