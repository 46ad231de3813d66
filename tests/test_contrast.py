from theme_lab.design.color import ColorValue
from theme_lab.design.contrast import (
    NEAR_BLACK,
    NEAR_WHITE,
    brightness,
    contrast_for,
    contrast_ratio,
    make_pair,
    readable,
)

WHITE = ColorValue(1.0, 1.0, 1.0)
BLACK = ColorValue(0.0, 0.0, 0.0)


def test_extremes():
    assert contrast_for(WHITE) == NEAR_BLACK
    assert contrast_for(BLACK) == NEAR_WHITE


def test_constants():
    assert NEAR_BLACK.to_rgb8() == (10, 10, 10)
    assert NEAR_WHITE.to_rgb8() == (235, 235, 235)


def test_threshold_is_inclusive_on_light_side():
    gray = ColorValue.from_rgb8(128, 128, 128)
    assert brightness(gray) == 128.0
    assert contrast_for(gray) == NEAR_BLACK
    assert contrast_for(ColorValue.from_rgb8(127, 127, 127)) == NEAR_WHITE


def test_blue_weight():
    blue = ColorValue.from_rgb8(0, 0, 255)
    assert abs(brightness(blue) - 114 * 255 / 1000) < 1e-9
    assert contrast_for(blue) == NEAR_WHITE
    # pure green is bright enough for the dark foreground
    assert contrast_for(ColorValue.from_rgb8(0, 255, 0)) == NEAR_BLACK


def test_totality_over_grid():
    results = set()
    for r in range(0, 256, 51):
        for g in range(0, 256, 51):
            for b in range(0, 256, 51):
                results.add(contrast_for(ColorValue.from_rgb8(r, g, b)))
    assert results == {NEAR_BLACK, NEAR_WHITE}


def test_make_pair_foreground_derived():
    bg = ColorValue.from_rgb8(200, 30, 30)
    pair = make_pair(bg)
    assert pair.background == bg
    assert pair.foreground == contrast_for(bg)


def test_contrast_ratio_basic():
    assert abs(contrast_ratio(WHITE, BLACK) - 21.0) < 0.1
    assert abs(contrast_ratio(BLACK, BLACK) - 1.0) < 1e-9


def test_readable_keeps_legible_text():
    assert readable(BLACK, WHITE) == WHITE
    light_gray = ColorValue(0.9, 0.9, 0.9)
    # light gray on white is illegible -> black wins
    assert readable(WHITE, light_gray) == BLACK
