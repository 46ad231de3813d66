from theme_lab.design.contrast import make_pair
from theme_lab.design.color import ColorValue
from theme_lab.design.palette import overlay
from theme_lab.design.qss import build_stylesheet, field_stylesheet
from theme_lab.design.roles import Role, Usage, Variant
from theme_lab.design.theme_presets import get_base_theme


def test_stylesheet_uses_background_and_primary():
    palette = get_base_theme("Dracula").palette
    qss = build_stylesheet(palette)
    bg = palette[Role(Usage.BACKGROUND, Variant.BASE)]
    primary = palette[Role(Usage.PRIMARY, Variant.BASE)]
    assert qss.lstrip().startswith("/* THEME (auto-generated runtime) */")
    assert f"background: {bg.background.to_hex()}" in qss
    assert f"QPushButton {{ background:{primary.background.to_hex()}" in qss


def test_stylesheet_tracks_overrides():
    base = get_base_theme("Light").palette
    custom = overlay(base, Role(Usage.BACKGROUND, Variant.BASE), make_pair(ColorValue.from_packed(0x123456)))
    assert "#123456" not in build_stylesheet(base)
    assert "background: #123456" in build_stylesheet(custom)


def test_field_stylesheet_uses_pair():
    pair = make_pair(ColorValue.from_rgb8(255, 255, 255))
    qss = field_stylesheet(pair)
    assert qss.startswith("QLineEdit {")
    assert "background:#ffffff" in qss
    assert "color:#0a0a0a" in qss
