"""Design package: color values, contrast, role registry, palettes and presets.

Everything here is pure logic with no Qt dependency.
"""

from .color import ColorValue, ColorParseError, ParseErrorKind, parse_color  # noqa: F401
from .contrast import (  # noqa: F401
    ColorPair,
    NEAR_BLACK,
    NEAR_WHITE,
    brightness,
    contrast_for,
    make_pair,
)
from .roles import ALL_ROLES, Role, Usage, Variant, display_color, display_text  # noqa: F401
from .palette import (  # noqa: F401
    ExtendedPalette,
    PaletteDiff,
    SeedPalette,
    diff_palettes,
    generate_extended,
    overlay,
)
from .theme_presets import (  # noqa: F401
    BaseTheme,
    DEFAULT_THEME_ID,
    UnknownThemeError,
    get_base_theme,
    list_base_themes,
)
