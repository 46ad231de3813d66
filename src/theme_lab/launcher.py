"""Launcher for `python -m theme_lab` or external callers."""

from __future__ import annotations

import logging
import sys

from theme_lab.app.bootstrap import create_app
from theme_lab.config import settings


def main() -> int:  # pragma: no cover - runtime
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx = create_app(headless=False)
    from theme_lab.views.theme_editor_window import ThemeEditorWindow

    win = ThemeEditorWindow(ctx.state, settings=ctx.settings, event_bus=ctx.event_bus)
    win.show()
    return ctx.qt_app.exec()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
