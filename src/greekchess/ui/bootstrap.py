"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from greekchess.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)
_PIECE_FONTS = ("DejaVu Sans", "Noto Sans Symbols2", "Segoe UI Symbol")


def _check_piece_fonts() -> None:
    """Warn when no installed font is known to carry the chess glyphs."""
    from PyQt6.QtGui import QFontDatabase

    families = set(QFontDatabase.families())
    if not any(name in families for name in _PIECE_FONTS):
        _LOGGER.warning(
            "None of the chess glyph fonts are installed (%s); pieces may not render",
            ", ".join(_PIECE_FONTS),
        )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from greekchess.ui.styles.theme import APP_STYLE

    app.setApplicationName("Greek Gods Chess")
    app.setStyle("Fusion")
    _check_piece_fonts()
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from greekchess.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings=settings)
    window.show()
    _LOGGER.info("Main window shown")

    return app.exec()
