"""Tests for MainWindow move routing, undo and reset."""

from __future__ import annotations

import pytest
from PyQt6.QtWidgets import QMessageBox

from greekchess.core.enums import Color, GameStatus
from greekchess.core.position import Position
from greekchess.ui.main_window import MainWindow
from greekchess.ui.settings import AppSettings
from greekchess.ui.styles.theme import BoardTheme


def _p(name: str) -> Position:
    return Position.from_algebraic(name)


def _click_move(window: MainWindow, frm: str, to: str) -> None:
    scene = window.board_view.board_scene
    scene.handle_square_click(_p(frm))
    scene.handle_square_click(_p(to))


def test_clicks_play_a_move() -> None:
    window = MainWindow()
    _click_move(window, "e2", "e4")

    assert window.game.current_turn == Color.BLACK
    assert window.move_panel.rows() == ["1. e4"]
    assert window.status_panel.displayed_turn() == "Black's Turn (Underworld)"
    assert window.control_panel.undo_button.isEnabled()


def test_illegal_move_reports_error_and_keeps_state() -> None:
    window = MainWindow()
    _click_move(window, "e2", "e5")

    assert window.game.move_count == 0
    assert window.status_message() == "Illegal move"
    assert window.move_panel.rows() == []


def test_undo_restores_previous_position() -> None:
    window = MainWindow()
    _click_move(window, "e2", "e4")
    window._on_undo()

    assert window.game.move_count == 0
    assert window.move_panel.rows() == []
    assert not window.control_panel.undo_button.isEnabled()
    assert window.board_view.board_scene.piece_item_at(_p("e2")) is not None


def test_undo_with_empty_history() -> None:
    window = MainWindow()
    window._on_undo()
    assert window.status_message() == "Nothing to undo"


def test_checkmate_locks_the_board() -> None:
    window = MainWindow()
    for frm, to in [("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")]:
        _click_move(window, frm, to)

    assert window.game.status == GameStatus.CHECKMATE
    assert window.status_panel.displayed_status() == "Checkmate! Black Wins!"
    window.board_view.board_scene.handle_square_click(_p("a2"))
    assert window.board_view.board_scene.selected_position is None


def test_new_game_asks_for_confirmation(monkeypatch: pytest.MonkeyPatch) -> None:
    window = MainWindow()
    _click_move(window, "e2", "e4")

    monkeypatch.setattr(
        QMessageBox, "question", lambda *_args, **_kwargs: QMessageBox.StandardButton.No
    )
    window._on_new_game()
    assert window.game.move_count == 1

    monkeypatch.setattr(
        QMessageBox, "question", lambda *_args, **_kwargs: QMessageBox.StandardButton.Yes
    )
    window._on_new_game()
    assert window.game.move_count == 0
    assert window.move_panel.rows() == []


def test_new_game_without_confirmation(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(*_args: object, **_kwargs: object) -> None:
        raise AssertionError("confirmation dialog should not be shown")

    monkeypatch.setattr(QMessageBox, "question", _fail)
    window = MainWindow(settings=AppSettings(confirm_reset=False))
    _click_move(window, "e2", "e4")
    window._on_new_game()
    assert window.game.move_count == 0


def test_new_game_on_fresh_board_skips_confirmation(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _fail(*_args: object, **_kwargs: object) -> None:
        raise AssertionError("confirmation dialog should not be shown")

    monkeypatch.setattr(QMessageBox, "question", _fail)
    window = MainWindow()
    window._on_new_game()
    assert window.game.move_count == 0


def test_settings_are_applied_to_scene() -> None:
    settings = AppSettings(board_theme="Bronze", show_god_names=False)
    window = MainWindow(settings=settings)
    scene = window.board_view.board_scene

    assert scene._theme == BoardTheme.bronze()
    item = scene.piece_item_at(_p("e1"))
    assert item is not None
    assert item.caption is None


def test_view_toggle_updates_settings() -> None:
    window = MainWindow()
    window._toggle_actions["show_coordinates"].setChecked(False)

    assert window.settings.show_coordinates is False
    scene = window.board_view.board_scene
    assert all(not item.isVisible() for item in scene._coord_items)
