"""Append-only move log with board snapshots for undo."""

from __future__ import annotations

from dataclasses import dataclass

from greekchess.core.board import Board
from greekchess.core.move import Move


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """A move paired with the board as it stood just before the move."""

    move: Move
    board_before: Board


class MoveHistory:
    """Stack of :class:`HistoryEntry` values.

    Undo restores the stored snapshot instead of computing an inverse
    move, which keeps castling, en passant and promotion trivially
    reversible.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def add_move(self, move: Move, board_before: Board) -> None:
        """Record *move*; the board is cloned so later mutation cannot leak in."""
        self._entries.append(HistoryEntry(move, board_before.clone()))

    def undo(self) -> HistoryEntry | None:
        """Pop and return the newest entry, or ``None`` when empty."""
        if not self._entries:
            return None
        return self._entries.pop()

    @property
    def last_move(self) -> Move | None:
        if not self._entries:
            return None
        return self._entries[-1].move

    def moves(self) -> tuple[Move, ...]:
        return tuple(entry.move for entry in self._entries)

    def move_at(self, index: int) -> Move | None:
        entry = self.entry_at(index)
        return entry.move if entry is not None else None

    def entry_at(self, index: int) -> HistoryEntry | None:
        if not 0 <= index < len(self._entries):
            return None
        return self._entries[index]

    def clear(self) -> None:
        self._entries.clear()

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)
