"""Append-only log of successful evaluations."""

from __future__ import annotations

from typing import Iterator

from .types import HistoryEntry


class HistoryLog:
    """Ordered record of (expression, base, result) triples for one session.

    Entries are immutable and are never removed individually; the whole log
    is dropped when the session ends.
    """

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def append(self, expression: str, base: int, result: int) -> HistoryEntry:
        entry = HistoryEntry(expression=expression, base=base, result=result)
        self._entries.append(entry)
        return entry

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def clear(self) -> None:
        """Release every entry at session teardown."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))

    def __repr__(self) -> str:
        return f"HistoryLog({len(self._entries)} entries)"
