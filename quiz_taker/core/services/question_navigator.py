"""Tracks which question the participant is looking at."""

from __future__ import annotations


class QuestionNavigator:
    """Current position within a fixed number of questions. No wraparound."""

    def __init__(self, question_count: int) -> None:
        if question_count <= 0:
            raise ValueError("Navigator needs at least one question.")
        self._count = question_count
        self._index = 0

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def question_count(self) -> int:
        return self._count

    def next(self) -> int:
        if not self.is_last():
            self._index += 1
        return self._index

    def previous(self) -> int:
        if not self.is_first():
            self._index -= 1
        return self._index

    def jump_to(self, index: int) -> int:
        self._index = max(0, min(index, self._count - 1))
        return self._index

    def is_first(self) -> bool:
        return self._index == 0

    def is_last(self) -> bool:
        return self._index == self._count - 1

    def progress_fraction(self) -> float:
        return (self._index + 1) / self._count
