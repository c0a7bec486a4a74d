"""
Unit tests for the linear undo history.
"""

from PyQt6.QtGui import QColor

from sketchboard.history import HistoryStack


def commit_line(buffer, history, y):
    buffer.draw_segment((10, y), (190, y), QColor(0, 0, 0), 4)
    snap = buffer.snapshot()
    history.push(snap)
    return snap


class TestHistoryStack:

    def test_initial_state(self, buffer):
        history = HistoryStack(buffer)
        assert len(history) == 1
        assert history.cursor == 0
        assert history.current() == buffer.snapshot()
        assert not history.can_undo()

    def test_push_advances_cursor(self, buffer, history):
        commit_line(buffer, history, 20)
        commit_line(buffer, history, 40)
        assert len(history) == 3
        assert history.cursor == 2

    def test_undo_at_start_is_noop(self, history):
        assert history.undo() is None
        assert history.cursor == 0
        assert len(history) == 1

    def test_undo_returns_previous(self, buffer, history):
        first = commit_line(buffer, history, 20)
        commit_line(buffer, history, 40)
        assert history.undo() == first
        assert history.cursor == 1

    def test_undo_all_the_way_back(self, buffer, history):
        """N commits, N undos: back to the blank buffer; one more is a no-op."""
        blank = history.current()
        for y in (10, 30, 50, 70, 90):
            commit_line(buffer, history, y)

        result = None
        for _ in range(5):
            result = history.undo()
        assert result == blank
        assert history.cursor == 0
        assert history.undo() is None

    def test_push_after_undo_truncates(self, buffer, history):
        """push, push, undo, push: the undone snapshot is gone for good."""
        first = commit_line(buffer, history, 20)
        second = commit_line(buffer, history, 40)
        history.undo()
        buffer.restore(first)
        third = commit_line(buffer, history, 60)

        assert len(history) == 3
        assert history.cursor == 2
        assert history.current() == third

        seen = []
        while True:
            snap = history.undo()
            if snap is None:
                break
            seen.append(snap)
        assert second not in seen
        assert seen[0] == first
