import logging

from .raster import RasterSnapshot


class HistoryStack:
    """Linear undo over full-buffer snapshots.

    The snapshot at ``cursor`` is always the committed state of the buffer.
    Pushing after an undo drops everything past the cursor, so there is no redo.
    """

    def __init__(self, buffer):
        self._snapshots = [buffer.snapshot()]
        self._cursor = 0

    @property
    def cursor(self):
        return self._cursor

    def __len__(self):
        return len(self._snapshots)

    def current(self) -> RasterSnapshot:
        return self._snapshots[self._cursor]

    def can_undo(self):
        return self._cursor > 0

    def push(self, snapshot: RasterSnapshot):
        del self._snapshots[self._cursor + 1:]
        self._snapshots.append(snapshot)
        self._cursor = len(self._snapshots) - 1
        logging.debug(f"History: pushed snapshot {self._cursor} ({len(self._snapshots)} total)")

    def undo(self):
        if not self.can_undo():
            logging.debug("History: nothing to undo.")
            return None

        self._cursor -= 1
        return self._snapshots[self._cursor]
