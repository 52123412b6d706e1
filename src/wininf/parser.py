from typing import Iterator

from .lines import LogicalLine


class Parser:
    """Cursor over logical lines.

    Lines are pulled one at a time so that errors surface in source order.
    """

    def __init__(self, lines: Iterator[LogicalLine]) -> None:
        self._lines = lines
        self._current: LogicalLine | None = None

        self.advance()

    @property
    def current(self) -> LogicalLine | None:
        return self._current

    def advance(self) -> None:
        try:
            self._current = next(self._lines)
        except StopIteration:
            self._current = None
