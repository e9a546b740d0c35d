"""File-backed pending and completed todo lists.

The pending file holds one task per line, oldest first. Users address tasks
by display number, newest first, so display number ``d`` in a list of ``n``
items is the stored line at index ``n - d``. The completed file is an
append-only log of ``x <date> <text>`` lines.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, List, Optional, Union

import structlog

from .errors import InvalidIndex, MissingArgument
from .utils import atomic_write, datestamp

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class NumberArgument:
    """A command argument and the integer parsed from it, if any."""

    raw: Optional[str]
    value: Optional[int]

    @classmethod
    def parse(cls, raw: Optional[str]) -> "NumberArgument":
        if raw is None:
            return cls(raw=None, value=None)
        try:
            return cls(raw=raw, value=int(raw.strip()))
        except ValueError:
            return cls(raw=raw, value=None)

    @property
    def missing(self) -> bool:
        return self.raw is None or not self.raw.strip()

    @property
    def valid(self) -> bool:
        return self.value is not None


@dataclass(frozen=True)
class Report:
    date: str
    pending: int
    completed: int


def _as_argument(number: Union[int, NumberArgument, None]) -> NumberArgument:
    if isinstance(number, NumberArgument):
        return number
    if number is None:
        return NumberArgument(raw=None, value=None)
    return NumberArgument(raw=str(number), value=number)


def storage_index(display_number: int, count: int) -> Optional[int]:
    """Translate a newest-first display number to a stored line index."""
    if display_number < 1 or display_number > count:
        return None
    return count - display_number


class TodoStore:
    def __init__(
        self,
        todo_path: Union[str, Path],
        done_path: Union[str, Path],
        today: Callable[[], date] = date.today,
    ) -> None:
        self.todo_path = Path(todo_path)
        self.done_path = Path(done_path)
        self.today = today

    # -------------------- file helpers --------------------
    @staticmethod
    def _read_lines(path: Path) -> List[str]:
        if not path.exists():
            return []
        text = path.read_text(encoding="utf-8")
        return [line for line in text.split("\n") if line]

    @staticmethod
    def _ends_without_newline(path: Path) -> bool:
        if not path.exists() or path.stat().st_size == 0:
            return False
        with path.open("rb") as fh:
            fh.seek(-1, os.SEEK_END)
            return fh.read(1) != b"\n"

    @classmethod
    def _append_line(cls, path: Path, line: str) -> None:
        prefix = "\n" if cls._ends_without_newline(path) else ""
        with path.open("a", encoding="utf-8") as fh:
            fh.write(prefix + line + "\n")

    def _write_pending(self, lines: List[str]) -> None:
        atomic_write(self.todo_path, "".join(line + "\n" for line in lines))

    def _remove(self, number: NumberArgument, action: str) -> str:
        lines = self._read_lines(self.todo_path)
        index = storage_index(number.value or 0, len(lines))
        if index is None:
            logger.debug("todo_rejected", action=action, number=number.raw, count=len(lines))
            raise InvalidIndex(number.value or 0, action)
        removed = lines.pop(index)
        self._write_pending(lines)
        return removed

    # -------------------- operations --------------------
    def list_pending(self) -> List[str]:
        """Return pending tasks newest first; position + 1 is the display number."""
        return list(reversed(self._read_lines(self.todo_path)))

    def add_todo(self, text: Optional[str]) -> str:
        if not text:
            raise MissingArgument("Error: Missing todo string. Nothing added!")
        self._append_line(self.todo_path, text)
        logger.debug("todo_added", text=text)
        return text

    def delete_todo(self, number: Union[int, NumberArgument, None]) -> str:
        number = _as_argument(number)
        if number.missing:
            raise MissingArgument("Error: Missing NUMBER for deleting todo.")
        removed = self._remove(number, "deleted")
        logger.debug("todo_deleted", number=number.value, text=removed)
        return removed

    def complete_todo(self, number: Union[int, NumberArgument, None]) -> str:
        """Move a pending task to the completed log and return the logged line."""
        number = _as_argument(number)
        if number.missing or not number.valid:
            raise MissingArgument("Error: Missing NUMBER for marking todo as done.")
        removed = self._remove(number, "Marked as done")
        entry = f"x {datestamp(self.today())} {removed}"
        self._append_line(self.done_path, entry)
        logger.debug("todo_completed", number=number.value, text=removed)
        return entry

    def report(self) -> Report:
        return Report(
            date=datestamp(self.today()),
            pending=len(self._read_lines(self.todo_path)),
            completed=len(self._read_lines(self.done_path)),
        )


def _test() -> None:
    import tempfile

    with tempfile.TemporaryDirectory() as tmp:
        store = TodoStore(Path(tmp) / "todo.txt", Path(tmp) / "done.txt")
        store.add_todo("a")
        store.add_todo("b")
        assert store.list_pending() == ["b", "a"]
        store.complete_todo(1)
        assert store.report().completed == 1


if __name__ == "__main__":  # pragma: no cover - manual testing
    _test()
