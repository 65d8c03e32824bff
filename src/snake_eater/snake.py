# snake.py
from collections import deque
from typing import Deque, Iterable, Iterator, List, Tuple

from .grid import Cell


class Snake:
    """
    Ordered body cells, head first. Never empty.

    Only two mutations exist: translation (new head in, tail out) and
    growth (new head in, tail kept).
    """

    def __init__(self, cells: Iterable[Cell]):
        self._cells: Deque[Cell] = deque(tuple(c) for c in cells)
        if not self._cells:
            raise ValueError("a snake needs at least one cell")

    def head(self) -> Cell:
        return self._cells[0]

    def advance(self, new_head: Cell, grow: bool) -> None:
        self._cells.appendleft(new_head)
        if not grow:
            self._cells.pop()

    def occupies(self, cell: Cell) -> bool:
        return cell in self._cells

    def body_excluding_head(self) -> List[Cell]:
        return list(self._cells)[1:]

    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(tuple(self._cells))

    def __repr__(self) -> str:
        return f"Snake({list(self._cells)!r})"
