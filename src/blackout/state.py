from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List

import numpy as np

from .board import Board
from .errors import InvalidArgument
from .patterns import as_pattern


@dataclass
class GameState:
    """Plain snapshot of a game for save/load collaborators.

    The board is stored flat in row-major order. Undo history is not part of
    the record, so a restored board starts with move_count 0.
    """

    rows: int
    cols: int
    pattern: str
    move_count: int = 0
    elapsed_seconds: int = 0
    board: List[bool] = field(default_factory=list)

    @staticmethod
    def from_board(board: Board, elapsed_seconds: int = 0) -> "GameState":
        return GameState(
            rows=board.rows,
            cols=board.cols,
            pattern=board.pattern.value,
            move_count=board.move_count,
            elapsed_seconds=int(elapsed_seconds),
            board=[bool(v) for v in board.to_flat()],
        )

    def to_board(self) -> Board:
        if len(self.board) != self.rows * self.cols:
            raise InvalidArgument(
                f"Board has {len(self.board)} cells, "
                f"expected {self.rows * self.cols}"
            )
        board = Board(self.rows, self.cols, self.pattern)
        grid = np.asarray(self.board, dtype=bool)
        board.load_board(grid.reshape(self.rows, self.cols))
        return board

    def to_dict(self) -> dict:
        return asdict(self)

    @staticmethod
    def from_dict(d: dict) -> "GameState":
        try:
            rows, cols = int(d["rows"]), int(d["cols"])
            pattern = as_pattern(d["pattern"]).value
            flat = [bool(v) for v in d["board"]]
        except KeyError as e:
            raise InvalidArgument(
                f"Missing game state field: {e.args[0]}"
            ) from None
        if len(flat) != rows * cols:
            raise InvalidArgument(
                f"Board has {len(flat)} cells, expected {rows * cols}"
            )
        return GameState(
            rows=rows,
            cols=cols,
            pattern=pattern,
            move_count=int(d.get("move_count", 0)),
            elapsed_seconds=int(d.get("elapsed_seconds", 0)),
            board=flat,
        )
