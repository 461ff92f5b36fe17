from blackout.board import Board
from blackout.errors import (
    BlackoutError,
    InvalidArgument,
    InvalidState,
    OutOfRange,
)
from blackout.generator import (
    Difficulty,
    generate,
    generate_batch,
    generate_with_difficulty,
)
from blackout.patterns import Pattern, display_name, offsets
from blackout.solver import (
    UNSOLVABLE,
    Solution,
    Step,
    Unsolvable,
    hint,
    is_solvable,
    solve,
    solve_minimum,
    step_by_step,
)
from blackout.state import GameState
