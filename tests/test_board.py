"""Unit tests for the Board model."""

import numpy as np
import pytest

from blackout.board import Board
from blackout.errors import InvalidArgument, InvalidState, OutOfRange
from blackout.patterns import Pattern


class TestConstruction:
    """Tests for Board construction and accessors."""

    def test_fresh_board_is_off(self):
        board = Board(3, 4)
        assert board.rows == 3
        assert board.cols == 4
        assert board.move_count == 0
        assert not board.can_undo
        assert board.has_won()
        assert board.pattern is Pattern.CROSS

    def test_square_shorthand(self):
        board = Board(5)
        assert board.size == 5

    def test_size_rejects_rectangles(self):
        with pytest.raises(InvalidState):
            Board(2, 3).size

    @pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2)])
    def test_non_positive_dimensions(self, rows, cols):
        with pytest.raises(InvalidArgument):
            Board(rows, cols)

    @pytest.mark.parametrize("rows,cols", [(2.5, 3), (3, 2.0), (True, 3)])
    def test_non_integer_dimensions(self, rows, cols):
        with pytest.raises(InvalidArgument):
            Board(rows, cols)

    def test_numpy_integer_dimensions(self):
        board = Board(np.int64(2), np.int32(3))
        assert (board.rows, board.cols) == (2, 3)

    def test_string_pattern(self):
        assert Board(3, 3, "diagonal").pattern is Pattern.DIAGONAL

    @pytest.mark.parametrize("row,col", [(-1, 0), (3, 0), (0, -1), (0, 3)])
    def test_out_of_range(self, row, col):
        board = Board(3, 3)
        with pytest.raises(OutOfRange):
            board.is_light_on(row, col)
        with pytest.raises(OutOfRange):
            board.toggle(row, col)
        with pytest.raises(OutOfRange):
            board.set_light(row, col, True)
        assert board.move_count == 0


class TestToggle:
    """Tests for toggle and undo."""

    def test_cross_center(self):
        """Clicking the center of 3x3 lights the plus shape only."""
        board = Board(3, 3, Pattern.CROSS)
        board.toggle(1, 1)
        expected = np.array(
            [[0, 1, 0], [1, 1, 1], [0, 1, 0]], dtype=bool
        )
        np.testing.assert_array_equal(board.get_board_snapshot(), expected)
        assert board.move_count == 1
        assert board.can_undo

    def test_corner_clips_at_edges(self):
        board = Board(3, 3, Pattern.CROSS)
        board.toggle(0, 0)
        assert board.count_on() == 3
        assert board.is_light_on(0, 0)
        assert board.is_light_on(0, 1)
        assert board.is_light_on(1, 0)

    def test_plus3_on_small_grid(self):
        board = Board(2, 2, Pattern.PLUS3)
        board.toggle(0, 0)
        assert str(board) == "11\n10"

    @pytest.mark.parametrize("pattern", list(Pattern))
    def test_toggle_twice_is_identity(self, pattern):
        board = Board(4, 5, pattern)
        board.randomize(np.random.default_rng(7))
        before = board.get_board_snapshot()
        for r in range(board.rows):
            for c in range(board.cols):
                board.toggle(r, c)
                board.toggle(r, c)
                np.testing.assert_array_equal(board.state, before)

    def test_undo_restores_board(self):
        board = Board(4, 4, Pattern.XSHAPE)
        board.randomize(np.random.default_rng(3))
        before = board.get_board_snapshot()
        clicks = [(0, 0), (1, 2), (3, 3), (1, 2), (2, 0)]
        for r, c in clicks:
            board.toggle(r, c)
        assert board.move_count == len(clicks)

        undone = [board.undo() for _ in clicks]
        assert undone == clicks[::-1]
        assert board.move_count == 0
        assert not board.can_undo
        np.testing.assert_array_equal(board.state, before)

    def test_undo_empty_history(self):
        with pytest.raises(InvalidState):
            Board(3, 3).undo()


class TestAuthoring:
    """Tests for set_all, set_light and snapshots."""

    def test_set_all_resets_tracking(self):
        board = Board(3, 3)
        board.toggle(0, 0)
        board.set_all(True)
        assert board.count_on() == 9
        assert board.move_count == 0
        assert not board.can_undo
        board.set_all(False)
        assert board.has_won()

    def test_set_light_keeps_tracking(self):
        board = Board(3, 3)
        board.toggle(2, 2)
        board.set_light(0, 0, True)
        assert board.is_light_on(0, 0)
        assert not board.is_light_on(1, 1)
        assert board.move_count == 1

    def test_snapshot_is_independent(self):
        board = Board(3, 3)
        snap = board.get_board_snapshot()
        snap[1, 1] = True
        assert not board.is_light_on(1, 1)

    def test_load_board(self):
        board = Board(2, 3)
        board.toggle(0, 0)
        board.load_board([[True, False, True], [False, False, True]])
        assert str(board) == "101\n001"
        assert board.move_count == 0

    def test_load_board_copies(self):
        board = Board(2, 2)
        grid = np.zeros((2, 2), dtype=bool)
        board.load_board(grid)
        grid[0, 0] = True
        assert board.has_won()

    def test_load_board_dimension_mismatch(self):
        """A mismatched snapshot is rejected and the board is untouched."""
        board = Board(3, 3)
        board.toggle(1, 1)
        before = board.get_board_snapshot()
        with pytest.raises(InvalidArgument):
            board.load_board(np.zeros((3, 4), dtype=bool))
        with pytest.raises(InvalidArgument):
            board.load_board([[True, False, True], [True], [False, True]])
        np.testing.assert_array_equal(board.state, before)
        assert board.move_count == 1

    def test_to_flat_is_a_copy(self):
        board = Board(2, 2)
        flat = board.to_flat()
        flat[0] = True
        assert board.has_won()
        assert flat.tolist() == [True, False, False, False]

    def test_load_board_none(self):
        with pytest.raises(InvalidArgument):
            Board(3, 3).load_board(None)

    def test_copy(self):
        board = Board(3, 3, Pattern.DIAGONAL)
        board.toggle(1, 1)
        other = board.copy()
        assert other.pattern is Pattern.DIAGONAL
        assert other.move_count == 0
        other.toggle(1, 1)
        assert other.has_won()
        assert not board.has_won()


class TestRandomize:
    """Tests for randomize."""

    def test_same_seed_same_board(self):
        a = Board(5, 5)
        b = Board(5, 5)
        a.randomize(np.random.default_rng(1234), 5, 15)
        b.randomize(np.random.default_rng(1234), 5, 15)
        np.testing.assert_array_equal(a.state, b.state)

    def test_never_trivially_won(self):
        rng = np.random.default_rng(0)
        board = Board(1, 1)
        for _ in range(20):
            board.randomize(rng, 0, 2)
            assert not board.has_won()

    def test_resets_tracking(self):
        board = Board(4, 4)
        board.toggle(0, 0)
        board.randomize(np.random.default_rng(5))
        assert board.move_count == 0
        assert not board.can_undo

    def test_invalid_arguments(self):
        board = Board(3, 3)
        board.toggle(1, 1)
        before = board.get_board_snapshot()
        rng = np.random.default_rng(0)
        with pytest.raises(InvalidArgument):
            board.randomize(None)
        with pytest.raises(InvalidArgument):
            board.randomize(rng, -1, 3)
        with pytest.raises(InvalidArgument):
            board.randomize(rng, 4, 3)
        np.testing.assert_array_equal(board.state, before)
        assert board.move_count == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
