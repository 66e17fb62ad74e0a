# -*-  coding: utf-8 -*-
"""
Set of test for the pure board functions.
"""
from unittest import TestCase, main

import numpy as np

from game2048.core import (
    Direction,
    empty_board,
    fill_cells,
    is_done,
    latent_state,
    make_generator,
    max_tile,
    merge_line,
    slide_and_merge,
)


class TestMergeLine(TestCase):
    """
    Test for line compaction and merging.
    """

    def test_merge_line(self):
        """Test if lines are correctly merged."""
        line = np.array([2, 2, 4, 4])
        score, result = merge_line(line)
        self.assertEqual(score, 12)
        np.testing.assert_array_equal(result, np.array([4, 8]))

    def test_merge_empty_line(self):
        """Empty line merges to empty with zero score."""
        score, result = merge_line(np.array([0, 0, 0, 0]))
        self.assertEqual(score, 0)
        self.assertEqual(len(result), 0)

    def test_merge_single_tile(self):
        """Single tile line produces no merge."""
        score, result = merge_line(np.array([0, 4, 0, 0]))
        self.assertEqual(score, 0)
        np.testing.assert_array_equal(result, np.array([4]))

    def test_merge_all_same(self):
        """All same values merge in pairs, never three at once."""
        score, result = merge_line(np.array([2, 2, 2, 2]))
        self.assertEqual(score, 8)
        np.testing.assert_array_equal(result, np.array([4, 4]))

    def test_merge_three_same(self):
        """The pair closest to the target edge merges first."""
        score, result = merge_line(np.array([2, 2, 2, 0]))
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(result, np.array([4, 2]))

    def test_merged_tile_does_not_merge_again(self):
        """A merged tile is not merged again in the same pass."""
        score, result = merge_line(np.array([4, 2, 2, 0]))
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(result, np.array([4, 4]))

    def test_merge_across_gap(self):
        """Zeros between equal tiles do not prevent the merge."""
        score, result = merge_line(np.array([2, 0, 0, 2]))
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(result, np.array([4]))


class TestSlideAndMerge(TestCase):
    """
    Test for whole-board moves.
    """

    def test_slide_and_merge(self):
        """Test if the entire board is correctly slid and merged."""
        board = np.array([[2, 2, 4, 4], [0, 2, 2, 4], [2, 0, 0, 2], [2, 2, 2, 2]])
        score, result = slide_and_merge(board)
        expected = np.array([[4, 8, 0, 0], [4, 4, 0, 0], [4, 0, 0, 0], [4, 4, 0, 0]])
        self.assertEqual(score, 28)
        np.testing.assert_array_equal(result, expected)

    def test_slide_and_merge_keeps_input(self):
        """The input board is left untouched."""
        board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        original = board.copy()
        slide_and_merge(board)
        np.testing.assert_array_equal(board, original)

    def test_latent_state_all_directions(self):
        """Each direction compacts toward its own edge."""
        board = np.array([[2, 0, 2, 0], [0, 4, 0, 0], [0, 0, 0, 0], [0, 4, 0, 8]])
        expected = {
            Direction.LEFT: np.array([[4, 0, 0, 0], [4, 0, 0, 0], [0, 0, 0, 0], [4, 8, 0, 0]]),
            Direction.RIGHT: np.array([[0, 0, 0, 4], [0, 0, 0, 4], [0, 0, 0, 0], [0, 0, 4, 8]]),
            Direction.UP: np.array([[2, 8, 2, 8], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
            Direction.DOWN: np.array([[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [2, 8, 2, 8]]),
        }
        scores = {Direction.LEFT: 4, Direction.RIGHT: 4, Direction.UP: 8, Direction.DOWN: 8}

        for direction, expected_board in expected.items():
            result, score = latent_state(board, direction)
            np.testing.assert_array_equal(result, expected_board, err_msg=direction.name)
            self.assertEqual(score, scores[direction])

    def test_latent_state_returns_owned_array(self):
        """The returned board does not share memory with the input."""
        board = np.array([[0, 2], [0, 0]])
        result, _ = latent_state(board, Direction.UP)
        self.assertFalse(np.shares_memory(result, board))


class TestFillCells(TestCase):
    """
    Test for tile spawning.
    """

    def test_fill_two_tiles(self):
        """Two tiles of value 2 or 4 are placed on an empty board."""
        board = fill_cells(empty_board(4), number_tile=2, rng=make_generator(42))
        self.assertEqual(np.count_nonzero(board), 2)
        self.assertTrue(np.all(np.isin(board[board != 0], [2, 4])))

    def test_fill_only_empty_cells(self):
        """Existing tiles are never overwritten."""
        board = np.array([[8, 8], [8, 0]])
        fill_cells(board, number_tile=1, rng=make_generator(0))
        self.assertEqual(board[:, 0].tolist(), [8, 8])
        self.assertEqual(board[0, 1], 8)
        self.assertIn(board[1, 1], (2, 4))

    def test_fill_full_board_is_skipped(self):
        """A full board is returned unchanged."""
        board = np.array([[2, 4], [4, 2]])
        original = board.copy()
        result = fill_cells(board, number_tile=1, rng=make_generator(0))
        self.assertIs(result, board)
        np.testing.assert_array_equal(board, original)

    def test_fill_more_than_available(self):
        """Requesting more tiles than empty cells fills the board."""
        board = np.array([[2, 0], [0, 2]])
        fill_cells(board, number_tile=5, rng=make_generator(0))
        self.assertTrue(board.all())

    def test_seed_reproducibility(self):
        """Same seed produces identical boards."""
        board1 = fill_cells(empty_board(4), number_tile=2, rng=make_generator(7))
        board2 = fill_cells(empty_board(4), number_tile=2, rng=make_generator(7))
        np.testing.assert_array_equal(board1, board2)

    def test_custom_tile_distribution(self):
        """Tile values follow the given distribution."""
        board = fill_cells(empty_board(3), number_tile=9, rng=make_generator(0), values=(4,), probs=(1.0,))
        self.assertTrue(np.all(board == 4))

    def test_spawn_distribution(self):
        """Roughly nine spawned tiles out of ten are 2."""
        rng = make_generator(123)
        values = [int(fill_cells(empty_board(2), 1, rng).max()) for _ in range(2000)]
        twos = values.count(2) / len(values)
        self.assertEqual(set(values), {2, 4})
        self.assertAlmostEqual(twos, 0.9, delta=0.03)


class TestGameTermination(TestCase):
    """Test game over detection."""

    def test_game_over_full_board_no_merges(self):
        """Game ends when board full and no adjacent equal tiles."""
        board = np.array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        self.assertTrue(is_done(board))

    def test_game_not_over_with_empty_cells(self):
        """Game continues when empty cells exist."""
        board = np.array([[2, 4, 8, 0], [16, 32, 64, 128], [256, 512, 1024, 2048], [4096, 8192, 16384, 32768]])
        self.assertFalse(is_done(board))

    def test_game_not_over_with_vertical_merge(self):
        """Game continues when two vertical neighbours match."""
        board = np.array([[2, 4, 8, 16], [2, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        self.assertFalse(is_done(board))

    def test_max_tile(self):
        """Largest tile is reported as a plain int."""
        board = np.array([[2, 0], [64, 8]])
        self.assertEqual(max_tile(board), 64)
        self.assertIsInstance(max_tile(board), int)
        self.assertEqual(max_tile(empty_board(2)), 0)


if __name__ == "__main__":
    main()
