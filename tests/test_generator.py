"""Unit tests for solution and puzzle generation."""

import random

import pytest
import sudogen
from sudogen.core.validator import validate_solution
from sudogen.errors import InvalidRemovalCount
from sudogen.generator import SudokuGenerator, Difficulty
from sudogen.solvers import count_solutions, has_unique_solution


class TestGenerateSolution:

    def test_solution_is_solved(self):
        solution = SudokuGenerator(seed=42).generate_solution()
        assert solution.is_solved()
        assert solution.count_empty() == 0

    def test_solution_is_frozen(self):
        solution = SudokuGenerator(seed=42).generate_solution()
        assert solution.is_frozen
        with pytest.raises(ValueError):
            solution.set(0, 0, 0)

    def test_reproducible_with_seed(self):
        a = SudokuGenerator(seed=7).generate_solution()
        b = SudokuGenerator(seed=7).generate_solution()
        assert a == b

    def test_injected_rng(self):
        a = sudogen.generate_solution(rng=random.Random(11))
        b = sudogen.generate_solution(rng=random.Random(11))
        assert a == b
        assert a.is_solved()

    def test_consecutive_solutions_differ(self):
        generator = SudokuGenerator(seed=3)
        solutions = {generator.generate_solution().to_string() for _ in range(5)}
        assert len(solutions) > 1


class TestGeneratePuzzle:

    def test_zero_removals_returns_solution(self):
        generator = SudokuGenerator(seed=1)
        puzzle, solution = generator.generate_with_solution(0)
        assert puzzle.count_empty() == 0
        assert puzzle == solution
        assert puzzle.is_solved()
        assert generator.stats.counter_calls == 0

    @pytest.mark.parametrize("removals", [1, 20, 40])
    def test_puzzle_is_unique(self, removals):
        generator = SudokuGenerator(seed=removals)
        puzzle = generator.generate_puzzle(removals)
        assert puzzle.count_empty() == removals
        assert count_solutions(puzzle) == 1

    def test_puzzle_matches_solution(self):
        generator = SudokuGenerator(seed=42)
        puzzle, solution = generator.generate_with_solution(40)

        assert puzzle.is_valid()
        assert solution.is_solved()
        assert validate_solution(puzzle, solution)
        assert puzzle.is_frozen and solution.is_frozen

    def test_unique_after_every_accepted_removal(self):
        checked = []

        def check(puzzle, position):
            row, col = position
            assert puzzle.is_empty(row, col)
            assert count_solutions(puzzle) == 1
            checked.append(position)

        generator = SudokuGenerator(seed=5)
        puzzle = generator.generate_puzzle(35, on_removal=check)
        assert len(checked) == 35
        assert len(set(checked)) == 35
        assert puzzle.count_empty() == 35

    def test_maximum_removals_terminates_unique(self):
        generator = SudokuGenerator(seed=9, node_budget=50_000)
        puzzle = generator.generate_puzzle(81)

        assert puzzle.count_empty() <= 81
        assert puzzle.count_empty() == generator.stats.achieved_removals
        assert generator.stats.saturated
        assert generator.stats.counter_calls == 81
        assert has_unique_solution(puzzle)

    def test_reproducible_with_seed(self):
        a = SudokuGenerator(seed=21).generate_puzzle(40)
        b = SudokuGenerator(seed=21).generate_puzzle(40)
        assert a == b

    def test_module_level_generate_puzzle(self):
        a = sudogen.generate_puzzle(30, rng=random.Random(8))
        b = sudogen.generate_puzzle(30, rng=random.Random(8))
        assert a == b
        assert a.count_empty() == 30

    def test_stats(self):
        generator = SudokuGenerator(seed=2)
        generator.generate_puzzle(25)
        stats = generator.stats
        assert stats.requested_removals == 25
        assert stats.achieved_removals == 25
        assert stats.counter_calls == stats.achieved_removals + stats.rejected
        assert not stats.saturated
        assert stats.to_dict()["achieved_removals"] == 25

    def test_exhausted_budget_keeps_clue(self):
        generator = SudokuGenerator(seed=4, node_budget=0)
        puzzle = generator.generate_puzzle(10)
        # Every check runs out of budget immediately once a cell is empty.
        assert puzzle.count_empty() == 0
        assert generator.stats.budget_exhausted == 81


class TestInvalidRemovals:

    @pytest.mark.parametrize("removals", [-1, 2.5, 40.0, "10", None, True])
    def test_rejected(self, removals):
        generator = SudokuGenerator(seed=0)
        state = generator.rng.getstate()
        with pytest.raises(InvalidRemovalCount):
            generator.generate_puzzle(removals)
        # Nothing was drawn from the random source.
        assert generator.rng.getstate() == state

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            sudogen.generate_puzzle(-5)


class TestDifficulty:

    def test_easy_clue_range(self):
        """Easy should have 36-45 clues."""
        assert Difficulty.EASY.clue_range == (36, 45)
        assert Difficulty.EASY.removal_range == (36, 45)

    def test_expert_removal_range(self):
        assert Difficulty.EXPERT.removal_range == (60, 64)

    def test_difficulty_affects_clue_count(self):
        """Test that harder difficulties have fewer clues."""
        # A small budget keeps each uniqueness check cheap at high removal counts.
        generator = SudokuGenerator(seed=42, node_budget=20_000)

        easy = generator.generate(Difficulty.EASY)
        hard = generator.generate(Difficulty.HARD)

        assert easy.count_filled() > hard.count_filled()
        assert has_unique_solution(hard)

    def test_generate_batch(self):
        generator = SudokuGenerator(seed=42)
        puzzles = generator.generate_batch(3, 20)

        assert len(puzzles) == 3
        for puzzle in puzzles:
            assert puzzle.count_empty() == 20

    def test_generate_batch_with_difficulty(self):
        generator = SudokuGenerator(seed=42)
        puzzles = generator.generate_batch(2, Difficulty.EASY)
        for puzzle in puzzles:
            assert 36 <= puzzle.count_filled() <= 45


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
