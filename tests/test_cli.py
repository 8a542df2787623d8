"""Tests for the command-line interface."""

import json

import pytest
from sudogen.cli import main
from sudogen.core.board import SudokuBoard
from sudogen.solvers import count_solutions


TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)


class TestCli:

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as info:
            main([])
        assert info.value.code == 1
        assert "usage" in capsys.readouterr().out

    def test_generate_json(self, capsys):
        main(["generate", "--count", "2", "--removals", "20", "--seed", "3", "--json", "--solution"])
        records = json.loads(capsys.readouterr().out)

        assert len(records) == 2
        for record in records:
            puzzle = SudokuBoard.from_string(record["puzzle"])
            assert record["achieved_removals"] == 20
            assert record["clues"] == 61
            assert count_solutions(puzzle) == 1
            assert SudokuBoard.from_string(record["solution"]).is_solved()

    def test_generate_pretty(self, capsys):
        main(["generate", "--difficulty", "easy", "--seed", "1"])
        out = capsys.readouterr().out
        assert "Puzzle 1" in out
        assert "+-------+-------+-------+" in out

    def test_generate_rejects_negative_removals(self, capsys):
        with pytest.raises(SystemExit) as info:
            main(["generate", "--removals", "-1"])
        assert info.value.code == 1
        assert "removals" in capsys.readouterr().err

    def test_count(self, capsys):
        main(["count", "--puzzle", TEST_PUZZLE])
        assert capsys.readouterr().out.strip() == "1"

    def test_count_empty_grid(self, capsys):
        main(["count", "--puzzle", "." * 81])
        assert capsys.readouterr().out.strip() == "2"

    def test_count_bad_puzzle(self, capsys):
        with pytest.raises(SystemExit) as info:
            main(["count", "--puzzle", "123"])
        assert info.value.code == 1
        assert "Error parsing puzzle" in capsys.readouterr().err

    def test_solve(self, capsys):
        main(["solve", "--puzzle", TEST_PUZZLE])
        out = capsys.readouterr().out
        assert "Solved" in out
        assert "| 5 3 4 | 6 7 8 | 9 1 2 |" in out

    def test_benchmark(self, capsys, tmp_path):
        main(["benchmark", "--targets", "5", "--puzzles", "1", "--output", str(tmp_path), "--no-charts"])
        out = capsys.readouterr().out
        assert "Benchmark complete!" in out
        assert (tmp_path / "benchmark_summary.json").exists()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
