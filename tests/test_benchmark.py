"""Unit tests for the generation benchmark."""

import json
import os

import pytest
from sudogen.benchmark import GenerationBenchmark
from sudogen.benchmark.visualizer import Visualizer


@pytest.fixture(scope="module")
def benchmark():
    bench = GenerationBenchmark(removal_targets=[0, 15], puzzles_per_target=2, seed=1)
    bench.run(show_progress=False)
    return bench


class TestGenerationBenchmark:

    def test_one_result_per_puzzle(self, benchmark):
        assert len(benchmark.results) == 4
        assert {r.target for r in benchmark.results} == {0, 15}

    def test_results_reach_small_targets(self, benchmark):
        for result in benchmark.results:
            assert result.achieved == result.target
            assert result.clues == 81 - result.target
            assert len(result.puzzle) == 81

    def test_summary(self, benchmark):
        summary = benchmark.get_summary()
        assert summary["total_puzzles"] == 4
        by_target = summary["results_by_target"]
        assert by_target["15"]["avg_achieved"] == 15
        assert by_target["15"]["saturation_rate"] == 0
        assert by_target["0"]["avg_nodes_explored"] == 0

    def test_save_results(self, benchmark, tmp_path):
        paths = benchmark.save_results(str(tmp_path))
        assert all(os.path.exists(p) for p in paths)
        with open(os.path.join(tmp_path, "benchmark_results.json")) as f:
            assert len(json.load(f)) == 4

    def test_charts(self, benchmark, tmp_path):
        charts = Visualizer(benchmark.results, str(tmp_path)).generate_all()
        assert len(charts) == 2
        for chart in charts:
            assert os.path.exists(chart)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
