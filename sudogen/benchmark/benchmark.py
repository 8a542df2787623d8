"""Benchmark for puzzle generation across removal targets."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Dict, Any, Optional
import json
import logging
import os

import numpy as np
from tqdm import tqdm

from ..generator import SudokuGenerator, DEFAULT_NODE_BUDGET

log = logging.getLogger(__name__)

DEFAULT_TARGETS = (20, 40, 50, 60, 81)


@dataclass
class BenchmarkResult:
    """Results from generating a single puzzle."""
    puzzle_id: int
    target: int
    achieved: int
    clues: int
    counter_calls: int
    rejected: int
    budget_exhausted: int
    nodes_explored: int
    time_seconds: float
    puzzle: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "target": self.target,
            "achieved": self.achieved,
            "clues": self.clues,
            "counter_calls": self.counter_calls,
            "rejected": self.rejected,
            "budget_exhausted": self.budget_exhausted,
            "nodes_explored": self.nodes_explored,
            "time_seconds": self.time_seconds,
            "puzzle": self.puzzle,
        }


class GenerationBenchmark:
    """
    Measures how close the generator gets to each removal target and what
    it costs.

    Every target gets ``puzzles_per_target`` puzzles from one seeded
    generator, so a run is reproducible.
    """

    def __init__(
        self,
        removal_targets: Optional[List[int]] = None,
        puzzles_per_target: int = 5,
        seed: Optional[int] = None,
        node_budget: Optional[int] = DEFAULT_NODE_BUDGET,
    ):
        self.removal_targets = list(removal_targets or DEFAULT_TARGETS)
        self.puzzles_per_target = puzzles_per_target
        self.seed = seed
        self.node_budget = node_budget
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the benchmark.

        Returns:
            List of BenchmarkResult objects.
        """
        generator = SudokuGenerator(seed=self.seed, node_budget=self.node_budget)
        self.results = []

        total = len(self.removal_targets) * self.puzzles_per_target
        pbar = tqdm(total=total, desc="Benchmarking", disable=not show_progress)

        for target in self.removal_targets:
            for puzzle_id in range(self.puzzles_per_target):
                puzzle = generator.generate_puzzle(target)
                stats = generator.stats
                self.results.append(BenchmarkResult(
                    puzzle_id=puzzle_id,
                    target=target,
                    achieved=stats.achieved_removals,
                    clues=puzzle.count_filled(),
                    counter_calls=stats.counter_calls,
                    rejected=stats.rejected,
                    budget_exhausted=stats.budget_exhausted,
                    nodes_explored=stats.nodes_explored,
                    time_seconds=stats.time_seconds,
                    puzzle=puzzle.to_string(),
                ))
                pbar.update(1)

        pbar.close()
        return self.results

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics per removal target."""
        summary = {
            "total_puzzles": len(self.results),
            "removal_targets": self.removal_targets,
            "results_by_target": {},
        }

        for target in self.removal_targets:
            target_results = [r for r in self.results if r.target == target]
            if not target_results:
                continue

            achieved = np.array([r.achieved for r in target_results])
            times = np.array([r.time_seconds for r in target_results])
            nodes = np.array([r.nodes_explored for r in target_results])

            summary["results_by_target"][str(target)] = {
                "avg_achieved": float(achieved.mean()),
                "max_achieved": int(achieved.max()),
                "min_achieved": int(achieved.min()),
                "saturation_rate": float(np.mean(achieved < target) * 100),
                "avg_time_seconds": float(times.mean()),
                "max_time_seconds": float(times.max()),
                "avg_nodes_explored": float(nodes.mean()),
                "budget_exhausted": int(sum(r.budget_exhausted for r in target_results)),
            }

        return summary

    def save_results(self, output_dir: str) -> List[str]:
        """Save raw results and the summary as JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        log.info("Results saved to %s", output_dir)
        return [results_file, summary_file]
