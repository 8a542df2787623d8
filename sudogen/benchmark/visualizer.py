"""Charts for generation benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """Creates charts from generation benchmark results."""

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_removals_achieved(),
            self.plot_generation_time(),
        ]

    def _targets(self) -> List[int]:
        return sorted(set(r.target for r in self.results))

    def plot_removals_achieved(self) -> str:
        """Plot requested against achieved removals, one point per puzzle."""
        fig, ax = plt.subplots(figsize=(8, 6))

        targets = [r.target for r in self.results]
        achieved = [r.achieved for r in self.results]
        sns.stripplot(x=targets, y=achieved, ax=ax, jitter=True, size=6)

        ax.set_xlabel('Requested removals', fontsize=12)
        ax.set_ylabel('Achieved removals', fontsize=12)
        ax.set_title('Removals Achieved with a Unique Solution', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "removals_achieved.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_generation_time(self) -> str:
        """Bar chart of average generation time per removal target."""
        fig, ax = plt.subplots(figsize=(8, 6))

        targets = self._targets()
        avg_times = [
            np.mean([r.time_seconds for r in self.results if r.target == t])
            for t in targets
        ]

        labels = [str(t) for t in targets]
        bars = ax.bar(labels, avg_times, edgecolor='black', linewidth=0.5)
        for bar, value in zip(bars, avg_times):
            ax.annotate(f'{value:.3f}s',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Requested removals', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Generation Time', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "generation_time.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path
