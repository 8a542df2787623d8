"""Benchmark module for measuring puzzle generation."""

from .benchmark import GenerationBenchmark, BenchmarkResult

__all__ = ["GenerationBenchmark", "BenchmarkResult"]
