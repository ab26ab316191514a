#!/usr/bin/env python3
"""
Benchmark suite for kmath kernels.

Times each vectorized function over a block of random arguments. The first
call to every kernel triggers numba compilation, so warmup runs are not timed.

Run with: python benchmarks/benchmark_kernels.py

Copyright (c) 2026 kmath contributors

MIT License
"""

import sys
import time
from dataclasses import dataclass
from typing import Callable

import numpy as np

import kmath


@dataclass
class BenchmarkConfig:
    """Configuration for a single benchmark."""
    name: str
    fn: Callable
    arity: int = 1
    low: float = -50.0
    high: float = 50.0
    category: str = "uncategorized"


@dataclass
class BenchmarkResult:
    """Result from a single benchmark run."""
    name: str
    category: str
    values_per_run: int
    num_runs: int
    times_s: list[float]

    @property
    def mean_time_ms(self) -> float:
        return np.mean(self.times_s) * 1000

    @property
    def std_time_ms(self) -> float:
        return np.std(self.times_s) * 1000

    @property
    def ns_per_value(self) -> float:
        return np.mean(self.times_s) * 1e9 / self.values_per_run


def default_configs() -> list[BenchmarkConfig]:
    """Benchmark configurations for every kernel family."""
    return [
        BenchmarkConfig("digamma", kmath.digamma, category="digamma"),
        BenchmarkConfig("digamma_fast", kmath.digamma_fast, category="digamma"),
        BenchmarkConfig("digamma_ultra", kmath.digamma_ultra, category="digamma"),
        BenchmarkConfig("digamma12", kmath.digamma12, category="digamma"),
        BenchmarkConfig("harmonic", kmath.harmonic, low=0.0, category="digamma"),
        BenchmarkConfig("square", kmath.square, arity=2, low=0.0, high=6.0, category="waveshape"),
        BenchmarkConfig("square12", kmath.square12, arity=2, low=0.0, high=6.0, category="waveshape"),
        BenchmarkConfig("signed_noise_1d", kmath.signed_noise_1d, category="noise"),
        BenchmarkConfig("signed_noise_2d", kmath.signed_noise_2d, arity=2, category="noise"),
        BenchmarkConfig("signed_noise_3d", kmath.signed_noise_3d, arity=3, category="noise"),
        BenchmarkConfig("signed_noise_4d", kmath.signed_noise_4d, arity=4, category="noise"),
        BenchmarkConfig("gamma", kmath.gamma, low=-20.0, high=20.0, category="special"),
        BenchmarkConfig("lngamma", kmath.lngamma, low=0.0, high=1000.0, category="special"),
        BenchmarkConfig("erf", kmath.erf, low=-4.0, high=4.0, category="special"),
        BenchmarkConfig("zeta", kmath.zeta, low=-10.0, high=30.0, category="special"),
        BenchmarkConfig("fresnel_c", kmath.fresnel_c, low=-10.0, high=10.0, category="special"),
    ]


def benchmark_kernel(
    config: BenchmarkConfig,
    values_per_run: int = 100_000,
    num_runs: int = 20,
    warmup_runs: int = 2,
    seed: int = 0,
) -> BenchmarkResult:
    """
    Benchmark one kernel.

    Args:
        config: Benchmark configuration
        values_per_run: Number of argument tuples per call
        num_runs: Number of timed runs
        warmup_runs: Number of warmup runs (not timed)
        seed: Seed for the argument generator

    Returns:
        BenchmarkResult with timing statistics
    """
    rng = np.random.default_rng(seed)
    args = [rng.uniform(config.low, config.high, values_per_run) for _ in range(config.arity)]

    for _ in range(warmup_runs):
        config.fn(*args)

    times = []
    for _ in range(num_runs):
        start = time.perf_counter()
        config.fn(*args)
        end = time.perf_counter()
        times.append(end - start)

    return BenchmarkResult(
        name=config.name,
        category=config.category,
        values_per_run=values_per_run,
        num_runs=num_runs,
        times_s=times,
    )


def run_benchmarks(
    configs: list[BenchmarkConfig],
    values_per_run: int = 100_000,
    num_runs: int = 20,
) -> list[BenchmarkResult]:
    """Run benchmarks for all configurations, grouped by category."""
    results = []

    by_category: dict[str, list[BenchmarkConfig]] = {}
    for config in configs:
        by_category.setdefault(config.category, []).append(config)

    for category in sorted(by_category.keys()):
        print()
        print(f"{category.upper()}:")
        print("-" * 40)

        for config in by_category[category]:
            result = benchmark_kernel(config, values_per_run=values_per_run, num_runs=num_runs)
            results.append(result)
            print(f"  {result.name}: {result.mean_time_ms:.3f} ms ({result.ns_per_value:.1f} ns/value)")

    return results


def print_summary(results: list[BenchmarkResult]) -> None:
    """Print a summary table, slowest first."""
    print()
    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"{'Benchmark':<25} {'Mean (ms)':>10} {'Std (ms)':>10} {'ns/value':>10}")
    print("-" * 60)
    for r in sorted(results, key=lambda r: r.ns_per_value, reverse=True):
        print(f"{r.name:<25} {r.mean_time_ms:>10.3f} {r.std_time_ms:>10.3f} {r.ns_per_value:>10.1f}")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Benchmark kmath kernels")
    parser.add_argument("--quick", action="store_true", help="Quick mode (fewer runs, smaller blocks)")
    parser.add_argument("--list", action="store_true", help="List benchmarks without running them")
    args = parser.parse_args()

    print("kmath Kernel Benchmark Suite")
    print("=" * 60)

    configs = default_configs()
    if args.list:
        for config in configs:
            print(f"  [{config.category}] {config.name}")
        sys.exit(0)

    if args.quick:
        results = run_benchmarks(configs, values_per_run=10_000, num_runs=5)
    else:
        results = run_benchmarks(configs)
    print_summary(results)
