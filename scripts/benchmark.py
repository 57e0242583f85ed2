#!/usr/bin/env python3
"""
Benchmark Script for KVS

Measures the in-process cost of storage engine operations and of the
parse + dispatch path used by the command line.

Usage:
    python scripts/benchmark.py                    # Run all benchmarks
    python scripts/benchmark.py --operations 10000 # Custom operation count
    python scripts/benchmark.py --profile          # Enable cProfile
"""

import argparse
import random
import statistics
import string
import sys
import os
import time
from typing import Any, Callable, Dict, List

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from kvs.dispatcher import Dispatcher
from kvs.engine.store import KvStore
from kvs.protocol.parser import CommandParser


def random_string(length: int) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choices(string.ascii_letters + string.digits, k=length))


def measure_time(func: Callable, iterations: int = 1) -> Dict[str, float]:
    """Measure execution time statistics."""
    times = []

    for _ in range(iterations):
        start = time.perf_counter()
        func()
        elapsed = (time.perf_counter() - start) * 1000  # Convert to ms
        times.append(elapsed)

    return {
        "min_ms": min(times),
        "max_ms": max(times),
        "mean_ms": statistics.mean(times),
        "median_ms": statistics.median(times),
        "total_ms": sum(times),
    }


class Benchmark:
    """Collection of benchmarks for KVS components."""

    def __init__(self, operations: int = 10000, key_size: int = 16, value_size: int = 64):
        self.operations = operations
        self.key_size = key_size
        self.value_size = value_size

        # Pre-generate test data
        self.keys = [random_string(key_size) for _ in range(operations)]
        self.values = [random_string(value_size) for _ in range(operations)]

    def _populated_store(self) -> KvStore:
        store = KvStore()
        for key, value in zip(self.keys, self.values):
            store.set(key, value)
        return store

    def _run(self, name: str, func: Callable) -> Dict[str, Any]:
        stats = measure_time(func)
        stats["ops_per_second"] = self.operations / (stats["total_ms"] / 1000)
        stats["operation"] = name
        stats["count"] = self.operations
        return stats

    def benchmark_set(self) -> Dict[str, Any]:
        """Benchmark SET operations on new keys."""
        store = KvStore()

        def run():
            for key, value in zip(self.keys, self.values):
                store.set(key, value)

        return self._run("SET", run)

    def benchmark_overwrite(self) -> Dict[str, Any]:
        """Benchmark SET operations on existing keys."""
        store = self._populated_store()

        def run():
            for key, value in zip(self.keys, reversed(self.values)):
                store.set(key, value)

        return self._run("SET (overwrite)", run)

    def benchmark_get(self) -> Dict[str, Any]:
        """Benchmark GET operations (present keys)."""
        store = self._populated_store()

        def run():
            for key in self.keys:
                store.get(key)

        return self._run("GET (hit)", run)

    def benchmark_get_miss(self) -> Dict[str, Any]:
        """Benchmark GET operations (absent keys)."""
        store = KvStore()
        miss_keys = [random_string(self.key_size) for _ in range(self.operations)]

        def run():
            for key in miss_keys:
                store.get(key)

        return self._run("GET (miss)", run)

    def benchmark_remove(self) -> Dict[str, Any]:
        """Benchmark REMOVE operations."""
        store = self._populated_store()

        def run():
            for key in self.keys:
                store.remove(key)

        return self._run("REMOVE", run)

    def benchmark_dispatch(self) -> Dict[str, Any]:
        """Benchmark argv parsing plus dispatch, as the CLI runs it."""
        parser = CommandParser()
        dispatcher = Dispatcher(KvStore())
        argvs = [["set", key, value] for key, value in zip(self.keys, self.values)]

        def run():
            for argv in argvs:
                dispatcher.dispatch(parser.parse(argv))

        return self._run("Parse + dispatch (set)", run)

    def run_all(self) -> List[Dict[str, Any]]:
        """Run all benchmarks."""
        benchmarks = [
            ("SET", self.benchmark_set),
            ("SET (overwrite)", self.benchmark_overwrite),
            ("GET (hit)", self.benchmark_get),
            ("GET (miss)", self.benchmark_get_miss),
            ("REMOVE", self.benchmark_remove),
            ("Parse + dispatch", self.benchmark_dispatch),
        ]

        results = []
        for name, func in benchmarks:
            print(f"Running: {name}...", end=" ", flush=True)
            result = func()
            print(f"{result['ops_per_second']:,.0f} ops/sec")
            results.append(result)

        return results


def print_results(results: List[Dict[str, Any]]):
    """Print benchmark results in a table."""
    print()
    print("=" * 70)
    print("                        BENCHMARK RESULTS")
    print("=" * 70)
    print(f"{'Operation':<30} {'Ops/sec':>12} {'Mean (ms)':>12} {'Total (ms)':>12}")
    print("-" * 70)

    for r in results:
        print(f"{r['operation']:<30} {r['ops_per_second']:>12,.0f} "
              f"{r['mean_ms']:>12.3f} {r['total_ms']:>12.1f}")

    print("=" * 70)

    total_ops = sum(r['count'] for r in results)
    total_time = sum(r['total_ms'] for r in results)

    print()
    print(f"Total operations: {total_ops:,}")
    print(f"Total time: {total_time / 1000:.2f} seconds")
    print(f"Average throughput: {total_ops / (total_time / 1000):,.0f} ops/sec")


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark KVS components",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--operations", "-n",
        type=int,
        default=10000,
        help="Number of operations per benchmark"
    )
    parser.add_argument(
        "--key-size",
        type=int,
        default=16,
        help="Size of keys"
    )
    parser.add_argument(
        "--value-size",
        type=int,
        default=64,
        help="Size of values"
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Enable cProfile profiling"
    )

    args = parser.parse_args()

    print("KVS Benchmark")
    print("=============")
    print(f"Operations per test: {args.operations:,}")
    print(f"Key size: {args.key_size}")
    print(f"Value size: {args.value_size}")
    print()

    benchmark = Benchmark(
        operations=args.operations,
        key_size=args.key_size,
        value_size=args.value_size,
    )

    if not args.profile:
        print_results(benchmark.run_all())
        return

    import cProfile
    import pstats

    profiler = cProfile.Profile()
    profiler.enable()
    results = benchmark.run_all()
    profiler.disable()

    print_results(results)

    print()
    print("Profiling Results (top 20):")
    print("-" * 70)
    stats = pstats.Stats(profiler)
    stats.sort_stats('cumulative')
    stats.print_stats(20)


if __name__ == "__main__":
    main()
