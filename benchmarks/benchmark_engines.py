"""
Performance benchmarks for the spatialstatpy engines.

Compares per-index G* against the vectorized gstar_all (CPU and, when CuPy is
available, GPU), and times the O(n^2) Global Moran's I at several sizes.
"""

import time
from typing import Dict, List

import numpy as np

from spatialstatpy.core.getis_ord import GetisOrd
from spatialstatpy.core.moran import global_morans_i
from spatialstatpy.core.weights import create_distance_band_weights
from spatialstatpy.gpu.backend import GPU_AVAILABLE


def generate_test_data(n: int, radius: float = 50.0, seed: int = 42):
    """Random observations on random coordinates with distance band weights."""
    rng = np.random.default_rng(seed)
    coords = rng.uniform(0, 1000, (n, 2))
    data = rng.lognormal(0, 1, n)
    locality = create_distance_band_weights(coords, radius=radius, sparse=False)
    return data, locality


def benchmark_function(func, n_runs: int = 5, warmup: int = 1) -> Dict:
    """Benchmark a zero-argument callable with warmup runs."""
    for _ in range(warmup):
        func()

    times = []
    for _ in range(n_runs):
        start = time.perf_counter()
        func()
        if GPU_AVAILABLE:
            import cupy as cp

            cp.cuda.Stream.null.synchronize()
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def benchmark_gstar(n: int, n_runs: int = 3) -> Dict:
    """Per-index loop vs gstar_all on CPU and GPU."""
    data, locality = generate_test_data(n)
    g = GetisOrd(data, locality)

    results = {
        "loop": benchmark_function(lambda: [g.gstar(i) for i in range(n)], n_runs=n_runs),
        "cpu": benchmark_function(lambda: g.gstar_all(use_gpu=False), n_runs=n_runs),
        "gpu": None,
    }
    if GPU_AVAILABLE:
        results["gpu"] = benchmark_function(lambda: g.gstar_all(use_gpu=True), n_runs=n_runs)

    return results


def benchmark_moran(n: int, n_runs: int = 3) -> Dict:
    """Global Moran's I including its variance."""
    data, locality = generate_test_data(n)
    return {"cpu": benchmark_function(lambda: global_morans_i(data, locality), n_runs=n_runs)}


def run_all_benchmarks(sizes: List[int], n_runs: int = 3) -> Dict:
    """Run every benchmark over the given problem sizes."""
    print("=" * 60)
    print(f"spatialstatpy benchmarks (GPU available: {GPU_AVAILABLE})")
    print("=" * 60)

    results = {"gpu_available": GPU_AVAILABLE, "gstar": {}, "moran": {}}

    for n in sizes:
        print(f"  n={n}...", end=" ", flush=True)
        results["gstar"][n] = benchmark_gstar(n, n_runs)
        results["moran"][n] = benchmark_moran(n, n_runs)
        print("done")

    return results


def print_summary(results: Dict):
    """Print a summary table of benchmark results."""
    print(f"\n{'n':<8} {'G* loop':<12} {'G* CPU':<12} {'G* GPU':<12} {'Moran':<12}")
    print("-" * 56)

    for n, gstar in results["gstar"].items():
        loop_ms = gstar["loop"]["mean"] * 1000
        cpu_ms = gstar["cpu"]["mean"] * 1000
        gpu_ms = f"{gstar['gpu']['mean'] * 1000:.2f}" if gstar["gpu"] else "N/A"
        moran_ms = results["moran"][n]["cpu"]["mean"] * 1000
        print(f"{n:<8} {loop_ms:<12.2f} {cpu_ms:<12.2f} {gpu_ms:<12} {moran_ms:<12.2f}")


if __name__ == "__main__":
    results = run_all_benchmarks(sizes=[500, 1000, 2000], n_runs=3)
    print_summary(results)
