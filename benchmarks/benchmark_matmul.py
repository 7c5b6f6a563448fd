"""Benchmark sequential vs row-parallel dense multiply, and LU inverse."""

import logging
import time

import numpy as np

from rigidkit.matrix import inverse, multiply

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


def create_test_matrices(n: int, seed: int = 0):
    """Create a square operand pair and a well-conditioned matrix."""
    rng = np.random.default_rng(seed)
    a = rng.normal(size=(n, n))
    b = rng.normal(size=(n, n))
    well_conditioned = a + n * np.eye(n)
    return a, b, well_conditioned


def benchmark(func, warmup=3, iterations=20):
    """Benchmark a function, returning milliseconds per call."""
    for _ in range(warmup):
        func()

    start = time.perf_counter()
    for _ in range(iterations):
        func()
    elapsed = time.perf_counter() - start

    return (elapsed / iterations) * 1000


def run_benchmarks():
    """Run multiply and inverse benchmarks over a range of sizes."""
    logger.info("=" * 70)
    logger.info("DENSE MATRIX BENCHMARKS")
    logger.info("=" * 70)

    for n in (16, 64, 256, 512):
        a, b, well_conditioned = create_test_matrices(n)

        seq_ms = benchmark(lambda: multiply(a, b, parallel=False))
        par_ms = benchmark(lambda: multiply(a, b, parallel=True))
        np_ms = benchmark(lambda: a @ b)
        inv_ms = benchmark(lambda: inverse(well_conditioned), iterations=5)

        if not np.array_equal(multiply(a, b, parallel=False), multiply(a, b, parallel=True)):
            logger.error(f"n={n}: parallel result differs from sequential")

        logger.info(f"\nn = {n}")
        logger.info(f"  Sequential multiply: {seq_ms:9.3f} ms")
        logger.info(f"  Parallel multiply:   {par_ms:9.3f} ms ({seq_ms / par_ms:.2f}x)")
        logger.info(f"  NumPy matmul:        {np_ms:9.3f} ms")
        logger.info(f"  LU inverse:          {inv_ms:9.3f} ms")

    logger.info("\n" + "=" * 70)


if __name__ == "__main__":
    run_benchmarks()
