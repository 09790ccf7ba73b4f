"""Benchmarks for Morton coding operators.

Times each interleave/deinterleave operator on large random batches and
compares the single 8-bit deinterleave against the packed 2x8-bit variant.

Run with ``python -O``. Otherwise the deinterleave operators keep their
bit-width assertion, which reduces the whole batch to one bool on every
call (a host-device sync on CUDA) and is timed along with the operator.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

from torchmorton.coding import (
    deinterleave_2x8bit,
    deinterleave_8bit,
    deinterleave_16bit,
    interleave_16bit,
    interleave_32bit,
)

_UNITS = [(1e-6, 1e9, "ns"), (1e-3, 1e6, "us"), (1.0, 1e3, "ms")]


def benchmark(
    func: Callable[[torch.Tensor], Any],
    input: torch.Tensor,
    warmup: int = 3,
    iterations: int = 10,
) -> dict[str, float]:
    """Return the mean and standard deviation of ``func(input)`` in seconds."""
    for _ in range(warmup):
        func(input)

    times = np.empty(iterations)
    for k in range(iterations):
        start = time.perf_counter()
        func(input)
        if input.is_cuda:
            torch.cuda.synchronize(input.device)
        times[k] = time.perf_counter() - start

    return {"mean": times.mean(), "std": times.std()}


def format_time(seconds: float) -> str:
    for bound, scale, unit in _UNITS:
        if seconds < bound:
            return f"{seconds * scale:.3f}{unit}"
    return f"{seconds:.3f}s"


def print_result(name: str, elapsed: dict[str, float], n: int) -> None:
    """Print benchmark result with per-element throughput."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  Time: {format_time(elapsed['mean'])} +/- {format_time(elapsed['std'])}"
    )
    print(f"  Per element: {format_time(elapsed['mean'] / n)}")


class BenchMorton:
    """Benchmarks for Morton coding operators."""

    def __init__(
        self,
        warmup: int = 3,
        iterations: int = 10,
        device: str = "cpu",
    ):
        self.warmup = warmup
        self.iterations = iterations
        self.device = torch.device(device)
        self.generator = torch.Generator().manual_seed(42)

    def _bench(
        self, func: Callable[[torch.Tensor], Any], input: torch.Tensor
    ) -> dict[str, float]:
        return benchmark(
            func, input, warmup=self.warmup, iterations=self.iterations
        )

    def _randint(self, high: int, size: tuple[int, ...]) -> torch.Tensor:
        values = torch.randint(0, high, size, generator=self.generator)
        return values.to(self.device)

    def bench_interleave_32bit(self, n: int = 1_000_000) -> None:
        coords = self._randint(1 << 16, (n, 2))
        elapsed = self._bench(interleave_32bit, coords)
        print_result(f"interleave_32bit (n={n})", elapsed, n)

    def bench_interleave_16bit(self, n: int = 1_000_000) -> None:
        coords = self._randint(1 << 8, (n, 2))
        elapsed = self._bench(interleave_16bit, coords)
        print_result(f"interleave_16bit (n={n})", elapsed, n)

    def bench_deinterleave_16bit(self, n: int = 1_000_000) -> None:
        codes = self._randint(1 << 16, (n,))
        elapsed = self._bench(deinterleave_16bit, codes)
        print_result(f"deinterleave_16bit (n={n})", elapsed, n)

    def bench_deinterleave_8bit_vs_2x8bit(self, n: int = 1_000_000) -> None:
        """Decode ``n`` 8-bit codes one per element and two per element."""
        codes = self._randint(1 << 8, (n,))
        packed = codes[0::2] | (codes[1::2] << 16)

        single = self._bench(deinterleave_8bit, codes)
        batched = self._bench(deinterleave_2x8bit, packed)

        print_result(f"deinterleave_8bit (n={n})", single, n)
        print_result(f"deinterleave_2x8bit (n={n}, packed)", batched, n)
        print(f"  Speedup: {single['mean'] / batched['mean']:.2f}x")

    def run_all(self) -> None:
        """Run all Morton coding benchmarks."""
        print("=" * 60)
        print(f"MORTON CODING BENCHMARKS ({self.device})")
        print("=" * 60)

        self.bench_interleave_32bit()
        self.bench_interleave_16bit()
        self.bench_deinterleave_16bit()
        self.bench_deinterleave_8bit_vs_2x8bit()

    def run_scaling(self) -> None:
        """Show that per-element cost stays flat as the batch grows."""
        print("\n--- Batch Size Scaling (interleave_32bit) ---")
        for n in [1_000, 10_000, 100_000, 1_000_000]:
            self.bench_interleave_32bit(n=n)


if __name__ == "__main__":
    bench = BenchMorton(warmup=3, iterations=10)
    bench.run_all()
    print("\n")
    bench.run_scaling()
