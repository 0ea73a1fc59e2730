from __future__ import annotations

import argparse
import random
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from decimal import Decimal
from typing import List

import sys
from pathlib import Path

# Allow running without installation by adding repo root to sys.path
sys.path.append(str(Path(__file__).resolve().parents[1]))

from orderboard.core import OrderRegistry, OrderType


@dataclass
class BenchmarkResult:
    total_orders: int
    total_cancels: int
    total_summaries: int
    threads: int
    duration_seconds: float
    orders_per_second: float
    live_orders: int


def _worker(
    registry: OrderRegistry,
    num_orders: int,
    price_anchor: float,
    price_spread: float,
    max_qty: float,
    cancel_ratio: float,
    summary_every: int,
    seed: int,
) -> tuple:
    rng = random.Random(seed)
    created: List[int] = []
    cancels = 0
    summaries = 0
    for i in range(num_orders):
        side = OrderType.BUY if (i % 2 == 0) else OrderType.SELL
        px_jitter = rng.random() * price_spread
        raw = price_anchor - px_jitter if side == OrderType.BUY else price_anchor + px_jitter
        price = Decimal(str(round(max(0.01, raw), 2)))
        qty = round(1.0 + rng.random() * (max_qty - 1.0), 2)
        created.append(registry.create(f"user-{seed}", qty, price, side))
        if rng.random() < cancel_ratio:
            registry.cancel(created.pop(rng.randrange(len(created))))
            cancels += 1
        if summary_every and (i + 1) % summary_every == 0:
            registry.live_order_summaries()
            summaries += 1
    return cancels, summaries


def run_registry_benchmark(
    num_orders: int,
    threads: int = 4,
    price_anchor: float = 100.0,
    price_spread: float = 2.0,
    max_qty: float = 5.0,
    cancel_ratio: float = 0.3,
    summary_every: int = 1_000,
) -> BenchmarkResult:
    """Create/cancel num_orders from several threads and measure throughput."""

    registry = OrderRegistry()
    per_thread = max(1, num_orders // threads)

    start = time.perf_counter()
    with ThreadPoolExecutor(max_workers=threads) as pool:
        futures = [
            pool.submit(
                _worker,
                registry,
                per_thread,
                price_anchor,
                price_spread,
                max_qty,
                cancel_ratio,
                summary_every,
                seed,
            )
            for seed in range(threads)
        ]
        results = [f.result() for f in futures]
    duration = max(1e-9, time.perf_counter() - start)

    total = per_thread * threads
    return BenchmarkResult(
        total_orders=total,
        total_cancels=sum(c for c, _ in results),
        total_summaries=sum(s for _, s in results),
        threads=threads,
        duration_seconds=duration,
        orders_per_second=total / duration,
        live_orders=len(registry),
    )


def main():
    parser = argparse.ArgumentParser(description="Benchmark OrderRegistry throughput under concurrent load")
    parser.add_argument("--orders", type=int, default=100_000, help="Number of orders to create")
    parser.add_argument("--threads", type=int, default=4, help="Worker threads")
    parser.add_argument("--price", type=float, default=100.0, help="Anchor price")
    parser.add_argument("--spread", type=float, default=2.0, help="Price spread range")
    parser.add_argument("--max-qty", type=float, default=5.0, help="Max order quantity")
    parser.add_argument("--cancel-ratio", type=float, default=0.3, help="Chance of cancelling after each create [0..1]")
    parser.add_argument("--summary-every", type=int, default=1_000, help="Aggregate every N creates per thread (0 disables)")
    args = parser.parse_args()

    res = run_registry_benchmark(
        num_orders=args.orders,
        threads=args.threads,
        price_anchor=args.price,
        price_spread=args.spread,
        max_qty=args.max_qty,
        cancel_ratio=args.cancel_ratio,
        summary_every=args.summary_every,
    )

    print("=== OrderRegistry Benchmark ===")
    print(f"Threads         : {res.threads}")
    print(f"Orders          : {res.total_orders:,}")
    print(f"Cancels         : {res.total_cancels:,}")
    print(f"Summaries       : {res.total_summaries:,}")
    print(f"Live orders     : {res.live_orders:,}")
    print(f"Duration (s)    : {res.duration_seconds:.3f}")
    print(f"Orders / second : {res.orders_per_second:,.0f}")


if __name__ == "__main__":
    main()
