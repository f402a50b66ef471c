"""
emit_load.py: async load script that posts analytics events

Usage:
  python emit_load.py --base http://127.0.0.1:8000 --count 2000 --concurrency 100

Prints one report: requests by outcome, events sent per name, latency
percentiles and events/s. Exit code is 1 if any request failed.
"""
import argparse
import asyncio
import random
import statistics
import sys
import time
from collections import Counter

import httpx

EVENT_NAMES = ["signup", "login", "add_to_cart", "share", "search"]
SCREENS = ["home", "catalog", "product", "cart", "checkout"]


def _payload(idx: int):
    return {
        "name": random.choice(EVENT_NAMES),
        "parameters": {"screen": random.choice(SCREENS), "seq": idx},
    }


async def _emit_one(client: httpx.AsyncClient, base: str, idx: int, outcomes: Counter, sent: Counter,
                    latencies_ms: list):
    payload = _payload(idx)
    started = time.perf_counter()
    try:
        r = await client.post(f"{base}/events", json=payload, timeout=10)
    except httpx.TransportError as exc:
        outcomes[type(exc).__name__] += 1
        return
    latencies_ms.append((time.perf_counter() - started) * 1000.0)
    outcomes[str(r.status_code)] += 1
    if r.is_success:
        sent[payload["name"]] += 1


def _report(args, elapsed: float, outcomes: Counter, sent: Counter, latencies_ms: list):
    ok = sum(sent.values())
    print(f"target       {args.base}  count={args.count}  concurrency={args.concurrency}")
    print("outcomes     " + "  ".join(f"{k}={v}" for k, v in sorted(outcomes.items())))
    print("events       " + "  ".join(f"{k}={v}" for k, v in sent.most_common()))
    if len(latencies_ms) >= 2:
        cuts = statistics.quantiles(latencies_ms, n=100)
        print(f"latency ms   p50={cuts[49]:.1f}  p95={cuts[94]:.1f}  p99={cuts[98]:.1f}")
    if elapsed > 0:
        print(f"throughput   {ok / elapsed:.1f} events/s over {elapsed:.2f}s")


async def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--base", default="http://127.0.0.1:8000")
    parser.add_argument("--count", type=int, default=2000)
    parser.add_argument("--concurrency", type=int, default=100)
    args = parser.parse_args()

    outcomes: Counter = Counter()
    sent: Counter = Counter()
    latencies_ms: list = []

    limit = httpx.Limits(max_connections=args.concurrency, max_keepalive_connections=args.concurrency)
    started = time.perf_counter()
    async with httpx.AsyncClient(limits=limit) as client:
        sem = asyncio.Semaphore(args.concurrency)

        async def _task(i):
            async with sem:
                await _emit_one(client, args.base, i, outcomes, sent, latencies_ms)

        await asyncio.gather(*(_task(i) for i in range(args.count)))
    elapsed = time.perf_counter() - started

    _report(args, elapsed, outcomes, sent, latencies_ms)
    return 0 if sum(sent.values()) == args.count else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
