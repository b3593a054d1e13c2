#!/usr/bin/env python3
"""Benchmark access checks: latency (p50, p95, p99) and QPS.

Checks run against an existing object, so seed a bin/item/category first.

Usage:
    export API_URL=http://localhost:8000 KEYCLOAK_URL=http://localhost:8080
    python scripts/bench_access.py --object-type bin --object-id <id> [--num-checks 500]
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> str:
    url = f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    r = httpx.post(
        url,
        data={
            "grant_type": "password",
            "client_id": client_id,
            "client_secret": client_secret,
            "username": username,
            "password": password,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=30.0,
    )
    r.raise_for_status()
    return r.json()["access_token"]


def auth_headers() -> dict[str, str]:
    """Bearer token from Keycloak, or X-User-Id when BENCH_USER_ID is set (development)."""
    user_id = os.environ.get("BENCH_USER_ID")
    if user_id:
        return {"X-User-Id": user_id}
    token = get_token(
        os.environ.get("KEYCLOAK_URL", "http://localhost:8080"),
        os.environ.get("KEYCLOAK_REALM", "bintrack"),
        os.environ.get("KEYCLOAK_CLIENT_ID", "bintrack-api"),
        os.environ.get("KEYCLOAK_CLIENT_SECRET", "bintrack-api-secret"),
        os.environ.get("BENCH_USER", "testuser"),
        os.environ.get("BENCH_PASSWORD", "testpass"),
    )
    return {"Authorization": f"Bearer {token}"}


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark access checks")
    parser.add_argument("--object-type", default="bin", choices=["bin", "item", "category"])
    parser.add_argument("--object-id", required=True, help="Existing object id")
    parser.add_argument("--action", default="read", choices=["read", "write", "admin"])
    parser.add_argument("--num-checks", type=int, default=200, help="Number of access requests")
    parser.add_argument("--output", type=str, default="/results/bench_access.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    headers = auth_headers()
    url = f"{api_url}/v1/objects/{args.object_type}/{args.object_id}/access/{args.action}"

    latencies: list[float] = []
    allowed = errors = 0
    print(f"Running {args.num_checks} access checks...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=30.0) as client:
        for _ in range(args.num_checks):
            t0 = time.perf_counter()
            r = client.get(url, headers=headers)
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
                allowed += bool(r.json().get("allowed"))
            else:
                errors += 1
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful access checks.")
        return 1

    qps = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    summary = (
        f"Access benchmark ({args.action} on {args.object_type} {args.object_id}, "
        f"checks={n}, allowed={allowed}, errors={errors})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError as e:
        print(f"Could not write {args.output}: {e}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
