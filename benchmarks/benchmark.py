#!/usr/bin/env python3
"""
PRVHASH42 — Benchmark Suite

Compares PRVHASH42 (pure Python) against common hash algorithms:
  Cryptographic:     MD5, SHA-1, SHA-256, BLAKE2b
  Non-cryptographic: xxHash64, xxHash128, MurmurHash3, CRC32

xxhash and mmh3 are optional (pip install .[bench]).
"""

import hashlib
import os
import sys
import time
import zlib

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from prvhash.prvhash42 import prvhash42


def bench(name, func, data, iterations):
    for _ in range(min(5, iterations)):
        func(data)

    start = time.perf_counter()
    for _ in range(iterations):
        func(data)
    elapsed = time.perf_counter() - start

    ms_per_iter = (elapsed / iterations) * 1000
    bytes_per_sec = len(data) / (elapsed / iterations) if elapsed > 0 else 0

    return {
        'name': name,
        'ms_per_iter': ms_per_iter,
        'mb_per_sec': bytes_per_sec / (1024 * 1024),
        'total_time': elapsed,
        'iterations': iterations,
    }


def hash_prvhash42_8(data): return prvhash42(data, 8)
def hash_prvhash42_32(data): return prvhash42(data, 32)
def hash_md5(data): return hashlib.md5(data).digest()
def hash_sha1(data): return hashlib.sha1(data).digest()
def hash_sha256(data): return hashlib.sha256(data).digest()
def hash_blake2b(data): return hashlib.blake2b(data, digest_size=32).digest()
def hash_crc32(data): return zlib.crc32(data).to_bytes(4, 'little')

def hash_xxh64(data):
    import xxhash
    return xxhash.xxh64(data).digest()

def hash_xxh128(data):
    import xxhash
    return xxhash.xxh128(data).digest()

def hash_mmh3_128(data):
    import mmh3
    return mmh3.hash128(data).to_bytes(16, 'little')


def format_size(n):
    if n >= 1024 * 1024:
        return f"{n / (1024*1024):.0f} MB"
    elif n >= 1024:
        return f"{n / 1024:.0f} KB"
    else:
        return f"{n} B"


def run_benchmark(data_size_bytes, iterations):
    data = os.urandom(data_size_bytes)

    print(f"\n{'='*80}")
    print(f"  Benchmark: {format_size(data_size_bytes)} input | {iterations} iterations")
    print(f"{'='*80}")
    print(f"  {'Algorithm':<24} {'Output':>8} {'ms/iter':>10} {'MB/s':>12}")
    print(f"  {'-'*24} {'-'*8} {'-'*10} {'-'*12}")

    algorithms = [
        ('PRVHASH42-64', hash_prvhash42_8, 64),
        ('PRVHASH42-256', hash_prvhash42_32, 256),
        ('MD5', hash_md5, 128),
        ('SHA-1', hash_sha1, 160),
        ('SHA-256', hash_sha256, 256),
        ('BLAKE2b-256', hash_blake2b, 256),
    ]

    try:
        import xxhash  # noqa: F401
        algorithms.append(('xxHash64', hash_xxh64, 64))
        algorithms.append(('xxHash128', hash_xxh128, 128))
    except ImportError:
        print("  [SKIP] xxhash not installed")

    try:
        import mmh3  # noqa: F401
        algorithms.append(('MurmurHash3-128', hash_mmh3_128, 128))
    except ImportError:
        print("  [SKIP] mmh3 not installed")

    algorithms.append(('CRC32', hash_crc32, 32))

    results = []
    for name, func, bits in algorithms:
        # Pure Python runs ~3 orders of magnitude slower
        iters = max(1, iterations // 100) if 'PRVHASH' in name and data_size_bytes > 10000 else iterations
        r = bench(name, func, data, iters)
        r['bits'] = bits
        results.append(r)
        marker = '***' if 'PRVHASH' in name else '   '
        print(f"  {marker} {name:<21} {bits:>5} bit {r['ms_per_iter']:>9.3f}ms {r['mb_per_sec']:>10.2f}")

    return results


def print_ranking(all_results):
    print(f"\n{'='*80}")
    print("  RANKING (by throughput)")
    print(f"{'='*80}")

    for size_label, results in all_results:
        print(f"\n  [{size_label}]")
        sha256_tp = next((r['mb_per_sec'] for r in results if r['name'] == 'SHA-256'), 1) or 1

        for r in sorted(results, key=lambda x: x['mb_per_sec'], reverse=True):
            ratio = r['mb_per_sec'] / sha256_tp
            bar = '#' * int(min(ratio * 12, 40))
            print(f"    {r['name']:<24} {r['mb_per_sec']:>10.2f} MB/s  {ratio:>7.4f}x  {bar}")


if __name__ == '__main__':
    print("=" * 80)
    print("  PRVHASH42 — Performance Benchmark")
    print("=" * 80)

    configs = [
        (64, 20000),
        (1024, 5000),
        (65536, 200),
        (1048576, 20),
    ]

    all_results = []
    for data_size, iters in configs:
        results = run_benchmark(data_size, iters)
        all_results.append((format_size(data_size), results))

    print_ranking(all_results)

    print(f"\n{'='*80}")
    print("  Benchmark complete.")
    print(f"{'='*80}")
