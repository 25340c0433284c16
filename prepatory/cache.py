"""A fixed-size, slot-indexed memo cache in front of a slow computation."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from typing import Optional, Sequence

SIZE = 127
_PRIME_INDEX = 31


@dataclass
class Item:
    """A value stored in, or used as a key for, the cache."""

    datum: int = 0

    def binary(self) -> int:
        return self.datum


class Cache:
    """Direct-mapped storage: each key lands in slot ``key % size``.

    A slot holds one item; storing into a taken slot replaces it, and a lookup
    returns whatever the slot holds without checking which key put it there.
    """

    def __init__(self, size: int = SIZE) -> None:
        if size <= 0:
            raise ValueError("cache size must be positive")
        self.size = size
        self._storage: list[Optional[Item]] = [None] * size

    def store(self, key: int, item: Item) -> None:
        self._storage[key % self.size] = item

    def get(self, key: int) -> Optional[Item]:
        return self._storage[key % self.size]


def primes(count: int) -> list[int]:
    """The first ``count`` primes by trial division; never fewer than [2, 3]."""
    found = [2, 3]
    candidate = 5
    while len(found) < count:
        if all(candidate % p for p in found):
            found.append(candidate)
        candidate += 2
    return found


_HASH_PRIME = primes(SIZE)[_PRIME_INDEX]


def hash_item(item: Item, size: int) -> int:
    """Multiplicative hash of an item's value into ``range(size)``."""
    if size <= 0:
        raise ValueError("size must be positive")
    return _HASH_PRIME * item.binary() % size


def heavy_compute(x: int, cache: Cache, delay: float = 1.0) -> Item:
    """Square ``x`` slowly, or return what the cache holds in its slot."""
    key = hash_item(Item(x), cache.size)
    cached = cache.get(key)
    if cached is not None:
        print("This should save some time?")
        return cached
    item = Item(x * x)
    time.sleep(delay)
    cache.store(key, item)
    return item


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Time a batch of computations before and after the cache is warm."""
    parser = argparse.ArgumentParser(description="Compare cached and uncached computation.")
    parser.add_argument("--delay", type=float, default=1.0, help="seconds per uncached computation")
    parser.add_argument("--count", type=int, default=5, help="number of inputs")
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must be non-negative")

    cache = Cache()
    start = time.perf_counter()
    for i in range(args.count):
        heavy_compute(i, cache, args.delay)
    print(f"The non-cached version took {time.perf_counter() - start:.6f}s")

    start = time.perf_counter()
    for i in range(args.count):
        heavy_compute(i, cache, args.delay)
    print(f"The Cached version took {time.perf_counter() - start:.6f}s")
    return 0