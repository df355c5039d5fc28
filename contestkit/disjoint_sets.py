"""Disjoint-set (union-find) structures with several union strategies."""

from __future__ import annotations

import random
from typing import Hashable


class UnionFind:
    """Union-find over the integers ``0 .. n-1`` with union by rank and path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of elements must be non-negative")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._set_size = [1] * n
        self._num_sets = n

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._parent):
            raise IndexError(f"element {i} out of range")

    def find_set(self, i: int) -> int:
        """Return the representative of the set containing ``i``."""
        self._check(i)
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def is_same_set(self, i: int, j: int) -> bool:
        return self.find_set(i) == self.find_set(j)

    def union_set(self, i: int, j: int) -> None:
        """Merge the sets containing ``i`` and ``j``."""
        x, y = self.find_set(i), self.find_set(j)
        if x == y:
            return
        self._num_sets -= 1
        if self._rank[x] > self._rank[y]:
            self._parent[y] = x
            self._set_size[x] += self._set_size[y]
        else:
            self._parent[x] = y
            self._set_size[y] += self._set_size[x]
            if self._rank[x] == self._rank[y]:
                self._rank[y] += 1

    def num_disjoint_sets(self) -> int:
        return self._num_sets

    def size_of_set(self, i: int) -> int:
        return self._set_size[self.find_set(i)]


class SizeDisjointSet:
    """Disjoint sets joined by size, without path compression."""

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._size: dict[Hashable, int] = {}

    def make_set(self, v: Hashable) -> None:
        self._parent[v] = v
        self._size[v] = 1

    def find_set(self, v: Hashable) -> Hashable:
        while self._parent[v] != v:
            v = self._parent[v]
        return v

    def union_sets(self, a: Hashable, b: Hashable) -> None:
        a, b = self.find_set(a), self.find_set(b)
        if a == b:
            return
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]

    def parent(self, v: Hashable) -> Hashable:
        """Return the direct parent of ``v``."""
        return self._parent[v]


class RankDisjointSet:
    """Disjoint sets joined by rank, with path compression."""

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._rank: dict[Hashable, int] = {}

    def make_set(self, v: Hashable) -> None:
        self._parent[v] = v
        self._rank[v] = 0

    def find_set(self, v: Hashable) -> Hashable:
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union_sets(self, a: Hashable, b: Hashable) -> None:
        a, b = self.find_set(a), self.find_set(b)
        if a == b:
            return
        if self._rank[a] < self._rank[b]:
            a, b = b, a
        self._parent[b] = a
        self._rank[a] += 1

    def parent(self, v: Hashable) -> Hashable:
        """Return the direct parent of ``v``."""
        return self._parent[v]


class RandomDisjointSet:
    """Disjoint sets joined by random priorities, with path compression."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._parent: dict[Hashable, Hashable] = {}
        self._priority: dict[Hashable, float] = {}

    def make_set(self, v: Hashable) -> None:
        self._parent[v] = v
        self._priority[v] = self._rng.random()

    def find_set(self, v: Hashable) -> Hashable:
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union_sets(self, a: Hashable, b: Hashable) -> None:
        a, b = self.find_set(a), self.find_set(b)
        if a == b:
            return
        if self._priority[a] < self._priority[b]:
            a, b = b, a
        self._parent[b] = a

    def parent(self, v: Hashable) -> Hashable:
        """Return the direct parent of ``v``."""
        return self._parent[v]