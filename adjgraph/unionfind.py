"""Disjoint-set union over dense vertex ids, backing Kruskal's MST."""

from __future__ import annotations

from typing import List

from .exceptions import InputError, InvalidVertexError


class UnionFind:
    """Union-find with union by rank and path compression.

    Vertices ``0`` .. ``n-1`` start as singleton sets. ``union`` only ever
    links a root under another root, so parent pointers never form a cycle
    and ``find`` always terminates.

    Attributes:
        parent: Parent pointer per vertex; roots point at themselves.
        rank: Upper bound on the height of the tree rooted at each root.
    """

    def __init__(self, n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise InputError("UnionFind size must be a non-negative integer.")
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n
        self._sets = n

    def __len__(self) -> int:
        return len(self.parent)

    @property
    def set_count(self) -> int:
        """Number of disjoint sets currently tracked."""
        return self._sets

    def find(self, v: int) -> int:
        """Return the representative of the set containing ``v``.

        Raises:
            InvalidVertexError: If ``v`` is not in ``[0, n)``.
        """
        parent = self.parent
        if not (0 <= v < len(parent)):
            raise InvalidVertexError(v, len(parent))
        root = v
        while parent[root] != root:
            root = parent[root]
        # path compression
        while parent[v] != root:
            parent[v], v = root, parent[v]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets containing ``a`` and ``b``.

        The lower-rank root goes under the higher-rank one. On equal ranks
        ``b``'s root goes under ``a``'s root, whose rank grows by one.

        Returns:
            ``True`` if two sets were merged, ``False`` if ``a`` and ``b``
            were already together.
        """
        ra = self.find(a)
        rb = self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            self.parent[ra] = rb
        elif self.rank[ra] > self.rank[rb]:
            self.parent[rb] = ra
        else:
            self.parent[rb] = ra
            self.rank[ra] += 1
        self._sets -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        """Return whether ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)


__all__ = ["UnionFind"]
