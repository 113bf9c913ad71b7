"""
Union-Find (disjoint set) data structure.

Used by Kruskal's algorithm and available on its own for incremental
connectivity queries.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21 (Data Structures for Disjoint Sets).
"""

from typing import Dict, Hashable, Iterable, List, Set

from .exceptions import UnknownVertexError


class UnionFind:
    """
    Union-Find with path compression and union by rank.

    Following parent pointers from any element ends at a root whose parent
    is itself. Compression and ranking only shorten those chains; they
    never change which elements share a root.

    Attributes:
        parent: Mapping element -> parent element.
        rank: Mapping element -> rank (upper bound on tree height).

    Complexity: O(alpha(n)) amortized per find/union.
    """

    def __init__(self, elements: Iterable[Hashable] = ()):
        """
        Initialize union-find with each element in its own set.

        Args:
            elements: Iterable of elements.
        """
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}
        self._set_count = 0

        for element in elements:
            self.add(element)

    def __contains__(self, element: Hashable) -> bool:
        return element in self.parent

    def __len__(self) -> int:
        return len(self.parent)

    @property
    def set_count(self) -> int:
        """Number of disjoint sets."""
        return self._set_count

    def add(self, element: Hashable) -> None:
        """Add element as a singleton set. Does nothing if already present."""
        if element not in self.parent:
            self.parent[element] = element
            self.rank[element] = 0
            self._set_count += 1

    def find(self, x: Hashable) -> Hashable:
        """
        Find the root of x, compressing the path behind it.

        Iterative, so long chains built before compression cannot exhaust
        the call stack.

        Args:
            x: Element to find the root for.

        Returns:
            Root element of x's set.

        Raises:
            UnknownVertexError: If x was never added.
        """
        if x not in self.parent:
            raise UnknownVertexError(x, "union-find")

        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]

        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Union the sets containing x and y using union by rank.

        Args:
            x: First element.
            y: Second element.

        Returns:
            True if two sets were merged, False if x and y were already in
            the same set.

        Raises:
            UnknownVertexError: If x or y was never added.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        self._set_count -= 1
        return True

    def connected(self, x: Hashable, y: Hashable) -> bool:
        """Return True if x and y are in the same set."""
        return self.find(x) == self.find(y)

    def groups(self) -> List[Set[Hashable]]:
        """
        Return the current partition.

        Groups are ordered by the insertion position of their first element.
        """
        by_root: Dict[Hashable, Set[Hashable]] = {}
        for element in self.parent:
            by_root.setdefault(self.find(element), set()).add(element)
        return list(by_root.values())
