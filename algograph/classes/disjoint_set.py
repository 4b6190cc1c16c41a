"""
Union-Find (Disjoint Set Union) data structure.

Tracks a partition of the vertex ids 0 .. n-1 into disjoint sets with:
- find(x): Which set contains x? - O(α(n)) amortized
- union(x, y): Merge sets containing x and y - O(α(n)) amortized
- connected(x, y): Are x and y in the same set? - O(α(n)) amortized

Where α(n) is the inverse Ackermann function (effectively constant ≤ 4).
"""

from typing import Dict, List, NamedTuple

from ..core.validation import check_count, check_vertex


class Subset(NamedTuple):
    """Snapshot of one element's parent pointer and rank."""
    parent: int
    rank: int


class DisjointSet:
    """
    Union-Find over a fixed range of integer elements, with path compression
    and union by rank.

    Example:
        >>> ds = DisjointSet(5)
        >>> ds.union(1, 2)
        1
        >>> ds.union(2, 3)
        1
        >>> ds.connected(1, 3)
        True
        >>> ds.connected(1, 4)
        False
    """

    def __init__(self, size: int):
        size = check_count(size, "Disjoint set size")

        self._parent: List[int] = list(range(size))
        self._rank: List[int] = [0] * size
        self._set_count = size

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def set_count(self) -> int:
        """Number of disjoint sets currently in the partition."""
        return self._set_count

    def _validate(self, element: int) -> int:
        return check_vertex(element, len(self._parent))

    def subset(self, element: int) -> Subset:
        """Get the current parent pointer and rank of an element."""
        element = self._validate(element)
        return Subset(self._parent[element], self._rank[element])

    def find(self, element: int) -> int:
        """
        Find the representative (root) of the set containing element.

        Uses path compression: flattens the tree by pointing all nodes
        along the path directly to the root.
        """
        element = self._validate(element)

        # Find root
        root = element
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression: point all nodes to root
        current = element
        while self._parent[current] != root:
            next_node = self._parent[current]
            self._parent[current] = root
            current = next_node

        return root

    def find_recursive(self, element: int) -> int:
        """
        Recursive form of find, with the same path compression.

        Only suitable for shallow trees; find() is the default.
        """
        return self._find_recursive(self._validate(element))

    def _find_recursive(self, element: int) -> int:
        if self._parent[element] != element:
            self._parent[element] = self._find_recursive(self._parent[element])
        return self._parent[element]

    def union(self, x: int, y: int) -> int:
        """
        Merge the sets containing x and y.

        Uses union by rank: attaches the shorter tree under the taller one
        to keep trees balanced.

        Returns the representative of the merged set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return root_x

        self._set_count -= 1

        # Attach smaller tree under larger tree
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
            return root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
            return root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
            return root_x

    def connected(self, x: int, y: int) -> bool:
        """Check if x and y are in the same set."""
        return self.find(x) == self.find(y)

    def get_all_sets(self) -> Dict[int, List[int]]:
        """
        Get all disjoint sets as a dictionary.

        Returns:
            Mapping from each set's representative to its members, ascending.
        """
        sets: Dict[int, List[int]] = {}
        for element in range(len(self._parent)):
            sets.setdefault(self.find(element), []).append(element)
        return sets
