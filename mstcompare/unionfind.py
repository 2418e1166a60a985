class UnionFind:
    """
    Disjoint-set forest over 0..n_verts-1 with union by rank and
    path compression.

    Make a new one per MST run; instances are not meant to be reused.
    """

    def __init__(self, n_verts: int) -> None:
        self.parent = [i for i in range(n_verts)]
        self.rank = [0] * n_verts

    def find(self, index: int) -> int:
        root = index
        while self.parent[root] != root:
            root = self.parent[root]

        # second pass: relink everything on the walked path to the root
        while self.parent[index] != root:
            self.parent[index], index = root, self.parent[index]

        return root

    def union(self, i: int, j: int) -> bool:
        """Merge the sets of i and j. Returns False if they were already one set."""
        i = self.find(i)
        j = self.find(j)
        if i == j:
            return False

        if self.rank[i] < self.rank[j]:
            self.parent[i] = j
        elif self.rank[i] > self.rank[j]:
            self.parent[j] = i
        else:
            self.parent[j] = i
            self.rank[i] += 1
        return True

    def same_set(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)
