# graph.py
from typing import Callable, Dict, Generic, Hashable, List, NamedTuple, Optional, TypeVar

from agromarket.general.config import DEFAULT_MAX_PATH_DEPTH
from agromarket.general.structures.adts import Queue

T = TypeVar("T", bound=Hashable)


class Edge(NamedTuple):
    source: Hashable
    target: Hashable
    weight: float


def reconstruct(came_from: Dict, cur) -> List:
    path = [cur]
    while cur in came_from:
        cur = came_from[cur]
        path.append(cur)
    path.reverse()
    return path


class Graph(Generic[T]):
    """
    Adjacency-list graph, directed or undirected, with weighted edges.

    Storage is {vertex: {neighbor: weight}}; vertex and neighbor order is
    insertion order, which fixes the visit order of every traversal.
    Undirected edges are stored in both directions with the same weight.

    Traversals and searches: BFS/DFS O(V + E), shortest path by edge count
    (BFS), bounded simple-path enumeration, cycle detection and connected
    components. Unknown vertices never raise: traversals do nothing and
    lookups return None or an empty list.
    """

    def __init__(self, directed: bool = False):
        self.directed = directed
        self._adj: Dict[T, Dict[T, float]] = {}

    # ----------------------------
    # Mutation
    # ----------------------------
    def add_vertex(self, vertex: T) -> None:
        if vertex not in self._adj:
            self._adj[vertex] = {}

    def add_edge(self, source: T, target: T, weight: float = 1) -> None:
        self.add_vertex(source)
        self.add_vertex(target)
        self._adj[source][target] = weight
        if not self.directed:
            self._adj[target][source] = weight

    def remove_vertex(self, vertex: T) -> None:
        if vertex not in self._adj:
            return
        for neighbors in self._adj.values():
            neighbors.pop(vertex, None)
        del self._adj[vertex]

    def remove_edge(self, source: T, target: T) -> None:
        if source in self._adj:
            self._adj[source].pop(target, None)
        if not self.directed and target in self._adj:
            self._adj[target].pop(source, None)

    def clear(self) -> None:
        self._adj.clear()

    # ----------------------------
    # Queries
    # ----------------------------
    def has_vertex(self, vertex: T) -> bool:
        return vertex in self._adj

    def get_neighbors(self, vertex: T) -> List[T]:
        return list(self._adj.get(vertex, ()))

    def has_edge(self, source: T, target: T) -> bool:
        return target in self._adj.get(source, {})

    def get_edge_weight(self, source: T, target: T) -> Optional[float]:
        return self._adj.get(source, {}).get(target)

    def get_vertices(self) -> List[T]:
        return list(self._adj)

    def get_edges(self) -> List[Edge]:
        """Every stored direction; undirected edges appear once per direction."""
        return [Edge(s, t, w) for s, nbrs in self._adj.items() for t, w in nbrs.items()]

    def size(self) -> int:
        return len(self._adj)

    def __len__(self):
        return len(self._adj)

    def __contains__(self, vertex) -> bool:
        return vertex in self._adj

    # ----------------------------
    # Traversals
    # ----------------------------
    def bfs(self, start: T, visit: Callable[[T, int], None]) -> None:
        """Calls visit(vertex, depth) once per vertex reachable from start, level by level."""
        if start not in self._adj:
            return
        seen = {start}
        queue: Queue = Queue()
        queue.enqueue((start, 0))
        while not queue.is_empty():
            vertex, depth = queue.dequeue()
            visit(vertex, depth)
            for nb in self.get_neighbors(vertex):
                if nb not in seen:
                    seen.add(nb)
                    queue.enqueue((nb, depth + 1))

    def dfs(self, start: T, visit: Callable[[T, int], None]) -> None:
        """Pre-order depth-first visit; depth is the length of the DFS tree path."""
        if start not in self._adj:
            return
        seen = {start}
        visit(start, 0)
        stack = [(iter(self.get_neighbors(start)), 0)]
        while stack:
            neighbors, depth = stack[-1]
            for nb in neighbors:
                if nb not in seen:
                    seen.add(nb)
                    visit(nb, depth + 1)
                    stack.append((iter(self.get_neighbors(nb)), depth + 1))
                    break
            else:
                stack.pop()

    # ----------------------------
    # Paths
    # ----------------------------
    def find_shortest_path(self, start: T, end: T) -> Optional[List[T]]:
        """Fewest-edges path from start to end, or None if unreachable. Weights are ignored."""
        if start not in self._adj or end not in self._adj:
            return None
        if start == end:
            return [start]
        came_from: Dict[T, T] = {}
        seen = {start}
        queue: Queue = Queue()
        queue.enqueue(start)
        while not queue.is_empty():
            current = queue.dequeue()
            for nb in self.get_neighbors(current):
                if nb in seen:
                    continue
                seen.add(nb)
                came_from[nb] = current
                if nb == end:
                    return reconstruct(came_from, nb)
                queue.enqueue(nb)
        return None

    def find_all_paths(self, start: T, end: T, max_depth: int = DEFAULT_MAX_PATH_DEPTH) -> List[List[T]]:
        """Every simple path from start to end with at most max_depth edges."""
        if start not in self._adj or end not in self._adj:
            return []
        paths: List[List[T]] = []
        path = [start]
        on_path = {start}

        def walk(current: T, depth: int) -> None:
            if current == end:
                paths.append(list(path))
                return
            if depth >= max_depth:
                return
            for nb in self.get_neighbors(current):
                if nb in on_path:
                    continue
                path.append(nb)
                on_path.add(nb)
                walk(nb, depth + 1)
                on_path.discard(nb)
                path.pop()

        walk(start, 0)
        return paths

    # ----------------------------
    # Structure
    # ----------------------------
    def has_cycle(self) -> bool:
        """
        Directed graphs: a back edge to a vertex on the current DFS path.
        Undirected graphs: an edge to an already-seen vertex other than the
        one we came from, so a single mirrored edge is not a cycle.
        """
        if self.directed:
            return self._has_directed_cycle()
        return self._has_undirected_cycle()

    def _has_directed_cycle(self) -> bool:
        on_path = set()
        done = set()
        for root in self._adj:
            if root in done:
                continue
            on_path.add(root)
            stack = [(root, iter(self.get_neighbors(root)))]
            while stack:
                vertex, neighbors = stack[-1]
                for nb in neighbors:
                    if nb in on_path:
                        return True
                    if nb not in done:
                        on_path.add(nb)
                        stack.append((nb, iter(self.get_neighbors(nb))))
                        break
                else:
                    stack.pop()
                    on_path.discard(vertex)
                    done.add(vertex)
        return False

    def _has_undirected_cycle(self) -> bool:
        seen = set()
        for root in self._adj:
            if root in seen:
                continue
            seen.add(root)
            stack = [(root, None)]
            while stack:
                vertex, parent = stack.pop()
                for nb in self._adj[vertex]:
                    if nb == parent and nb != vertex:
                        continue
                    if nb in seen:
                        return True
                    seen.add(nb)
                    stack.append((nb, vertex))
        return False

    def get_connected_components(self) -> List[List[T]]:
        """Groups of mutually reachable vertices, each in BFS order. Assumes undirected symmetry."""
        seen = set()
        components: List[List[T]] = []
        for vertex in self._adj:
            if vertex in seen:
                continue
            component: List[T] = []

            def collect(v: T, _depth: int) -> None:
                if v not in seen:
                    seen.add(v)
                    component.append(v)

            self.bfs(vertex, collect)
            components.append(component)
        return components

    def to_adjacency_matrix(self) -> List[List[float]]:
        """Dense matrix in get_vertices() order; 0 marks a missing edge."""
        vertices = self.get_vertices()
        return [
            [self._adj[src].get(dst, 0) for dst in vertices]
            for src in vertices
        ]
