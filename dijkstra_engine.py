"""
Heap-based Dijkstra implementation.

Uses MinPriorityQueue (heapq with FIFO tie-break) to compute shortest paths
over any Graph implementation that satisfies the Graph interface.
"""

from typing import Dict, List, Optional, Set

from algorithms import ShortestPathEngine
from graph import INFINITY, Graph
from priority_queue import MinPriorityQueue


class SimpleDijkstraEngine(ShortestPathEngine):
    """
    Dijkstra with lazy decrease-key.

    Complexity:
        O((V + E) log V) queue work, plus whatever neighbors() and
        edge_weight() cost in the graph's representation.
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

    def _reset_counters(self) -> None:
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

    def shortest_path(self, graph: Graph, source: int, dest: int) -> List[int]:
        """
        Single-source, single-sink Dijkstra.

        Every node starts in the queue (source at 0, the rest at INFINITY).
        Each relaxation pushes a new entry instead of decreasing a key, and
        entries for nodes that were already settled are dropped on pop. The
        search stops as soon as dest is popped.

        When source == dest the trivial empty path does not count: the
        engine tracks the cheapest edge that closes a cycle back into source
        and returns that cycle, or [] if source lies on no cycle.
        """
        self._reset_counters()
        find_cycle = source == dest

        dist: Dict[int, int] = {node: INFINITY for node in range(graph.node_count())}
        dist[source] = 0
        prev: Dict[int, int] = {}
        settled: Set[int] = set()
        # Cheapest way back into source, only used when find_cycle is set.
        cycle_cost = INFINITY
        cycle_last: Optional[int] = None

        queue = MinPriorityQueue()
        for node in range(graph.node_count()):
            queue.push(node, dist[node])
            self.last_heap_pushes += 1

        while not queue.is_empty():
            entry = queue.pop()
            self.last_heap_pops += 1
            u, d_u = entry.node, entry.distance

            # Skip outdated entries
            if u in settled or d_u > dist[u]:
                continue
            if d_u >= INFINITY:
                # Everything left in the queue is unreachable.
                break
            if find_cycle and cycle_cost <= d_u:
                break
            if u == dest and not find_cycle:
                return _walk_back(prev, source, dest)
            settled.add(u)

            for v in graph.neighbors(u):
                self.last_edges_examined += 1
                alt = d_u + graph.edge_weight(u, v)
                if alt > INFINITY:
                    continue
                if find_cycle and v == source:
                    if alt < cycle_cost:
                        cycle_cost = alt
                        cycle_last = u
                    continue
                if alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u
                    queue.push(v, alt)
                    self.last_heap_pushes += 1
                    self.last_relaxed += 1

        if find_cycle and cycle_last is not None:
            return _walk_back(prev, source, cycle_last) + [source]
        return []

    def shortest_paths(
        self, graph: Graph, source: int
    ) -> tuple[Dict[int, int], Dict[int, int]]:
        """
        Dijkstra variant that records costs and predecessors for every
        node reachable from source.

        The distance map contains only reachable nodes (source at 0). The
        predecessor map omits the source itself because it has no parent;
        walking it back from any reachable node ends at source.
        """
        self._reset_counters()

        dist: Dict[int, int] = {source: 0}
        prev: Dict[int, int] = {}
        queue = MinPriorityQueue()
        queue.push(source, 0)
        self.last_heap_pushes += 1

        while not queue.is_empty():
            entry = queue.pop()
            self.last_heap_pops += 1
            u, d_u = entry.node, entry.distance
            if d_u != dist.get(u, INFINITY):
                continue

            for v in graph.neighbors(u):
                self.last_edges_examined += 1
                alt = d_u + graph.edge_weight(u, v)
                if alt > INFINITY:
                    continue
                if alt < dist.get(v, INFINITY):
                    dist[v] = alt
                    prev[v] = u
                    queue.push(v, alt)
                    self.last_heap_pushes += 1
                    self.last_relaxed += 1

        return dist, prev


def _walk_back(prev: Dict[int, int], source: int, node: int) -> List[int]:
    """Follow predecessors from node back to source and return the forward path."""
    path = [node]
    while node != source:
        node = prev[node]
        path.append(node)
    path.reverse()
    return path
