# price_graph.py
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from agromarket.general.config import DEFAULT_BEST_PRICES_LIMIT
from agromarket.general.structures.graph import Graph

logger = logging.getLogger('PriceComparisonGraph')


@dataclass
class PriceNode:
    store_id: str
    store_name: str
    input_id: str
    price: float

    @property
    def key(self) -> str:
        return f"{self.store_id}-{self.input_id}"


class PriceComparisonGraph:
    """
    Undirected graph of store offers keyed "storeId-inputId".
    Offers for the same input are linked with the absolute price difference
    as edge weight. Built per comparison request and then discarded.
    """

    def __init__(self):
        self.graph: Graph[str] = Graph(directed=False)
        self._prices: Dict[str, PriceNode] = {}

    def add_store(self, node: PriceNode) -> None:
        self._prices[node.key] = node
        self.graph.add_vertex(node.key)

    def connect_stores_by_same_input(self, input_id: str) -> None:
        offers = [n for n in self._prices.values() if n.input_id == input_id]
        for i, a in enumerate(offers):
            for b in offers[i + 1:]:
                self.graph.add_edge(a.key, b.key, abs(a.price - b.price))
        logger.debug(f"Connected {len(offers)} store(s) for input {input_id}")

    def find_best_prices(self, input_id: str, limit: int = DEFAULT_BEST_PRICES_LIMIT) -> List[PriceNode]:
        """Cheapest offers for input_id, ascending; ties keep insertion order."""
        offers = [n for n in self._prices.values() if n.input_id == input_id]
        offers.sort(key=lambda n: n.price)
        return offers[:max(limit, 0)]

    def get_price_node(self, key: str) -> Optional[PriceNode]:
        return self._prices.get(key)

    def get_inputs(self) -> List[str]:
        return list(dict.fromkeys(n.input_id for n in self._prices.values()))

    def get_neighbors(self, key: str) -> List[str]:
        return self.graph.get_neighbors(key)

    def get_edge_weight(self, a: str, b: str) -> Optional[float]:
        return self.graph.get_edge_weight(a, b)

    def size(self) -> int:
        return self.graph.size()
