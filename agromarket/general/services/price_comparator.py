# price_comparator.py
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from agromarket.general.structures.price_graph import PriceComparisonGraph, PriceNode

logger = logging.getLogger('PriceComparator')


class PriceDataError(ValueError):
    """A price comparison document is missing required fields or has bad values."""
    pass


def _pick(raw: Dict[str, Any], *names: str, default: Any = None) -> Any:
    # payloads come in camelCase from the backend and snake_case from local files
    for name in names:
        if name in raw and raw[name] is not None:
            return raw[name]
    return default


def _number(value: Any, what: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise PriceDataError(f"{what} must be numeric, got {value!r}")


@dataclass
class StorePrice:
    store_id: str
    store_name: str
    price: float
    stock: float = 0.0
    unit: str = ""

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "StorePrice":
        if not isinstance(raw, dict):
            raise PriceDataError(f"Price entry must be an object, got {type(raw).__name__}")
        store_id = _pick(raw, "storeId", "store_id")
        if store_id is None:
            raise PriceDataError(f"Price entry without store id: {raw!r}")
        price = _pick(raw, "price")
        if price is None:
            raise PriceDataError(f"Price entry for store {store_id} has no price")
        return cls(
            store_id=str(store_id),
            store_name=str(_pick(raw, "storeName", "store_name", default="")),
            price=_number(price, "price"),
            stock=_number(_pick(raw, "stock", default=0), "stock"),
            unit=str(_pick(raw, "unit", default="")),
        )


@dataclass
class PriceComparison:
    input_id: str
    input_name: str = ""
    prices: List[StorePrice] = field(default_factory=list)
    min_price: float = 0.0
    max_price: float = 0.0
    avg_price: float = 0.0

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "PriceComparison":
        if not isinstance(raw, dict):
            raise PriceDataError(f"Comparison must be an object, got {type(raw).__name__}")
        input_id = _pick(raw, "inputId", "input_id")
        if input_id is None:
            raise PriceDataError("Comparison without input id")
        raw_prices = _pick(raw, "prices", default=[])
        if not isinstance(raw_prices, list):
            raise PriceDataError(f"Comparison {input_id} prices must be a list")
        prices = [StorePrice.from_dict(p) for p in raw_prices]
        values = [p.price for p in prices]
        # summary fields are optional; derive them from the offers when absent
        min_price = _pick(raw, "minPrice", "min_price", default=min(values, default=0.0))
        max_price = _pick(raw, "maxPrice", "max_price", default=max(values, default=0.0))
        avg_default = sum(values) / len(values) if values else 0.0
        avg_price = _pick(raw, "avgPrice", "avg_price", default=avg_default)
        return cls(
            input_id=str(input_id),
            input_name=str(_pick(raw, "inputName", "input_name", default="")),
            prices=prices,
            min_price=_number(min_price, "minPrice"),
            max_price=_number(max_price, "maxPrice"),
            avg_price=_number(avg_price, "avgPrice"),
        )


def build_price_graph(comparisons: Iterable[PriceComparison]) -> PriceComparisonGraph:
    """Registers every store offer and links offers for the same input."""
    graph = PriceComparisonGraph()
    count = 0
    for comparison in comparisons:
        for offer in comparison.prices:
            graph.add_store(PriceNode(
                store_id=offer.store_id,
                store_name=offer.store_name,
                input_id=comparison.input_id,
                price=offer.price,
            ))
        graph.connect_stores_by_same_input(comparison.input_id)
        count += 1
    logger.info(f"Price graph built: {count} input(s), {graph.size()} offer(s)")
    return graph


def price_statistics(comparison: PriceComparison) -> Dict[str, float]:
    spread = comparison.max_price - comparison.min_price
    percent = (spread / comparison.max_price) * 100 if comparison.max_price else 0.0
    return {
        "min": comparison.min_price,
        "max": comparison.max_price,
        "avg": comparison.avg_price,
        "range": spread,
        "savings": spread,
        "savings_percent": percent,
    }


def load_comparisons(path: Union[str, Path]) -> Optional[List[PriceComparison]]:
    """
    Reads comparisons from a JSON file holding either a list or
    {"comparisons": [...]}. Returns None if the file does not exist.
    """
    path = Path(path)
    if not path.exists():
        logger.warning(f"Comparison file {path} does not exist")
        return None

    try:
        with path.open(encoding="utf-8") as f:
            payload = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PriceDataError(f"{path} could not be decoded as JSON: {e}") from e

    if isinstance(payload, dict):
        payload = payload.get("comparisons")
    if not isinstance(payload, list):
        raise PriceDataError(f"{path} must contain a list of comparisons")

    comparisons = [PriceComparison.from_dict(raw) for raw in payload]
    logger.info(f"Loaded {len(comparisons)} comparison(s) from {path}")
    return comparisons
