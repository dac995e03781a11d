# main.py
import argparse
import logging
import sys

from agromarket.general.config import DATA_DIR, DEFAULT_BEST_PRICES_LIMIT
from agromarket.general.services.price_comparator import (
    PriceDataError,
    build_price_graph,
    load_comparisons,
    price_statistics,
)

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger('agromarket')

DEFAULT_COMPARISONS = DATA_DIR / "comparisons.json"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Show the cheapest stores for a farming input.")
    parser.add_argument("input_id", nargs="?", help="input to compare (defaults to every input in the file)")
    parser.add_argument("--file", default=str(DEFAULT_COMPARISONS), help="price comparison JSON file")
    parser.add_argument("--limit", type=int, default=DEFAULT_BEST_PRICES_LIMIT, help="stores to show per input")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        comparisons = load_comparisons(args.file)
    except PriceDataError as e:
        logger.error(f"Could not read comparisons: {e}")
        return 2
    if comparisons is None:
        return 1

    graph = build_price_graph(comparisons)
    by_input = {c.input_id: c for c in comparisons}
    inputs = [args.input_id] if args.input_id else graph.get_inputs()

    for input_id in inputs:
        comparison = by_input.get(input_id)
        if comparison is None:
            logger.warning(f"Input {input_id} not found in {args.file}")
            continue
        stats = price_statistics(comparison)
        print(f"{comparison.input_name or input_id} (save up to {stats['savings']:.2f}, {stats['savings_percent']:.1f}%)")
        for rank, node in enumerate(graph.find_best_prices(input_id, args.limit), start=1):
            print(f"  {rank}. {node.store_name:<20} {node.price:>10.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
