"""
varquantity Model Runner (CLI wrapper)

Evaluates the quantities of a model file for a set of influencing factors.

Usage:
    python -m varquantity.run --config model.yaml
    python -m varquantity.run --config model.yaml --factor "1.2 T" --factor "20 Hz"
    python -m varquantity.run --list
"""

import argparse
import logging
import sys
from typing import List, Optional

from varquantity.config import ConfigurationError, build_quantities, load_config, parse_factors
from varquantity.errors import UnitMismatch
from varquantity.function import FUNCTION_TYPES
from varquantity.quantities import QUANTITY_TYPES, to_dynamic

logger = logging.getLogger(__name__)


def print_type_info():
    """Print registered quantity function types and static quantity types."""
    print("\nQuantity function types:")
    for tag, function_cls in sorted(FUNCTION_TYPES.items()):
        print(f"  {tag:20} {function_cls.__module__}")

    print("\nQuantity types:")
    for name, quantity_type in sorted(QUANTITY_TYPES.items()):
        unit = getattr(quantity_type, 'UNIT', None)
        print(f"  {name:28} {unit if unit is not None else '(dimensionless)'}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="varquantity Model Runner")
    parser.add_argument("--config", help="Path to model YAML")
    parser.add_argument("--factor", action="append", default=None,
                        help="Influencing factor, e.g. '1.2 T' (repeatable)")
    parser.add_argument("--list", action="store_true", help="List function and quantity types")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='%(message)s')

    if args.list:
        print_type_info()
        return 0

    if not args.config:
        parser.error("--config is required unless using --list")

    try:
        config = load_config(args.config)
        factors = parse_factors(args.factor if args.factor is not None else config.get('factors'))
        quantities = build_quantities(config)
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return 1

    logger.debug(f"Evaluating {len(quantities)} quantities with {len(factors)} factors")

    print(f"\nvarquantity model: {args.config}")
    print("=" * 60)
    print(f"  Factors: {', '.join(str(f) for f in factors) or '(none)'}")

    failed = False
    for name, var_quantity in quantities.items():
        variant = type(var_quantity).__name__
        try:
            value = var_quantity.get(factors)
        except UnitMismatch as e:
            failed = True
            print(f"  [FAIL] {name:20} {variant:8}")
            print(f"         Error: {e}")
            continue
        print(f"  [OK]   {name:20} {variant:8} {to_dynamic(value)}")

    print("=" * 60)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
