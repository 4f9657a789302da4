"""
Command-line entry point for the street fines package.

Examples:
  python -m street_fines tabulate data/raw/Parking_Tags_Data_2012.csv --top 10
  python -m street_fines resolve "123 FAKE ST W" "50 QUEEN STREET WEST"
"""

import argparse
from typing import List, Optional

from street_fines.config.settings import LOGGING_CONFIG, PIPELINE_CONFIG
from street_fines.pipelines import tabulate
from street_fines.utils.data_extraction.address_cleaners import StreetNameResolver
from street_fines.utils.logging_setup import set_log_level

UNRESOLVED = "<unresolved>"


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Parking fines by street")
    parser.add_argument(
        "--log-level",
        default=LOGGING_CONFIG["level"],
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    tab = subparsers.add_parser("tabulate", help="Total fines per street from a tickets CSV")
    tab.add_argument("csv", help="Path to the parking tickets CSV")
    tab.add_argument("--workers", type=int, default=PIPELINE_CONFIG["workers"])
    tab.add_argument("--chunksize", type=int, default=PIPELINE_CONFIG["chunksize"])
    tab.add_argument("--top", type=int, default=PIPELINE_CONFIG["top_n"])
    tab.add_argument("--output", default=None, help="Where to save the street totals CSV")

    res = subparsers.add_parser("resolve", help="Print the street name of each address")
    res.add_argument("addresses", nargs="+")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    set_log_level(args.log_level)

    if args.command == "tabulate":
        tabulate.run_tabulation_pipeline(args)
    elif args.command == "resolve":
        resolver = StreetNameResolver()
        for address in args.addresses:
            street = resolver.resolve(address)
            print(f"{address}\t{UNRESOLVED if street is None else street}")


if __name__ == "__main__":
    main()
