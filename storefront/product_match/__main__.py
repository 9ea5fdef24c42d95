"""
CLI entry point for Product Match.

Usage:
    python -m storefront.product_match --catalog products.xlsx "فلتر زيت"
    python -m storefront.product_match --catalog products.csv --part 90915-YZZD4
    python -m storefront.product_match --catalog a.xlsx --catalog b.xlsx --output-csv results.csv "brake pad"
    python -m storefront.product_match --catalog products.xlsx --output-dir reports/ "brake pad"
"""

import argparse
import logging
import sys
from pathlib import Path

from .adapters import FileCatalogAdapter, JsonlMissingPartRecorder
from .config import DEFAULT_CONFIG_PATH, load_config
from .matcher import handle_part_search, rank_products
from .models import SearchSource, create_search_context
from .report import export_csv, format_console, format_part_result, generate_report_filename


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="product_match",
        description="Product Match - Rank catalog products for a search query",
    )

    parser.add_argument("query", help="Free text, part number, or both")

    parser.add_argument(
        "--catalog",
        action="append",
        required=True,
        metavar="FILE",
        help="Catalog file (XLSX, CSV or JSON); repeat for several files",
    )

    parser.add_argument(
        "--config",
        default=None,
        metavar="FILE",
        help="Search config file (default: module's search_config.json)",
    )

    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of results (default: config result_limit)",
    )

    parser.add_argument(
        "--part",
        action="store_true",
        help="Treat the query as a single part number lookup",
    )

    parser.add_argument(
        "--missing-log",
        metavar="FILE",
        help="Append missing/out-of-stock part lookups to this JSONL file",
    )

    parser.add_argument(
        "--customer-id",
        metavar="ID",
        help="Customer id attached to missing-part events",
    )

    parser.add_argument(
        "--output-csv",
        metavar="FILE",
        help="Output CSV file path",
    )

    parser.add_argument(
        "--output-dir",
        metavar="DIR",
        help="Write the CSV to DIR under a dated file name (ignored with --output-csv)",
    )

    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress console output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = Path(args.config) if args.config else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(config_path)

        catalog = []
        for path in args.catalog:
            catalog.extend(FileCatalogAdapter(path).get_catalog())
        if not args.quiet:
            print(f"Loaded {len(catalog)} catalog records")

        if args.part:
            recorder = JsonlMissingPartRecorder(args.missing_log) if args.missing_log else None
            result = handle_part_search(
                args.query,
                create_search_context({"id": args.customer_id} if args.customer_id else None),
                catalog,
                config.visibility,
                recorder=recorder,
                source=SearchSource.CATALOG_SEARCH,
            )
            if not args.quiet:
                print(format_part_result(result))
                if recorder is not None:
                    print(f"Missing-part log: {len(recorder.read_events())} events in {args.missing_log}")
            return

        limit = args.limit if args.limit is not None else config.search.result_limit
        results = rank_products(args.query, catalog, min_score=config.search.min_score, limit=limit)

        if not args.quiet:
            print(format_console(results, query=args.query))

        output_path = None
        if args.output_csv:
            output_path = Path(args.output_csv)
        elif args.output_dir:
            output_path = Path(args.output_dir) / generate_report_filename(args.query)
            output_path.parent.mkdir(parents=True, exist_ok=True)

        if output_path is not None:
            with open(output_path, "w", encoding="utf-8", newline="") as f:
                export_csv(results, output=f)
            if not args.quiet:
                print(f"\nCSV exported to: {output_path}")

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
