# Command line front end for the emoji search engine: prints matches as a JSON list
# Usage: python -m src.cli search -i face -x smile --distinct | python -m src.cli list

import argparse
import json
import os
import sys

from dotenv import load_dotenv, find_dotenv

from src.models.emoji import EmojiResponse
from src.schemas.emoji import SearchParams
from src.services.catalog_service import load_catalog
from src.services.search_service import EmojiSearchEngine
from src.utils.errors import CatalogError
from src.utils.logger import logger


def build_parser():
    parser = argparse.ArgumentParser(
        prog="emoji-search",
        description="Filter the emoji catalog by include/exclude terms",
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="JSON catalog file (defaults to $EMOJI_CATALOG_PATH, then the bundled catalog)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search the catalog")
    search.add_argument("-i", "--include", action="append", default=[], metavar="TERM",
                        help="Term a record must match (repeatable)")
    search.add_argument("-x", "--exclude", action="append", default=[], metavar="TERM",
                        help="Term that removes a record from the result (repeatable)")
    search.add_argument("--distinct", action="store_true",
                        help="List each record once even if it matches several include terms")

    subparsers.add_parser("list", help="Print the whole catalog")
    return parser


def dump(records):
    payload = [EmojiResponse.from_record(record).model_dump() for record in records]
    return json.dumps(payload, ensure_ascii=False, indent=2)


def main(argv=None):
    args = build_parser().parse_args(argv)

    load_dotenv(find_dotenv())
    catalog_path = args.catalog or os.environ.get("EMOJI_CATALOG_PATH")
    try:
        catalog = load_catalog(catalog_path)
    except CatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "list":
        records = list(catalog)
    else:
        params = SearchParams(include=args.include, exclude=args.exclude, distinct=args.distinct)
        logger.info(f"CLI search | include={params.include} | exclude={params.exclude}")
        records = EmojiSearchEngine(catalog).search(params)

    print(dump(records))
    return 0


if __name__ == "__main__":
    sys.exit(main())
