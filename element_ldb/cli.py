# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Command-line interface around MetadataExtractor.
#
# COMMANDS:
# ---------
# 1. Show where Element keeps its LevelDB on this OS:
#    python -m element_ldb.cli locate
#
# 2. Copy the live store (Element holds a LOCK while running):
#    python -m element_ldb.cli snapshot --dest ./leveldb
#
# 3. Extract metadata as JSON (stdout, or a file with --output):
#    python -m element_ldb.cli extract ./leveldb
#    python -m element_ldb.cli extract ./leveldb --output metadata.json
#
# 4. Read one raw value:
#    python -m element_ldb.cli get ./leveldb mx_user_id
#
#   Any ElementLdbError is printed to stderr and the exit status is 1.
#
# ==============================================

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from element_ldb.config import AppConfig, get_config
from element_ldb.errors import ElementLdbError
from element_ldb.extraction.extractor import MetadataExtractor
from element_ldb.persistence.metadata_store import MetadataStore
from element_ldb.store.locator import snapshot_store

logger = logging.getLogger(__name__)


def _resolve_store(path: Optional[str], config: AppConfig) -> str:
    store = path or config.store_path
    if not store:
        raise SystemExit("No LevelDB path given and no default for this platform")
    return store


def cmd_locate(args, config: AppConfig) -> int:
    if not config.store_path:
        print("No default Element LevelDB location for this platform")
        return 1
    path = Path(config.store_path)
    status = "found" if path.is_dir() else "not found"
    print(f"{path} ({status})")
    return 0 if path.is_dir() else 1


def cmd_snapshot(args, config: AppConfig) -> int:
    source = _resolve_store(args.source, config)
    destination = snapshot_store(source, args.dest or config.snapshot_dir)
    print(f"✓ LevelDB copied to {destination}")
    return 0


def cmd_extract(args, config: AppConfig) -> int:
    store = _resolve_store(args.path, config)
    indent = config.json_indent if args.indent is None else args.indent

    with MetadataExtractor.open(store) as extractor:
        if args.output:
            output = Path(args.output)
            metadata = extractor.extract_all()
            saved = MetadataStore(str(output.parent), indent=indent).save(metadata, output.name)
            summary = metadata.summary()
            print(f"✓ Saved {summary['raw_entries']} entries to {saved}")
            print(f"   → Rooms: {summary['room_ids']} ({summary['encrypted_rooms']} encrypted)")
            print(f"   → Found: {', '.join(summary['found']) or 'nothing'}")
        else:
            print(extractor.export_json(indent=indent))
    return 0


def cmd_get(args, config: AppConfig) -> int:
    with MetadataExtractor.open(args.path) as extractor:
        value = extractor.get_value(args.key)
    if value is None:
        print(f"{args.key}: not found")
        return 1
    print(value)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="element-ldb",
        description="Element Desktop LevelDB metadata parser"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    locate = subparsers.add_parser("locate", help="Show the default Element LevelDB path")
    locate.set_defaults(func=cmd_locate)

    snapshot = subparsers.add_parser("snapshot", help="Copy the live store to a working directory")
    snapshot.add_argument("--source", help="Store to copy (default: Element's LevelDB)")
    snapshot.add_argument("--dest", help="Destination directory (default: ELEMENT_SNAPSHOT_DIR)")
    snapshot.set_defaults(func=cmd_snapshot)

    extract = subparsers.add_parser("extract", help="Extract metadata as JSON")
    extract.add_argument("path", nargs="?", help="LevelDB directory (default: Element's LevelDB)")
    extract.add_argument("--output", "-o", help="Write JSON to this file instead of stdout")
    extract.add_argument("--indent", type=int, help="JSON indentation")
    extract.set_defaults(func=cmd_extract)

    get = subparsers.add_parser("get", help="Print a single value")
    get.add_argument("path", help="LevelDB directory")
    get.add_argument("key", help="Key to look up")
    get.set_defaults(func=cmd_get)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config()
        logging.basicConfig(
            level=getattr(logging, config.log_level, logging.WARNING),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
        return args.func(args, config)
    except ElementLdbError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
