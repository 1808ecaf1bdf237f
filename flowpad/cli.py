"""
Command-line interface for Flowpad.

Usage:
    flowpad list
    flowpad show my-chart
    flowpad import ./flowchart.json --slot my-chart
    flowpad export my-chart -f png -o ./build/my-chart.png
    flowpad delete my-chart
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from flowpad.backend.graphviz import GraphvizExporter
from flowpad.config import get_settings
from flowpad.core.serialization import GraphCodec
from flowpad.errors import FlowpadError
from flowpad.persistence import PersistenceGateway
from flowpad.storage.filesystem import FileSlotStore

EXPORT_FORMATS = ["json", "dot", "png", "svg", "pdf"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flowpad",
        description="Manage saved flowcharts.",
        epilog="Example: flowpad export my-chart -f png",
    )
    parser.add_argument(
        "--store",
        type=Path,
        help="Slot directory (default: $FLOWPAD_STORE_DIR or ~/.flowpad/slots)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List saved flowcharts")

    show = commands.add_parser("show", help="Print a saved flowchart as JSON")
    show.add_argument("slot")

    imp = commands.add_parser("import", help="Validate a JSON file and save it to a slot")
    imp.add_argument("input", type=Path, help="JSON file to import")
    imp.add_argument("-s", "--slot", help="Slot name (default: the file name without suffix)")

    exp = commands.add_parser("export", help="Export a saved flowchart")
    exp.add_argument("slot")
    exp.add_argument(
        "-f", "--format",
        choices=EXPORT_FORMATS,
        default="json",
        help="Output format (default: json)"
    )
    exp.add_argument(
        "-o", "--output",
        type=Path,
        help="Output file (default: flowchart.json for json, <slot>.<format> otherwise)"
    )

    delete = commands.add_parser("delete", help="Delete a saved flowchart")
    delete.add_argument("slot")

    return parser


def export_slot(gateway: PersistenceGateway, slot: str, format: str, output: Path = None) -> Path:
    """Export a slot to the specified format and return the written file."""
    snapshot = gateway.load(slot)

    if format == "json":
        return gateway.export_file(snapshot, output)

    output_file = output or gateway.export_dir / f"{slot}.{format}"
    if format == "dot":
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(GraphvizExporter.to_dot(snapshot, name=slot))
        return output_file
    return GraphvizExporter.render(snapshot, output_file, format=format)


def main(argv: List[str] = None) -> int:
    """Main CLI entrypoint."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        store = FileSlotStore(args.store or settings.store_dir)
    except OSError as e:
        print(f"Error: cannot open slot directory: {e}", file=sys.stderr)
        return 1
    gateway = PersistenceGateway(store, export_dir=settings.export_dir, json_filename=settings.json_filename)

    try:
        if args.command == "list":
            for name, snapshot in gateway.list_snapshots():
                print(f"  {name}: ({len(snapshot.nodes)} nodes, {len(snapshot.edges)} edges)")

        elif args.command == "show":
            print(GraphCodec.encode(gateway.load(args.slot)))

        elif args.command == "import":
            if not args.input.is_file():
                print(f"Error: File not found: {args.input}", file=sys.stderr)
                return 1
            slot = args.slot or args.input.stem
            gateway.save(slot, gateway.import_file(args.input))
            print(slot)

        elif args.command == "export":
            output_file = export_slot(gateway, args.slot, args.format, args.output)
            if args.verbose:
                print(f"Exported '{args.slot}' -> {output_file}")
            else:
                print(f"{output_file}")

        elif args.command == "delete":
            gateway.delete_slot(args.slot)

    except FlowpadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
