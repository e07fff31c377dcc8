import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from fortune_voronoi import (
    Edge,
    SweepOptions,
    compute_voronoi,
    get_default_options,
    parse_sites_text,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _format_text(edges: List[Edge]) -> str:
    lines = []
    for edge in edges:
        (x0, y0), (x1, y1) = edge.start, edge.end
        lines.append(
            f"{edge.site1.index} {edge.site2.index}: "
            f"({x0:.6f}, {y0:.6f}) -> ({x1:.6f}, {y1:.6f})"
        )
    return "\n".join(lines)


def _format_json(edges: List[Edge]) -> str:
    payload = [
        {
            "sites": [edge.site1.index, edge.site2.index],
            "start": list(edge.start),
            "end": list(edge.end),
        }
        for edge in edges
    ]
    return json.dumps({"edges": payload}, indent=2)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Compute a Voronoi diagram with Fortune's sweep")
    parser.add_argument("path", help="File with one 'x y' site per line")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--margin",
        type=float,
        help="Distance between the extreme sites and the sweep bounds (default: 1.0)",
    )
    parser.add_argument(
        "--keep-duplicates",
        action="store_true",
        help="Process sites with identical coordinates as distinct sites",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--output",
        help="Write the edges to this path instead of stdout",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Reading sites from %s", args.path)
    points = parse_sites_text(Path(args.path).read_text(encoding="utf-8"))

    options: SweepOptions = get_default_options()
    if args.margin is not None:
        options.margin = args.margin
    if args.keep_duplicates:
        options.merge_duplicates = False

    edges = compute_voronoi(points, options)
    rendered = _format_json(edges) if args.format == "json" else _format_text(edges)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing %d edge(s) to %s", len(edges), output_path)
        output_path.write_text(rendered + "\n", encoding="utf-8")
        print(f"Edges written to {output_path}")
    else:
        print(rendered)


if __name__ == "__main__":
    main(sys.argv[1:])
