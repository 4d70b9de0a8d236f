from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .config import configure_logging, get_seed
from .report import render_report
from .scoring import evaluate
from .simulation import SimulatedRegistry


logger = logging.getLogger(__name__)


def read_url_file(path: Path) -> List[str]:
    """One URL per line; blank lines and '#' comments are skipped."""
    urls = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        urls.append(line)
    return urls


def analyze_urls(urls: List[str], seed: int | None = None) -> List[Dict[str, Any]]:
    registry = SimulatedRegistry.seeded(seed)
    return [evaluate(u, registry) for u in urls]


def print_results(results: List[Dict[str, Any]], output_format: str) -> None:
    if output_format == "json":
        print(json.dumps(results, indent=2, ensure_ascii=True))
        return

    for i, result in enumerate(results):
        if i:
            print()
        print(render_report(result))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="PhishCheck - heuristic phishing URL analyzer"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the simulated registry data (default: PHISHCHECK_SEED or random)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: PHISHCHECK_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command")

    # analyze-url command
    url_parser = subparsers.add_parser(
        "analyze-url", help="Analyze a single URL"
    )
    url_parser.add_argument(
        "url",
        help="URL to analyze (scheme optional)",
    )

    # analyze-urls command (batch mode)
    urls_parser = subparsers.add_parser(
        "analyze-urls", help="Analyze multiple URLs (space-separated)"
    )
    urls_parser.add_argument(
        "urls",
        nargs="+",
        help="One or more URLs to analyze",
    )

    # analyze-file command
    file_parser = subparsers.add_parser(
        "analyze-file", help="Analyze every URL listed in a text file"
    )
    file_parser.add_argument(
        "path",
        type=Path,
        help="File with one URL per line",
    )

    for sub in (url_parser, urls_parser, file_parser):
        sub.add_argument(
            "--output-format",
            "--format",
            dest="output_format",
            choices=["text", "json"],
            default="text",
            help="Output format (default: text)",
        )

    args = parser.parse_args()
    configure_logging(args.log_level)

    seed = args.seed
    if seed is None:
        try:
            seed = get_seed()
        except ValueError as exc:
            parser.error(str(exc))

    if args.command == "analyze-url":
        results = analyze_urls([args.url], seed)

    elif args.command == "analyze-urls":
        results = analyze_urls(args.urls, seed)

    elif args.command == "analyze-file":
        if not args.path.exists():
            parser.error(f"URL file not found: {args.path}")
        urls = read_url_file(args.path)
        logger.info("Analyzing %d URLs from %s", len(urls), args.path)
        results = analyze_urls(urls, seed)

    else:
        parser.print_help()
        return

    print_results(results, args.output_format)


if __name__ == "__main__":
    main()
