from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from .config import ReconSettings
from .logging_setup import build_logger
from .page_model import build_page_model
from .report_writer import load_report, write_json_report, write_page_model
from .scanner import ScanError, scan_url
from .validation import InvalidUrlError, ReportFormatError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="domrecon", description="UI automation recon toolkit")
    subcommands = parser.add_subparsers(dest="command", required=True)

    scan = subcommands.add_parser("scan", help="Scan a URL and output a recon report")
    scan.add_argument("url", help="Target URL (http/https)")
    scan.add_argument("-o", "--output", type=Path, default=None, help="Output directory")
    scan.add_argument("--headed", action="store_true", default=None, help="Run browser in headed mode")

    gen = subcommands.add_parser("gen", help="Generate a page model from a recon report")
    gen.add_argument("-i", "--input", type=Path, required=True, help="Recon report JSON file")
    gen.add_argument("-o", "--output", type=Path, default=None, help="Output directory")
    gen.add_argument("--title", default=None, help="Page title to record in the model")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    if sys.version_info < (3, 11):
        raise SystemExit(
            "domrecon requires Python 3.11+. "
            f"Current interpreter: {sys.executable} (Python {sys.version.split()[0]})"
        )
    args = build_parser().parse_args(argv)

    settings = ReconSettings.from_env()
    if args.output is not None:
        settings = replace(settings, output_dir=args.output)
    if getattr(args, "headed", None):
        settings = replace(settings, headed=True)

    logger = build_logger(settings.log_dir, settings.log_level)

    try:
        if args.command == "scan":
            return _run_scan(args.url, settings)
        return _run_gen(args.input, args.title, settings)
    except (InvalidUrlError, ReportFormatError, ScanError, OSError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(str(exc), file=sys.stderr)
        return 1


def _run_scan(url: str, settings: ReconSettings) -> int:
    print(f"[recon] scanning: {url}")
    result = scan_url(url, settings)
    if result.title:
        print(f"[recon] title: {result.title}")
    out_path = write_json_report(settings.output_dir, result.report)
    print(f"[recon] wrote report: {out_path}")
    print(f"[recon] counts: {result.report.counts}")
    return 0


def _run_gen(input_path: Path, title: str | None, settings: ReconSettings) -> int:
    report = load_report(input_path)
    model = build_page_model(report, title=title)
    out_path = write_page_model(settings.output_dir, model)
    print(f"[gen] page model written to {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
