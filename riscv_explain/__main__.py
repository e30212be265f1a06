#!/usr/bin/env python3
"""
RISC-V Explain - Command Line Interface

Usage:
    python3 -m riscv_explain "add t0, t1, t2"
    python3 -m riscv_explain -f program.S --format json
    python3 -m riscv_explain --list
"""

import argparse
import json
import sys
from pathlib import Path

import yaml

from . import __version__
from .explainer import Explainer, is_error
from .instructions import INSTRUCTIONS

OUTPUT_FORMATS = ("text", "json", "yaml")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="riscv_explain",
        description="Explain RISC-V assembly instructions in plain English",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "add t0, t1, t2"
  %(prog)s "lw t0, 4(sp)" "jal ra, loop" --format yaml
  %(prog)s -f programs/test_alu.S -v
  echo "lui t0, 5" | %(prog)s
        """,
    )

    parser.add_argument(
        "lines",
        nargs="*",
        help="Instruction lines to explain. If none are given and no file is "
        "specified, lines are read from stdin.",
    )

    parser.add_argument(
        "-f",
        "--file",
        type=str,
        help="Read instruction lines from a file; each line is explained on its own",
    )

    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List supported instructions and exit",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any line could not be explained",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def format_listing() -> str:
    """One row per supported instruction: mnemonic, format tag, summary."""
    rows = []
    for mnemonic, spec in INSTRUCTIONS.items():
        rows.append(f"{mnemonic:<8} {spec.format.value}  {spec.summary}")
    return "\n".join(rows)


def format_results(results, output_format: str) -> str:
    """Render (line, explanation) pairs in the requested output format."""
    if output_format == "json":
        records = [{"line": line, "explanation": text} for line, text in results]
        return json.dumps(records, indent=2, ensure_ascii=False)

    if output_format == "yaml":
        records = [{"line": line, "explanation": text} for line, text in results]
        return yaml.safe_dump(records, sort_keys=False, allow_unicode=True).rstrip("\n")

    if len(results) == 1:
        return results[0][1]
    return "\n".join(f"{line.strip()} -> {text}" for line, text in results)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        print(format_listing())
        return 0

    lines = list(args.lines)

    if args.file:
        input_path = Path(args.file)
        if not input_path.exists():
            print(f"Error: Input file not found: {args.file}", file=sys.stderr)
            return 1
        lines.extend(input_path.read_text(encoding="utf-8").splitlines())
    elif not lines:
        lines = sys.stdin.read().splitlines()

    explainer = Explainer(verbose=args.verbose)
    results = explainer.explain_lines(lines)

    if results:
        print(format_results(results, args.format))

    failed = sum(1 for _, text in results if is_error(text))
    if args.verbose:
        print(f"\nExplained {len(results) - failed} of {len(results)} lines", file=sys.stderr)

    if args.strict and failed:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
