#!/usr/bin/env python
"""
Generate gamma lookup tables as embeddable source code.

Formats:
  - c, rust, python  — constant array declarations
  - hex              — comma-separated hex values, 16 per line
  - npz              — compressed numpy archive (requires --output)

Usage:
    python scripts/generate_tables.py --spec "name: GAMMA, entry_type: u8, gamma: 2.2, size: 256"
    python scripts/generate_tables.py --name GAMMA --entry-type u16 --gamma 2.4 \\
        --size 1024 --max-value 1000 --decoding --format rust --output gamma.rs
"""

import argparse
import sys
from pathlib import Path

import numpy as np

from gammalut import ConfigError, GammaTable

FORMATS = ("c", "rust", "python", "hex", "npz")
TABLE_FLAGS = ("name", "entry_type", "gamma", "size", "max_value", "steps")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate gamma lookup tables")
    parser.add_argument(
        "--spec",
        help="Full configuration as an assignment string, e.g. 'name: T, entry_type: u8, gamma: 2.2, size: 256'",
    )
    parser.add_argument("--name", help="Identifier of the generated table")
    parser.add_argument("--entry-type", default=None, help="Unsigned entry type: u8, u16, u32, u64 (default: u8)")
    parser.add_argument("--gamma", type=float, help="Gamma value (must be positive)")
    parser.add_argument("--size", type=int, help="Number of table entries (at least 3)")
    parser.add_argument("--max-value", type=int, default=None, help="Largest output value (default: size-1)")
    parser.add_argument("--steps", type=int, default=None, help="Number of distinct quantized levels (default: size)")
    parser.add_argument("--decoding", action="store_true", help="Build a gamma correction table (x^(1/gamma))")
    parser.add_argument("--format", choices=FORMATS, default="c", help="Output format (default: c)")
    parser.add_argument("--per-line", type=int, default=None, help="Values per output line")
    parser.add_argument("--output", type=Path, default=None, help="Output file (default: stdout)")
    return parser


def make_table(args: argparse.Namespace) -> GammaTable:
    if args.spec:
        return GammaTable.from_string(args.spec)
    return GammaTable(
        name=args.name,
        entry_type=args.entry_type or "u8",
        gamma=args.gamma,
        size=args.size,
        max_value=args.max_value,
        steps=args.steps,
        decoding=args.decoding,
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.format == "npz" and args.output is None:
        parser.error("--format npz requires --output")

    if args.spec and (args.decoding or any(getattr(args, flag) is not None for flag in TABLE_FLAGS)):
        parser.error("--spec cannot be combined with individual table flags")

    try:
        table = make_table(args)
    except ConfigError as e:
        sys.stderr.write(f"error: {e}\n")
        return 2

    if args.format == "npz":
        args.output.parent.mkdir(parents=True, exist_ok=True)
        np.savez_compressed(args.output, **{table.name: table.values})
        print(f"Saved {table.name} ({len(table)} entries) to {args.output}")
        return 0

    try:
        source = table.to_source(args.format, per_line=args.per_line)
    except ValueError as e:
        sys.stderr.write(f"error: {e}\n")
        return 2

    if args.output is None:
        sys.stdout.write(source)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(source)
        print(f"Wrote {table.name} ({len(table)} entries) to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
