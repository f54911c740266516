"""Command line entry point running the generator diagnostics."""

import argparse
import sys

from .diagnostics import (
    all_sample_values,
    format_all_sample_values,
    histogram,
    render_histogram,
    sample_bits,
    sample_values,
    uniform_report,
)
from .generator import Generator

_DEFAULT_COUNTS = {
    "histogram": 100000,
    "uniform": 100000000,
    "values": 100,
    "bits": 100,
    "all": 50,
    "specific": 1000,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fsrand", description="Inspect the generator's output.")
    parser.add_argument("mode", nargs="?", default="histogram", choices=sorted(_DEFAULT_COUNTS))
    parser.add_argument("--count", type=int, help="number of values to draw")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--mean", type=float, default=10.0, help="mean of the sampled exponential")
    parser.add_argument("--low", type=float, default=0.0)
    parser.add_argument("--high", type=float, default=40.0)
    parser.add_argument("--bars", type=int, default=160)
    return parser


def _run(args: argparse.Namespace) -> str:
    rng = Generator(args.seed)
    n = args.count if args.count is not None else _DEFAULT_COUNTS[args.mode]
    if args.mode == "uniform":
        return uniform_report(rng, n).format()
    if args.mode == "values":
        return f"{n} sample values:\n" + "".join(f"{v}\n" for v in sample_values(rng, n)) + "\n"
    if args.mode == "bits":
        return f"{n} sample values as bits:\n" + "".join(f"{b}\n" for b in sample_bits(rng, n)) + "\n"
    if args.mode == "all":
        return format_all_sample_values(all_sample_values(rng, n))
    if args.mode == "specific":
        return "".join(f"{rng.exponential(args.mean):f} " for _ in range(n)) + "\n\n"
    values = (rng.exponential(args.mean) for _ in range(n))
    counts, total, seen = histogram(values, args.low, args.high, args.bars)
    return render_histogram(counts, total, seen, args.low, args.high)


def main(argv: list[str] | None = None) -> int:
    """Run the selected diagnostic and print its output."""
    args = _parser().parse_args(argv)
    try:
        output = _run(args)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())