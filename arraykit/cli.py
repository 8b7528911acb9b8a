"""Command-line entry point for the array operations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from arraykit import frequency, stats, transform


def _joined(values: Sequence[int]) -> str:
    return " ".join(str(value) for value in values)


def _cmd_sum(values: list[int], _args: argparse.Namespace) -> list[str]:
    return [f"SUM OF THE ELEMENTS OF THE ARRAY: {stats.total(values)}"]


def _cmd_largest(values: list[int], _args: argparse.Namespace) -> list[str]:
    return [f"MAXIMUM ELEMENT={stats.largest(values)}"]


def _cmd_smallest(values: list[int], _args: argparse.Namespace) -> list[str]:
    return [f"MINIMUM ELEMENT={stats.smallest(values)}"]


def _cmd_second(values: list[int], _args: argparse.Namespace) -> list[str]:
    low, high = stats.second_smallest_and_largest(values)
    return [f"SECOND MINIMUM ELEMENT={low}", f"SECOND MAXIMUM ELEMENT={high}"]


def _cmd_median(values: list[int], _args: argparse.Namespace) -> list[str]:
    return [f"THE MEDIAN OF THE ARRAY IS: {stats.median(values):g}"]


def _cmd_max_product(values: list[int], _args: argparse.Namespace) -> list[str]:
    return [f"THE MAXIMUM PRODUCT SUBARRAY IS: {stats.max_product_subarray(values)}"]


def _cmd_equilibrium(values: list[int], _args: argparse.Namespace) -> list[str]:
    index = stats.equilibrium_index(values)
    if index < 0:
        return ["There is no equilibrium index in the array."]
    return [f"The equilibrium index is: {index}"]


def _cmd_reverse(values: list[int], _args: argparse.Namespace) -> list[str]:
    return [_joined(transform.reverse(values))]


def _cmd_rotate(values: list[int], args: argparse.Namespace) -> list[str]:
    return [_joined(transform.rotate_right(values, args.k))]


def _cmd_sort(values: list[int], _args: argparse.Namespace) -> list[str]:
    return [
        f"SORTED ARRAY IN DESCENDING ORDER: {_joined(transform.sort_descending(values))}",
        f"SORTED ARRAY IN ASCENDING ORDER: {_joined(transform.sort_ascending(values))}",
    ]


def _cmd_dedupe(values: list[int], _args: argparse.Namespace) -> list[str]:
    return [_joined(transform.remove_duplicates(values))]


def _cmd_freq(values: list[int], _args: argparse.Namespace) -> list[str]:
    return [f"{value}->{count}" for value, count in frequency.frequencies(values).items()]


def _cmd_repeating(values: list[int], _args: argparse.Namespace) -> list[str]:
    repeating, non_repeating = frequency.split_repeating(values)
    return [
        f"REPEATING ELEMENTS: {_joined(repeating)}",
        f"NON-REPEATING ELEMENTS: {_joined(non_repeating)}",
    ]


def _cmd_sort_freq(values: list[int], _args: argparse.Namespace) -> list[str]:
    return ["ARRAY SORTED BY FREQUENCY: ", _joined(frequency.sort_by_frequency(values))]


def _cmd_rank(values: list[int], _args: argparse.Namespace) -> list[str]:
    lines = ["RANK OF ELEMENTS IN THE ARRAY: "]
    for index, (value, rank) in enumerate(zip(values, frequency.ranks(values))):
        lines.append(f"Rank({value}) = {rank} (at index {index})")
    return lines


def _cmd_symmetric(values: list[int], _args: argparse.Namespace) -> list[str]:
    if len(values) % 2:
        raise ValueError("symmetric pairs need an even number of values")
    pairs = list(zip(values[::2], values[1::2]))
    found = frequency.symmetric_pairs(pairs)
    rendered = " ".join(f"[{a}, {b}]" for a, b in found)
    return [f"Symmetric Pairs are: {rendered}"]


_Handler = Callable[[list[int], argparse.Namespace], list[str]]

_COMMANDS: dict[str, tuple[_Handler, str]] = {
    "sum": (_cmd_sum, "sum of the elements"),
    "largest": (_cmd_largest, "largest element"),
    "smallest": (_cmd_smallest, "smallest element"),
    "second": (_cmd_second, "second smallest and second largest elements"),
    "median": (_cmd_median, "median of the elements"),
    "max-product": (_cmd_max_product, "maximum product of a contiguous subarray"),
    "equilibrium": (_cmd_equilibrium, "first equilibrium index"),
    "reverse": (_cmd_reverse, "reverse the elements"),
    "rotate": (_cmd_rotate, "rotate the elements right by K"),
    "sort": (_cmd_sort, "sort descending and ascending"),
    "dedupe": (_cmd_dedupe, "remove duplicate elements"),
    "freq": (_cmd_freq, "frequency of each element"),
    "repeating": (_cmd_repeating, "repeating and non-repeating elements"),
    "sort-freq": (_cmd_sort_freq, "sort by descending frequency"),
    "rank": (_cmd_rank, "rank of each element"),
    "symmetric": (_cmd_symmetric, "symmetric pairs from consecutive values"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arraykit",
        description="Array operations on integers. Values come from the command "
        "line or, when none are given, from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_handler, help_text) in _COMMANDS.items():
        sub = commands.add_parser(name, help=help_text)
        if name == "rotate":
            sub.add_argument("k", type=int, help="number of positions")
        sub.add_argument("values", nargs="*", type=int, help="integer elements")
    return parser


def _read_stdin_values() -> list[int]:
    return [int(token) for token in sys.stdin.read().split()]


def main(argv: Sequence[str] | None = None) -> int:
    """Run one array operation and print its result."""
    args = _build_parser().parse_args(argv)
    handler, _help = _COMMANDS[args.command]
    try:
        values = args.values if args.values else _read_stdin_values()
        lines = handler(values, args)
    except ValueError as error:
        print(f"arraykit: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())