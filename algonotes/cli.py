"""Command line front end for the algorithms."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .bits import count_total_ones, is_palindrome_number, is_power_of_two
from .sequences import equilibrium_index
from .strings import longest_common_prefix, permutations


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algonotes")
    commands = parser.add_subparsers(dest="command", required=True)

    perms = commands.add_parser("permutations", help="list every permutation")
    perms.add_argument("string")

    power = commands.add_parser("power-of-two", help="check for a power of two")
    power.add_argument("num", type=int)

    ones = commands.add_parser("count-ones", help="count set bits from 0 to n")
    ones.add_argument("n", type=int)

    equilibrium = commands.add_parser("equilibrium", help="find an equilibrium index")
    equilibrium.add_argument("elements", nargs="*", type=int)

    prefix = commands.add_parser("prefix", help="longest common prefix")
    prefix.add_argument("strings", nargs="*")

    palindrome = commands.add_parser("palindrome", help="check a palindrome number")
    palindrome.add_argument("num", type=int)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one algorithm chosen on the command line and print its result."""
    args = _build_parser().parse_args(argv)

    if args.command == "permutations":
        print("All permutations are: ")
        for perm in permutations(args.string):
            print(perm)
    elif args.command == "power-of-two":
        verdict = "is" if is_power_of_two(args.num) else "is not"
        print(f"{args.num} {verdict} a power of two.")
    elif args.command == "count-ones":
        total = count_total_ones(args.n)
        print(
            "The total number of 1s in binary representation from 0 to "
            f"{args.n} is: {total}"
        )
    elif args.command == "equilibrium":
        index = equilibrium_index(args.elements)
        if index is None:
            print("No equilibrium index found.")
        else:
            print(f"Equilibrium index found at position: {index}")
    elif args.command == "prefix":
        result = longest_common_prefix(args.strings)
        if result:
            print(f"The longest common prefix is: {result}")
        else:
            print("There is no common prefix.")
    elif args.command == "palindrome":
        verdict = "is" if is_palindrome_number(args.num) else "is not"
        print(f"{args.num} {verdict} a palindrome.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())