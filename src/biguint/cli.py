"""
Command line front-end over the biguint engine.

    biguint add FFFE EAFE
    biguint shr 10 4
    biguint sqrt 11 --json

Operands are hex text, most significant digit first. The shift amount of
`shr` is a decimal bit count.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from biguint.core.contracts import validate_snapshot
from biguint.core.domain import BigUInt, BigUIntError
from biguint.core.math import (
    add,
    bit_and,
    bit_or,
    bit_xor,
    equals,
    is_zero,
    isqrt,
    mul,
    shr,
    sub,
    trim,
)
from biguint.display import print_hex, to_snapshot

logger = logging.getLogger(__name__)

BINARY_OPS = {
    "add": add,
    "sub": sub,
    "and": bit_and,
    "or": bit_or,
    "xor": bit_xor,
    "mul": mul,
}
UNARY_OPS = {
    "sqrt": isqrt,
}
PREDICATES = ("eq", "iszero")
ALL_OPS = tuple(BINARY_OPS) + tuple(UNARY_OPS) + ("shr", "trim") + PREDICATES


def parse_hex(text: str) -> BigUInt:
    """Hex text (most significant digit first) to a BigUInt."""
    digits = text.strip()
    if digits[:2].lower() == "0x":
        digits = digits[2:]
    if not digits:
        raise argparse.ArgumentTypeError(f"empty hex operand: {text!r}")
    if len(digits) % 2:
        digits = "0" + digits
    try:
        big_endian = bytes.fromhex(digits)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hex operand: {text!r}") from None
    return BigUInt.from_bytes(big_endian[::-1])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="biguint",
        description="Arbitrary-precision unsigned integer calculator (hex in, hex out).",
    )
    parser.add_argument("op", choices=ALL_OPS, help="operation")
    parser.add_argument("a", help="first operand (hex)")
    parser.add_argument("b", nargs="?", help="second operand (hex; decimal bit count for shr)")
    parser.add_argument("--raw", action="store_true", help="print the result without trimming")
    parser.add_argument("--json", action="store_true", help="print a JSON snapshot of the result")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser


def _emit(result: BigUInt, args: argparse.Namespace) -> None:
    if not args.raw:
        trim(result)
    if args.json:
        snapshot = to_snapshot(result)
        validate_snapshot(snapshot)
        sys.stdout.write(json.dumps(snapshot) + "\n")
    else:
        print_hex(result)


def run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    needs_b = args.op in BINARY_OPS or args.op in ("shr", "eq")
    if needs_b and args.b is None:
        parser.error(f"operation {args.op!r} requires two operands")
    if not needs_b and args.b is not None:
        parser.error(f"operation {args.op!r} takes a single operand")

    b = None
    try:
        a = parse_hex(args.a)
        if args.op == "shr":
            b = int(args.b, 10)
            if b < 0:
                raise ValueError(f"shift amount must be non-negative, got {b}")
        elif needs_b:
            b = parse_hex(args.b)
    except (argparse.ArgumentTypeError, ValueError) as exc:
        parser.error(str(exc))

    if args.op in PREDICATES:
        verdict = equals(a, b) if args.op == "eq" else is_zero(a)
        sys.stdout.write(("true" if verdict else "false") + "\n")
        return 0

    if args.op == "trim":
        trim(a)
        _emit(a, args)
        return 0

    with BigUInt() as result:
        try:
            if args.op in BINARY_OPS:
                BINARY_OPS[args.op](result, a, b)
            elif args.op == "shr":
                shr(result, a, b)
            else:
                UNARY_OPS[args.op](result, a)
        except BigUIntError as exc:
            logger.debug("operation %s failed", args.op, exc_info=True)
            sys.stderr.write(f"error: {exc}\n")
            return 1
        _emit(result, args)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(args, parser)


if __name__ == "__main__":
    raise SystemExit(main())
