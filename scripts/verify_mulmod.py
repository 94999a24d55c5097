#!/usr/bin/env python3
"""
Produce (or load) a long-form multiplication witness and verify it.

Without `--witness`, operands are drawn from a seeded PRNG and an honest witness
is generated for the fixed 2048-bit modulus.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from errors import MalformedWitness  # short or oversized bundle file
from mulmod_verifier import verify_witness  # accept/reject driver
from params import DEFAULT_PARAMS  # fixed modulus + layout
from perf_trace import PerfTrace  # stage timing report
from witness import Witness  # bundle codec
from witness_gen import random_witness  # reference producer


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    ap.add_argument("--seed", type=int, default=0, help="PRNG seed for generated operands")
    ap.add_argument("--witness", type=pathlib.Path, help="read a serialized witness bundle instead")
    ap.add_argument("--write-witness", type=pathlib.Path, help="write the witness bundle that was verified")
    ap.add_argument("--workers", type=int, default=None, help="threads for the six checksum evaluations")
    ap.add_argument("--trace", action="store_true", help="print the stage timing report")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if args.witness is not None:
        try:
            witness = Witness.from_bytes(args.witness.read_bytes(), DEFAULT_PARAMS)
        except (MalformedWitness, OSError) as e:
            print(f"rejected: {getattr(e, 'reason', 'unreadable witness')} ({e})")
            return 1
    else:
        _, _, witness = random_witness(args.seed, DEFAULT_PARAMS)
    if args.write_witness is not None:
        args.write_witness.write_bytes(witness.to_bytes())

    tracer = PerfTrace()
    result = verify_witness(witness, DEFAULT_PARAMS, workers=args.workers, tracer=tracer)
    if args.trace:
        print(tracer.report(), end="")
    if not result.accepted:
        print(f"rejected: {result.reason} ({result.error})")
        return 1
    print(f"res = {result.remainder}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
