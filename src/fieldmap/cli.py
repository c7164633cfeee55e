# src/fieldmap/cli.py
"""
Command line entry point: `fieldmap [SEED]`.

Prints one map to stdout.  Without SEED the current time is used.  Log output
goes to stderr; set FIELDMAP_LOG_LEVEL=DEBUG to see per-stage details.
"""

import argparse
import logging
import os
import re
import sys
from typing import Optional, Sequence

from .mapgen.generator import generate_map
from .rng import SEED_MASK, seed_from_time

_LEADING_DIGITS = re.compile(r"\s*\+?(\d+)")

def parse_seed(text: str) -> int:
    """
    Lenient unsigned parse: leading decimal digits are used, anything after
    them is ignored, and no digits at all means 0.  Reduced to 32 bits.
    """
    m = _LEADING_DIGITS.match(text)
    if not m:
        return 0
    return int(m.group(1)) & SEED_MASK

def setup_logging() -> None:
    level = os.getenv("FIELDMAP_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="fieldmap", description="Generate an ASCII field map.")
    ap.add_argument("seed", nargs="?", default=None, help="unsigned integer seed (default: current time)")
    args = ap.parse_args(argv)

    setup_logging()
    seed = seed_from_time() if args.seed is None else parse_seed(args.seed)
    logging.getLogger(__name__).info("seed %d", seed)

    m = generate_map(seed)
    sys.stdout.write(m.render())
    return 0

if __name__ == "__main__":
    sys.exit(main())
