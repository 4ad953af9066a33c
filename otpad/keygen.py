"""Generate random one-time pad keys."""

import random
import re
import sys

from otpad.cipher import ALPHABET

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text):
    """Read a leading integer from ``text`` the lenient way; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def generate_key(length, rng=None):
    """Return ``length`` random symbols drawn from the pad alphabet."""
    if length <= 0:
        raise ValueError("keylength must be a positive integer")
    rng = rng if rng is not None else random.Random()
    return "".join(ALPHABET[rng.randrange(len(ALPHABET))] for _ in range(length))


def main(argv=None):
    """Print a key of the requested length followed by a newline."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("USAGE: keygen keylength", file=sys.stderr)
        return 1
    try:
        key = generate_key(_parse_int(args[0]))
    except ValueError:
        print("Error: keylength must be a positive integer", file=sys.stderr)
        return 1
    sys.stdout.write(key + "\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())