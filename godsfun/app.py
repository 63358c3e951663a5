"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting and return the exit status."""
    parser = argparse.ArgumentParser(prog="godsfun")
    parser.parse_args(argv)
    print("Hello World!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())