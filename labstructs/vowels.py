"""Copy a text file leaving out the lowercase vowels."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence, Union

VOWELS = frozenset("aeiou")

PathLike = Union[str, "os.PathLike[str]"]


def strip_vowels(text: str) -> str:
    """Return ``text`` without the characters a, e, i, o, u."""
    return "".join(ch for ch in text if ch not in VOWELS)


def copy_without_vowels(source: PathLike, target: PathLike) -> int:
    """Copy ``source`` to ``target`` dropping lowercase vowels.

    Returns the number of characters written.
    """
    with open(source, encoding="utf-8", newline="") as reader:
        text = reader.read()
    stripped = strip_vowels(text)
    with open(target, "w", encoding="utf-8", newline="") as writer:
        writer.write(stripped)
    return len(stripped)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Copy a file without vowels, asking for the names if not given."""
    parser = argparse.ArgumentParser(
        prog="labstructs-vowels", description="Copy a file without lowercase vowels."
    )
    parser.add_argument("source", nargs="?")
    parser.add_argument("target", nargs="?")
    args = parser.parse_args(argv)

    try:
        source = args.source or input("Name of the file to copy from: ")
        target = args.target or input("Name of the file to copy to: ")
    except EOFError:
        print("ERROR", file=sys.stderr)
        return 1

    try:
        copy_without_vowels(source, target)
    except OSError:
        print("ERROR", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())