"""Pairwise nucleotide alignment with an affine gap penalty."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

GAP = "-"


def affine_gap_penalty(gap_open: int, gap_extend: int, gap_len: int) -> int:
    """Return the penalty for a gap that has already run ``gap_len`` cells."""
    return gap_open + gap_extend * gap_len


def align(
    seq1: str,
    seq2: str,
    mismatch: int,
    gap_open: int,
    gap_extend: int,
    match: int,
) -> tuple[str, str]:
    """Fill the scoring table and return the two aligned strings.

    Every cell of the table contributes one column to the output, so both
    strings are ``len(seq1) * len(seq2)`` characters long. The gap length
    carries over from cell to cell and resets whenever the diagonal wins.
    Identical characters score as a match, all others as a mismatch.
    """
    rows, cols = len(seq1), len(seq2)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for col in range(1, cols + 1):
        table[0][col] = gap_open + gap_extend * (col - 1)
    for row in range(1, rows + 1):
        table[row][0] = gap_open + gap_extend * (row - 1)

    top: list[str] = []
    bottom: list[str] = []
    gap_len = 0
    for row, base1 in enumerate(seq1, start=1):
        for col, base2 in enumerate(seq2, start=1):
            penalty = affine_gap_penalty(gap_open, gap_extend, gap_len)
            up = table[row - 1][col] + penalty
            diagonal = table[row - 1][col - 1] + (match if base1 == base2 else mismatch)
            left = table[row][col - 1] + penalty
            if diagonal >= up and diagonal >= left:
                table[row][col] = diagonal
                gap_len = 0
                top.append(base1)
                bottom.append(base2)
                continue
            table[row][col] = max(up, left)
            gap_len += 1
            if up > left:
                top.append(base1)
                bottom.append(GAP)
            else:
                top.append(GAP)
                bottom.append(base2)
    return "".join(top), "".join(bottom)


def _read_pair(path: str) -> tuple[tuple[str, str], tuple[str, str]]:
    with open(path, encoding="utf-8") as handle:
        lines = handle.read().splitlines()
    lines += [""] * (4 - len(lines))
    name1, seq1, name2, seq2 = lines[:4]
    return (name1[1:], seq1), (name2[1:], seq2)


def main(argv: Sequence[str] | None = None) -> int:
    """Align the first two sequences of a FASTA file and print the result."""
    parser = argparse.ArgumentParser(
        prog="nucleoscan-align",
        description="Align two nucleic acid sequences read from a FASTA file.",
    )
    parser.add_argument("fasta", help="file holding two FASTA records")
    parser.add_argument("--gap-open", type=int, required=True, help="initial gap penalty")
    parser.add_argument("--gap-extend", type=int, required=True, help="gap extension penalty")
    parser.add_argument("--mismatch", type=int, required=True, help="mismatch penalty")
    parser.add_argument("--match", type=int, required=True, help="positive match score")
    parser.add_argument(
        "--protein",
        action="store_true",
        help="request a protein alignment (not supported)",
    )
    args = parser.parse_args(argv)

    if args.protein:
        print("This application does not support Amino Acid alignment, exiting now.")
        return 0

    try:
        (name1, seq1), (name2, seq2) = _read_pair(args.fasta)
    except OSError as error:
        print(f"[ERROR] cannot read {args.fasta}: {error}", file=sys.stderr)
        return 1

    print("Here are your sequences:")
    print(f"{name1}: {seq1}")
    print(f"{name2}: {seq2}")
    top, bottom = align(seq1, seq2, args.mismatch, args.gap_open, args.gap_extend, args.match)
    print(top)
    print(bottom)
    return 0


if __name__ == "__main__":
    sys.exit(main())