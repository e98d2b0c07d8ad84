"""Command line and report writers for the codon-transition gene finder."""

from __future__ import annotations

import argparse
import sys
from os import PathLike
from typing import Iterable, Mapping, Sequence, Union

from nucleoscan.fasta import orient, read_records
from nucleoscan.markov import DEFAULT_CUTOFF, MarkovModel, classify

PathType = Union[str, PathLike]


def write_known_scores(
    path: PathType,
    noncoding_scores: Iterable[float],
    coding_scores: Iterable[float],
) -> None:
    """Write the scores of the training sequences as CSV, non-coding first."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write("Known,Score,\n")
        for score in noncoding_scores:
            handle.write(f"NORF,{score:g}\n")
        for score in coding_scores:
            handle.write(f"ORF,{score:g}\n")


def _prediction_lines(
    names: Sequence[str], scores: Sequence[float], cutoff: float
) -> list[str]:
    return [
        f"{name}: Predicted: {classify(score, cutoff)}, score = {score:g}"
        for name, score in zip(names, scores)
    ]


def write_predictions(
    path: PathType,
    names: Sequence[str],
    scores: Sequence[float],
    cutoff: float = DEFAULT_CUTOFF,
) -> None:
    """Write one prediction line per named score, framed by a header and footer."""
    lines = [
        "Predictions for tested sequences: ",
        *_prediction_lines(names, scores, cutoff),
        f"Thank you for using my Reading Frame Finder! [Cutoff = {cutoff:f}] ",
    ]
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write("".join(line + "\n" for line in lines))


def write_matrix(path: PathType, matrix: Mapping[str, Mapping[str, float]]) -> None:
    """Write a transition matrix as CSV; every cell is followed by a comma.

    The header row names the source codons, one per row of the matrix.
    """
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(" ," + "".join(f"{codon}," for codon in matrix) + "\n")
        for codon, row in matrix.items():
            cells = "".join(f"{value:g}," for value in row.values())
            handle.write(f"{codon},{cells}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Train on non-coding and coding FASTA files, then classify test sequences."""
    parser = argparse.ArgumentParser(
        prog="nucleoscan-genefind",
        description="Predict open reading frames with a codon-transition Markov model.",
    )
    parser.add_argument("noncoding", help="FASTA file of known non-coding sequences")
    parser.add_argument("coding", help="FASTA file of known coding sequences")
    parser.add_argument("test", help="FASTA file of sequences to classify")
    parser.add_argument("--known-scores", metavar="CSV", help="write training scores here")
    parser.add_argument("--predictions", metavar="TXT", help="write predictions here")
    parser.add_argument("--noncoding-matrix", metavar="CSV", help="write the NORF matrix here")
    parser.add_argument("--coding-matrix", metavar="CSV", help="write the ORF matrix here")
    parser.add_argument(
        "--cutoff", type=float, default=DEFAULT_CUTOFF, help="score threshold for a coding call"
    )
    args = parser.parse_args(argv)

    inputs = {}
    for label, path in (("NORF", args.noncoding), ("ORF", args.coding), ("test", args.test)):
        try:
            inputs[label] = read_records(path)
        except OSError as error:
            print(f"[ERROR] Error opening {label} file {path}: {error}", file=sys.stderr)
            return 1

    noncoding = orient(inputs["NORF"])
    coding = orient(inputs["ORF"])
    tests = inputs["test"]

    try:
        model = MarkovModel(
            [record.sequence for record in noncoding],
            [record.sequence for record in coding],
        )
        noncoding_scores = [model.normalized_score(r.sequence) for r in noncoding]
        coding_scores = [model.normalized_score(r.sequence) for r in coding]
        test_scores = [model.normalized_score(r.sequence) for r in tests]
    except ValueError as error:
        print(f"[ERROR] {error}", file=sys.stderr)
        return 1

    names = [record.name for record in tests]
    for line in _prediction_lines(names, test_scores, args.cutoff):
        print(line)

    try:
        if args.known_scores:
            write_known_scores(args.known_scores, noncoding_scores, coding_scores)
        if args.predictions:
            write_predictions(args.predictions, names, test_scores, args.cutoff)
        if args.noncoding_matrix:
            write_matrix(args.noncoding_matrix, model.noncoding)
        if args.coding_matrix:
            write_matrix(args.coding_matrix, model.coding)
    except OSError as error:
        print(f"[ERROR] cannot write output: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())