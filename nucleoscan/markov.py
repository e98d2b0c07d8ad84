"""Codon-transition Markov model separating coding from non-coding sequence."""

from __future__ import annotations

import math
from collections import Counter, defaultdict
from typing import Iterable, Mapping

DEFAULT_CUTOFF = -0.002
OPEN_READING_FRAME = "Open Reading Frame"
NON_OPEN_READING_FRAME = "Non-Open Reading Frame"

Transition = tuple[str, str]
Matrix = dict[str, dict[str, float]]


def codon_transitions(sequence: str) -> list[Transition]:
    """Return the (codon, following codon) pairs, stepping one codon at a time."""
    return [
        (sequence[i : i + 3], sequence[i + 3 : i + 6])
        for i in range(0, len(sequence) - 5, 3)
    ]


def count_transitions(sequences: Iterable[str]) -> Counter[Transition]:
    """Count every codon transition across the sequences."""
    counts: Counter[Transition] = Counter()
    for sequence in sequences:
        counts.update(codon_transitions(sequence))
    return counts


def transition_probabilities(counts: Mapping[Transition, int]) -> Matrix:
    """Turn transition counts into per-codon proportions.

    Rows are keyed by the source codon, columns by every target codon seen;
    transitions never observed from a codon get a proportion of zero.
    """
    totals: defaultdict[str, int] = defaultdict(int)
    for (source, _), count in counts.items():
        totals[source] += count
    targets = sorted({target for _, target in counts})
    return {
        source: {target: counts.get((source, target), 0) / totals[source] for target in targets}
        for source in sorted(totals)
        if totals[source] > 0
    }


def _smallest_nonzero(matrix: Matrix) -> float:
    return min(p for row in matrix.values() for p in row.values() if p != 0)


def classify(score: float, cutoff: float = DEFAULT_CUTOFF) -> str:
    """Name the prediction for a length-normalised score."""
    return OPEN_READING_FRAME if score >= cutoff else NON_OPEN_READING_FRAME


class MarkovModel:
    """Log-odds codon-transition scores trained on non-coding and coding sequences."""

    def __init__(self, noncoding: Iterable[str], coding: Iterable[str]) -> None:
        self.noncoding = transition_probabilities(count_transitions(noncoding))
        self.coding = transition_probabilities(count_transitions(coding))
        if not self.noncoding or not self.coding:
            raise ValueError("both training sets need at least one codon transition")
        self.noncoding_floor = _smallest_nonzero(self.noncoding) / 2
        self.coding_floor = _smallest_nonzero(self.coding) / 2
        self.scores: dict[Transition, float] = self._build_scores()

    def _build_scores(self) -> dict[Transition, float]:
        floor = min(self.noncoding_floor, self.coding_floor)
        scores: dict[Transition, float] = {}
        for source, row in self.noncoding.items():
            coding_row = self.coding.get(source, {})
            for target, noncoding_p in row.items():
                coding_p = coding_row.get(target, 0.0)
                if noncoding_p == 0 and coding_p != 0:
                    value = math.log2(self.coding_floor)
                elif coding_p == 0 and noncoding_p != 0:
                    # The non-coding proportion is kept unchanged here.
                    value = noncoding_p
                elif coding_p == 0 and noncoding_p == 0:
                    value = floor
                else:
                    value = math.log2(coding_p / noncoding_p)
                scores[(source, target)] = value
        return scores

    def score(self, sequence: str) -> float:
        """Sum the transition scores of a sequence; unknown transitions add nothing."""
        return sum(self.scores.get(pair, 0.0) for pair in codon_transitions(sequence))

    def normalized_score(self, sequence: str) -> float:
        """Score divided by the sequence length."""
        if not sequence:
            raise ValueError("cannot score an empty sequence")
        return self.score(sequence) / len(sequence)

    def transitions_from(self, codon: str, coding: bool = False) -> dict[str, float]:
        """Return the transition proportions out of ``codon`` in one training set."""
        matrix = self.coding if coding else self.noncoding
        try:
            return dict(matrix[codon])
        except KeyError:
            raise KeyError(f"codon not found or invalid: {codon}") from None