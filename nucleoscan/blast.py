"""A k-mer seeded search of a query against a sequence database."""

from __future__ import annotations

import math
import re
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable

MISMATCH_BASES = frozenset("acgt")
MAX_MERGE_GAP = 10


def mismatch_count(sequence: str) -> int:
    """Count lower-case bases, which mark mismatches in a consensus."""
    return sum(1 for base in sequence if base in MISMATCH_BASES)


def match_percent(db_seq: str, query_seq: str) -> tuple[str, float]:
    """Mark mismatches with ``*`` in the query and return it with the mismatch ratio.

    Each mismatch inserts a ``*`` at the current position, shifting the rest of
    the query; positions past its end count as mismatches.
    """
    marked = list(query_seq)
    mismatches = 0
    for position, base in enumerate(db_seq):
        current = marked[position] if position < len(marked) else None
        if current != base:
            mismatches += 1
            marked.insert(position, "*")
    result = "".join(marked)
    ratio = mismatches / len(result) if result else math.nan
    return result, ratio


@dataclass(frozen=True)
class Hit:
    """A consolidated match between the query and one database sequence.

    Positions are zero-based and inclusive. In ``consensus`` lower-case bases
    are database bases bridging a gap between merged segments.
    """

    seq_index: int
    db_start: int
    db_end: int
    query_start: int
    query_end: int
    db_sequence: str
    consensus: str
    query_sequence: str
    seeds: tuple[str, ...]

    def identities(self) -> int:
        """Number of consensus bases that are not mismatches."""
        return len(self.consensus) - mismatch_count(self.consensus)

    def identity_percent(self) -> float:
        """Identities as a percentage of the matched query length."""
        return self.identities() / len(self.query_sequence) * 100

    def coverage_percent(self, query_length: int) -> float:
        """Identities as a percentage of the whole query."""
        return self.identities() / query_length * 100


@dataclass
class _Segment:
    pos: int
    seq: int
    count: int = 1


class KmerDatabase:
    """Index of every k-mer in a set of sequences, by position."""

    def __init__(self, sequences: Iterable[str], kmer_size: int) -> None:
        if kmer_size < 1:
            raise ValueError(f"k-mer size must be positive, got {kmer_size}")
        self.sequences = list(sequences)
        self.kmer_size = kmer_size
        self._index: dict[str, list[tuple[int, int]]] = defaultdict(list)
        for seq_index, sequence in enumerate(self.sequences):
            for pos in range(len(sequence) - kmer_size + 1):
                self._index[sequence[pos : pos + kmer_size]].append((pos, seq_index))

    def _seeds(self, query: str) -> list[tuple[int, int]]:
        k = self.kmer_size
        seeds = [
            location
            for start in range(len(query) - k + 1)
            for location in self._index.get(query[start : start + k], ())
        ]
        seeds.sort(key=lambda location: location[1])
        return seeds

    @staticmethod
    def _runs(seeds: list[tuple[int, int]]) -> list[_Segment]:
        runs: list[_Segment] = []
        previous: tuple[int, int] | None = None
        for pos, seq in seeds:
            if previous is not None and previous[1] == seq and pos == previous[0] + 1:
                runs[-1].count += 1
            else:
                runs.append(_Segment(pos, seq))
            previous = (pos, seq)
        return runs

    def search(self, query: str) -> list[Hit]:
        """Find and consolidate the regions shared by the query and the database."""
        k = self.kmer_size
        runs = self._runs(self._seeds(query))

        segments = []
        for run in runs:
            source = self.sequences[run.seq]
            text = source[run.pos : run.pos + k + run.count - 1]
            last = run.pos + k + run.count - 2
            seed = source[run.pos : run.pos + k]
            segments.append((run, text, last, seed))

        positions = [
            (found.start(), found.start() + len(text) - 1)
            for _, text, _, _ in segments
            for found in re.finditer(re.escape(text), query)
        ]
        count = min(len(segments), len(positions))

        hits: list[Hit] = []
        consensus: list[str] = []
        matched: list[str] = []
        seeds: list[str] = []
        first = 0
        for i in range(count):
            run, text, last, seed = segments[i]
            query_end = positions[i][1]
            consensus.append(text)
            matched.append(text)
            seeds.append(seed)
            if i + 1 < count:
                following = segments[i + 1][0]
                next_query_start = positions[i + 1][0]
                gap = next_query_start - query_end
                if (
                    gap < MAX_MERGE_GAP
                    and run.seq == following.seq
                    and following.pos - last == gap
                ):
                    matched.append(query[query_end:next_query_start])
                    consensus.append(
                        self.sequences[run.seq][last : following.pos + 1].lower()
                    )
                    continue
            head = segments[first][0]
            hits.append(
                Hit(
                    seq_index=run.seq,
                    db_start=head.pos,
                    db_end=last,
                    query_start=positions[first][0],
                    query_end=query_end,
                    db_sequence=self.sequences[run.seq][head.pos : last + 1],
                    consensus="".join(consensus),
                    query_sequence="".join(matched),
                    seeds=tuple(seeds),
                )
            )
            consensus, matched, seeds = [], [], []
            first = i + 1
        return hits