"""FASTA reading helpers shared by the search, alignment and gene-finding tools."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from os import PathLike
from typing import Iterable, Union

BASES = frozenset("ACGT")
COUNTERCLOCKWISE = "Counterclockwise"

_COMPLEMENT = {"A": "T", "T": "A", "C": "G"}
_RUN = re.compile(r"[ACGT]+")

PathType = Union[str, PathLike]


@dataclass(frozen=True)
class Record:
    """A named nucleotide sequence."""

    name: str
    sequence: str


def merge_lines(lines: Iterable[str]) -> list[str]:
    """Collapse FASTA lines into alternating header and joined-sequence entries.

    Every header after the first is preceded by the sequence gathered since the
    previous header, even when that sequence is empty.
    """
    lines = list(lines)
    merged: list[str] = []
    pending: list[str] = []
    last = len(lines) - 1
    for position, line in enumerate(lines):
        if line.startswith(">"):
            if position != 0:
                merged.append("".join(pending))
                pending.clear()
            merged.append(line)
        elif position == last:
            pending.append(line)
            merged.append("".join(pending))
        else:
            pending.append(line)
    return merged


def is_sequence(text: str) -> bool:
    """Return True when every character is an upper-case A, C, G or T."""
    return all(char in BASES for char in text)


def parse_records(lines: Iterable[str]) -> list[Record]:
    """Parse FASTA lines into records, dropping sequences with foreign characters."""
    merged = merge_lines(lines)
    valid = [is_sequence(entry) for entry in merged]
    sequences = [entry for entry, ok in zip(merged[1:], valid[1:]) if ok]
    names = [
        entry
        for entry, ok, next_ok in zip(merged, valid, valid[1:])
        if not ok and next_ok
    ]
    return [
        Record(name.removeprefix(">"), sequence)
        for name, sequence in zip(names, sequences)
    ]


def _read_lines(path: PathType) -> list[str]:
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.replace("\r", "") for line in lines]


def read_records(path: PathType) -> list[Record]:
    """Read a FASTA file into records."""
    return parse_records(_read_lines(path))


def reverse_complement(sequence: str) -> str:
    """Return the reverse complement; any base other than A, T or C pairs with C."""
    return "".join(_COMPLEMENT.get(base, "C") for base in reversed(sequence))


def orient(records: Iterable[Record]) -> list[Record]:
    """Replace counterclockwise-strand sequences by their reverse complement."""
    return [
        replace(record, sequence=reverse_complement(record.sequence))
        if COUNTERCLOCKWISE in record.name
        else record
        for record in records
    ]


def database_sequences(chars: Iterable[str]) -> list[str]:
    """Split a character stream into runs of bases.

    The final character always closes the last entry, whatever it is.
    """
    buffer = "".join(chars)
    if not buffer:
        return []
    body, last = buffer[:-1], buffer[-1]
    runs = _RUN.findall(body)
    if runs and last in BASES and body[-1] in BASES:
        tail = runs.pop() + last
    else:
        tail = last
    runs.append(tail)
    return runs


def clean_query(chars: Iterable[str]) -> str:
    """Keep only the A, C, G and T characters."""
    return "".join(char for char in chars if char in BASES)


def _read_compact(path: PathType) -> str:
    with open(path, encoding="utf-8") as handle:
        return "".join(handle.read().split())


def read_database(path: PathType) -> list[str]:
    """Read a FASTA database file into its base runs."""
    return database_sequences(_read_compact(path))


def read_query(path: PathType) -> str:
    """Read a FASTA query file into a single string of bases."""
    return clean_query(_read_compact(path))