"""Text report and command line for the k-mer database search."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Iterable, Sequence

from nucleoscan.blast import Hit, KmerDatabase
from nucleoscan.fasta import read_database, read_query

NOTE = (
    "[NOTE] Bases in lower case indicate a mismatch between database string "
    "and query string. "
)


def format_hit(hit: Hit, query_length: int) -> str:
    """Render one hit as a block of report lines (positions are one-based)."""
    identities = hit.identities()
    lines = [
        "",
        f"[Match found at DB seq_{hit.seq_index + 1} From positions: "
        f"{hit.db_start + 1} to {hit.db_end + 1}.",
        f"Db Sequence:        {hit.db_sequence}",
        "",
        f"Consensus sequence: {hit.consensus}",
        "",
        f"Query match from positions: {hit.query_start + 1} to {hit.query_end + 1}",
        f"Query sequence:     {hit.query_sequence}",
        "",
        f"{hit.identity_percent():g}% Identities ({identities}/{len(hit.consensus)}),  "
        f"{hit.coverage_percent(query_length):g}% match to query overall.]",
        "",
    ]
    return "\n".join(lines)


def format_results(query: str, hits: Iterable[Hit]) -> str:
    """Render the full results section for a query and its hits."""
    parts = [
        "",
        "Printing results and query coverage: ",
        "",
        f"Complete Query sequence: {query}",
        "",
        NOTE,
    ]
    parts.extend(format_hit(hit, len(query)) for hit in hits)
    return "\n".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Search a query FASTA file against a FASTA database and print the hits."""
    parser = argparse.ArgumentParser(
        prog="nucleoscan-search",
        description="Seeded k-mer search of a query sequence against a database.",
    )
    parser.add_argument("kmer_size", type=int, help="length of the k-mers used as seeds")
    parser.add_argument("database", help="database file in FASTA format")
    parser.add_argument("query", help="query sequence file in FASTA format")
    args = parser.parse_args(argv)

    started = time.perf_counter()
    try:
        sequences = read_database(args.database)
    except OSError:
        print(
            "[ERROR] error opening sequence database file, terminating program.",
            file=sys.stderr,
        )
        return 1
    print(f"Database file read in: {len(sequences)} sequences.")

    try:
        query = read_query(args.query)
    except OSError:
        print("[ERROR], error with Query file", file=sys.stderr)
        return 1
    print("Query read in and processed!")

    try:
        database = KmerDatabase(sequences, args.kmer_size)
    except ValueError as error:
        print(f"[ERROR] {error}", file=sys.stderr)
        return 1

    print("Beginning search of database...")
    hits = database.search(query)
    print("Ok, now printing our unextended kmers at their first found position: ")
    for hit in hits:
        for seed in hit.seeds:
            print(f"Seq: {seed}")
    print()
    print("Final search results: ", end="")
    print(format_results(query, hits))
    elapsed = (time.perf_counter() - started) * 1_000_000
    print(f"Total time elapsed (microseconds): {elapsed:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())