# nucleoscan

Small command-line tools and a library for nucleotide sequences in FASTA
format:

- **k-mer database search** (`nucleoscan.blast`, `nucleoscan.report`):
  index database sequences by k-mer, look up a query, join consecutive
  k-mer hits into extended segments, merge nearby segments and report
  identities and query coverage for each hit.
- **pairwise alignment** (`nucleoscan.alignment`): fill a scoring table
  with match and mismatch scores and an affine gap penalty, and print two
  aligned strings.
- **gene finding** (`nucleoscan.markov`, `nucleoscan.genefind`): train a
  codon-transition Markov model on known non-coding and coding sequences,
  score test sequences and predict whether each is an open reading frame.

Only upper-case `A`, `C`, `G` and `T` count as bases anywhere in the package.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Commands

### nucleoscan-search

```
nucleoscan-search KMER_SIZE DATABASE QUERY
```

Reads `DATABASE` with `read_database` (whitespace is removed and the text is
split into runs of bases) and `QUERY` with `read_query` (every base
character is kept, header lines included). It prints the seed k-mer of each
extended segment as `Seq: ...` lines, then one block per hit: the database
sequence number and positions, the database section, the consensus and the
matched query section, all positions one-based. Lower-case bases in the
consensus are database bases bridging the gap between two merged segments.
Each block ends with the identity percentage and the coverage of the whole
query. The total elapsed time is printed last. A k-mer size below 1 or an
unreadable file is reported on standard error with exit status 1.

### nucleoscan-align

```
nucleoscan-align FASTA --gap-open N --gap-extend N --mismatch N --match N [--protein]
```

Reads the first four lines of `FASTA` as a name line, a sequence line, a
name line and a sequence line, prints the two sequences and then the two
aligned strings. Every cell of the scoring table adds one column to the
output, so each aligned string is `len(seq1) * len(seq2)` characters long.
With `--protein` it prints that amino acid alignment is not supported and
exits.

### nucleoscan-genefind

```
nucleoscan-genefind NONCODING CODING TEST [--known-scores CSV] [--predictions TXT]
                    [--noncoding-matrix CSV] [--coding-matrix CSV] [--cutoff X]
```

Reads the three FASTA files. In the two training files, records whose name
contains `Counterclockwise` are replaced by their reverse complement. Each
test sequence gets a length-normalised score, and one prediction line is
printed for it: `Open Reading Frame` when the score is at or above the
cutoff (default `-0.002`), otherwise `Non-Open Reading Frame`. The options
also write:

- `--known-scores`: CSV of the training scores, `NORF` rows then `ORF` rows;
- `--predictions`: the prediction lines with a header and a footer naming
  the cutoff;
- `--noncoding-matrix`, `--coding-matrix`: the transition proportion
  matrices as CSV.

## Library use

### FASTA helpers (`nucleoscan.fasta`)

- `read_records(path)` / `parse_records(lines)` return `Record(name,
  sequence)` objects; multi-line sequences are joined, carriage returns are
  dropped, the leading `>` is removed from names, and records whose sequence
  holds any character other than `A`, `C`, `G`, `T` are left out.
- `merge_lines(lines)`, `is_sequence(text)`, `reverse_complement(sequence)`
  and `orient(records)` are the building blocks. `reverse_complement` pairs
  any character other than `A`, `T` or `C` with `C`.
- `read_database(path)` / `database_sequences(chars)` and `read_query(path)`
  / `clean_query(chars)` prepare input for the k-mer search.

### k-mer search

```python
from nucleoscan.fasta import read_database, read_query
from nucleoscan.blast import KmerDatabase
from nucleoscan.report import format_results

database = KmerDatabase(read_database("db.fasta"), 5)
query = read_query("query.fasta")
hits = database.search(query)
print(format_results(query, hits))
```

Each `Hit` holds zero-based inclusive positions (`db_start`, `db_end`,
`query_start`, `query_end`), the `db_sequence`, `consensus` and
`query_sequence` strings and its `seeds`; `identities()`,
`identity_percent()` and `coverage_percent(query_length)` give the figures
shown in the report, and `format_hit(hit, query_length)` renders one block.
`mismatch_count(sequence)` counts lower-case bases; `match_percent(db_seq,
query_seq)` marks mismatches in the query with `*` and returns it with the
mismatch ratio.

### Alignment

```python
from nucleoscan.alignment import align, affine_gap_penalty

top, bottom = align("GATTACA", "GATCACA", -1, -2, -1, 2)
```

The arguments after the two sequences are the mismatch score, the gap-open
penalty, the gap-extension penalty and the match score.

### Markov model

```python
from nucleoscan.markov import MarkovModel, classify

model = MarkovModel(noncoding_sequences, coding_sequences)
score = model.normalized_score("ATGAAACCCGGGTTT")
print(classify(score, -0.002))
```

`codon_transitions`, `count_transitions` and `transition_probabilities` build
the proportion matrices, available as `model.noncoding` and `model.coding`;
`model.transitions_from(codon, coding=False)` returns one row and raises
`KeyError` for an unknown codon. `MarkovModel` raises `ValueError` when a
training set has no codon transition, and `normalized_score` raises it for
an empty sequence. `write_known_scores`, `write_predictions` and
`write_matrix` in `nucleoscan.genefind` write the report files.

## Limitations

- Alignment covers nucleic acids only; protein alignment is not supported.
- The aligner prints the column chosen at every table cell and does no
  traceback, so its output is not a conventional optimal alignment.

## Tests

```
pytest
```