import math

import pytest

from nucleoscan.blast import Hit, KmerDatabase, match_percent, mismatch_count

DB = "AAACCCGGGTTT"
MUTATED = "AAACCCAGGTTT"


def test_rejects_non_positive_kmer_size():
    with pytest.raises(ValueError):
        KmerDatabase(["ACGT"], 0)


def test_query_shorter_than_kmer_has_no_hits():
    assert KmerDatabase(["ACGTACGT"], 5).search("ACG") == []


def test_query_without_shared_kmers_has_no_hits():
    assert KmerDatabase(["AAAAAA"], 3).search("CCCCCC") == []


def test_exact_match_is_one_full_hit():
    query = "AACCGGTT"
    hits = KmerDatabase([query], 3).search(query)
    assert len(hits) == 1
    hit = hits[0]
    assert hit.seq_index == 0
    assert (hit.db_start, hit.db_end) == (0, len(query) - 1)
    assert (hit.query_start, hit.query_end) == (0, len(query) - 1)
    assert hit.consensus == query
    assert hit.query_sequence == query
    assert hit.db_sequence == query
    assert hit.seeds == (query[:3],)
    assert hit.identities() == len(query)
    assert hit.identity_percent() == 100.0
    assert hit.coverage_percent(len(query)) == 100.0
    assert hit.coverage_percent(2 * len(query)) == 50.0


def test_nearby_segments_merge_across_a_mismatch():
    hits = KmerDatabase([DB], 3).search(MUTATED)
    assert len(hits) == 1
    hit = hits[0]
    assert hit.consensus == "AAACCCcggGGTTT"
    assert hit.db_sequence == DB
    assert (hit.db_start, hit.db_end) == (0, len(DB) - 1)
    assert (hit.query_start, hit.query_end) == (0, len(MUTATED) - 1)
    assert len(hit.seeds) == 2
    assert hit.identities() == len(hit.consensus) - mismatch_count(hit.consensus)
    assert 0 < hit.identity_percent() < 100


def test_hit_reports_the_matching_database_sequence():
    database = KmerDatabase(["AAACCC", "GGGTTT"], 3)
    hits = database.search("GGGTTT")
    assert [hit.seq_index for hit in hits] == [1]
    assert hits[0].db_sequence == "GGGTTT"


def test_hit_is_immutable():
    hit = KmerDatabase(["AACCGGTT"], 3).search("AACCGGTT")[0]
    with pytest.raises(AttributeError):
        hit.consensus = "A"  # type: ignore[misc]
    assert hit.consensus == "AACCGGTT"


def test_hit_percentages_from_fields():
    hit = Hit(
        seq_index=0,
        db_start=0,
        db_end=3,
        query_start=0,
        query_end=3,
        db_sequence="ACGT",
        consensus="ACgT",
        query_sequence="ACGT",
        seeds=("ACG",),
    )
    assert hit.identities() == len("ACgT") - mismatch_count("ACgT")
    assert hit.identity_percent() == hit.identities() / len("ACGT") * 100


def test_mismatch_count_counts_lower_case_bases():
    assert mismatch_count("ACGT") == 0
    assert mismatch_count("acgt") == len("acgt")
    assert mismatch_count("AcGtN") == 2


def test_match_percent_identical():
    assert match_percent("ACGT", "ACGT") == ("ACGT", 0.0)


def test_match_percent_marks_mismatches():
    marked, ratio = match_percent("ACGT", "AGGT")
    assert "*" in marked
    assert marked.replace("*", "") == "AGGT"
    assert ratio * len(marked) == pytest.approx(marked.count("*"))


def test_match_percent_short_query_is_all_mismatches():
    marked, ratio = match_percent("ACG", "")
    assert marked == "*" * len("ACG")
    assert ratio == 1.0


def test_match_percent_of_nothing_is_nan():
    marked, ratio = match_percent("", "")
    assert marked == ""
    assert math.isnan(ratio)